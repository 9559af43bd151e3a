"""In-process fan-out of lifecycle events to connected observers."""

import asyncio
import itertools
from typing import Dict, Optional

from pkg.logger.logger import Logger
from .interface import ISubscriptionHub
from .type import HubConfig, LifecycleEvent

_subscription_ids = itertools.count(1)


class Subscription:
    """One observer's bounded inbox."""

    def __init__(self, queue_size: int):
        self.id = next(_subscription_ids)
        self.queue: "asyncio.Queue[LifecycleEvent]" = asyncio.Queue(maxsize=queue_size)

    async def get(self) -> LifecycleEvent:
        return await self.queue.get()

    def __repr__(self) -> str:
        return f"<Subscription id={self.id} pending={self.queue.qsize()}>"


class Hub(ISubscriptionHub):
    """Broadcast hub.

    ``publish`` only does ``put_nowait`` on each subscriber queue, so a slow
    observer never delays the publisher or the other observers. When an
    observer's queue is full the event is dropped for that observer alone.
    """

    def __init__(self, config: Optional[HubConfig] = None, logger: Optional[Logger] = None):
        self.config = config or HubConfig()
        self.logger = logger
        self._subscribers: Dict[int, Subscription] = {}

    def subscribe(self) -> Subscription:
        sub = Subscription(self.config.queue_size)
        self._subscribers[sub.id] = sub
        if self.logger:
            self.logger.debug(f"internal.notifier.hub.subscribe: {sub.id} ({len(self._subscribers)} connected)")
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        self._subscribers.pop(subscription.id, None)
        if self.logger:
            self.logger.debug(
                f"internal.notifier.hub.unsubscribe: {subscription.id} ({len(self._subscribers)} connected)"
            )

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def publish(self, event: LifecycleEvent) -> None:
        # Snapshot: subscribers may come and go while we iterate
        for sub in list(self._subscribers.values()):
            try:
                sub.queue.put_nowait(event)
            except asyncio.QueueFull:
                if self.logger:
                    self.logger.warning(
                        f"internal.notifier.hub.publish: subscriber {sub.id} is full, dropped {event.action.value}"
                    )


__all__ = ["Hub", "Subscription"]
