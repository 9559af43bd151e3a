"""Redis bridge so that every worker's observers receive every event."""

import asyncio
from typing import Optional, Set

from pkg.logger.logger import Logger
from pkg.redis.interface import IPubSub
from internal.model.constant import NOTIFIER_REDIS_CHANNEL
from .constant import RECONNECT_DELAY_MAX, RECONNECT_DELAY_MIN
from .hub import Hub
from .interface import INotifier
from .type import LifecycleEvent


class RedisRelay(INotifier):
    """Publishes events to Redis and feeds events read back from Redis into the local hub.

    Local observers are served by the listener, including for events this
    worker published, so each event reaches each observer exactly once.
    When the listener has lost its subscription, events are handed to the
    local hub directly until it resubscribes.
    """

    def __init__(
        self,
        hub: Hub,
        pubsub: IPubSub,
        channel: str = NOTIFIER_REDIS_CHANNEL,
        logger: Optional[Logger] = None,
        reconnect_delay: float = RECONNECT_DELAY_MIN,
        max_reconnect_delay: float = RECONNECT_DELAY_MAX,
    ):
        self.hub = hub
        self.pubsub = pubsub
        self.channel = channel
        self.logger = logger
        self.reconnect_delay = reconnect_delay
        self.max_reconnect_delay = max_reconnect_delay
        self._listening = False
        self._listener: Optional[asyncio.Task] = None
        self._pending: Set[asyncio.Task] = set()

    @property
    def is_listening(self) -> bool:
        return self._listening

    def start(self) -> None:
        if self._listener is None:
            self._listening = True
            self._listener = asyncio.create_task(self._listen(), name="notifier-redis-listener")

    def publish(self, event: LifecycleEvent) -> None:
        delivered = not self._listening
        if delivered:
            self.hub.publish(event)

        task = asyncio.create_task(self._forward(event, delivered))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _forward(self, event: LifecycleEvent, delivered: bool = False) -> None:
        try:
            await self.pubsub.publish(self.channel, event.to_json())
        except Exception as e:
            if self.logger:
                self.logger.error(f"internal.notifier.relay.publish: {e}; delivering locally")
            # Redis is down: keep this worker's observers informed at least
            if not delivered:
                self.hub.publish(event)

    async def _listen(self) -> None:
        delay = self.reconnect_delay
        while True:
            self._listening = True
            try:
                async for raw in self.pubsub.listen(self.channel):
                    delay = self.reconnect_delay
                    try:
                        event = LifecycleEvent.from_json(raw)
                    except ValueError as e:
                        if self.logger:
                            self.logger.warning(f"internal.notifier.relay.listen: bad message skipped: {e}")
                        continue
                    self.hub.publish(event)
                if self.logger:
                    self.logger.warning("internal.notifier.relay.listen: subscription ended")
            except asyncio.CancelledError:
                raise
            except Exception as e:
                if self.logger:
                    self.logger.error(f"internal.notifier.relay.listen: subscription lost: {e}")

            self._listening = False
            if self.logger:
                self.logger.info(f"internal.notifier.relay.listen: resubscribing in {delay}s")
            await asyncio.sleep(delay)
            delay = min(delay * 2, self.max_reconnect_delay)

    async def close(self) -> None:
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

        if self._listener is not None:
            self._listener.cancel()
            try:
                await self._listener
            except asyncio.CancelledError:
                pass
            self._listener = None
        self._listening = False


__all__ = ["RedisRelay"]
