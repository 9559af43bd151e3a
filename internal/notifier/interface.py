"""Interfaces for the change notifier.

The post use case only sees INotifier; the transport subscribes through
ISubscriptionHub.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .type import LifecycleEvent

if TYPE_CHECKING:
    from .hub import Subscription


@runtime_checkable
class INotifier(Protocol):
    def publish(self, event: LifecycleEvent) -> None:
        """Broadcast to connected observers. Never blocks, never raises."""
        ...


@runtime_checkable
class ISubscriptionHub(INotifier, Protocol):
    def subscribe(self) -> "Subscription":
        ...

    def unsubscribe(self, subscription: "Subscription") -> None:
        ...


__all__ = ["INotifier", "ISubscriptionHub"]
