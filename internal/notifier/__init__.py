"""Change notifier: fans post lifecycle events out to connected observers."""

from .interface import INotifier, ISubscriptionHub
from .type import Action, LifecycleEvent, HubConfig
from .hub import Hub, Subscription
from .relay import RedisRelay

__all__ = [
    "INotifier",
    "ISubscriptionHub",
    "Action",
    "LifecycleEvent",
    "HubConfig",
    "Hub",
    "Subscription",
    "RedisRelay",
]
