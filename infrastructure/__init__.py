"""Camada de infraestrutura."""

# Messaging
from .messaging.dispatcher import NotificationDispatcher
from .messaging.event_bus import LocalEventBus

# Registry
from .registry.subscriptions import SubscriptionRegistry

# Store
from .store.prices import PriceStore

__all__ = [
    'NotificationDispatcher',
    'LocalEventBus',
    'SubscriptionRegistry',
    'PriceStore'
]
