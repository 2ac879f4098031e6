"""Contratos (interfaces) do domínio."""

from .fares import ICostCalculationStrategy
from .messaging import ISystemEventBus, INotificationDispatcher
from .observer import IStockObserver, IStockSubject

__all__ = [
    'ICostCalculationStrategy',
    'ISystemEventBus',
    'INotificationDispatcher',
    'IStockObserver',
    'IStockSubject'
]
