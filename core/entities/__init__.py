"""
Entidades do domínio - representam conceitos do negócio.
Todas são imutáveis (frozen=True) para garantir integridade.
"""

from .price import PriceUpdate
from .signal import Signal, SignalSource, SignalLevel, TradingSignal
from .fare import TransportMode, ServiceClass

__all__ = [
    'PriceUpdate',
    'Signal', 'SignalSource', 'SignalLevel', 'TradingSignal',
    'TransportMode', 'ServiceClass'
]
