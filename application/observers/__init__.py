"""Observadores de cotações: trader passivo e robô por limiar."""
from .base import BaseStockObserver
from .trader import TraderObserver
from .trading_bot import TradingBotObserver, TRADING_SIGNAL_EVENT

__all__ = [
    'BaseStockObserver',
    'TraderObserver',
    'TradingBotObserver',
    'TRADING_SIGNAL_EVENT'
]
