# application/observers/trader.py
"""Observador passivo: apenas registra as cotações recebidas."""
import logging

from .base import BaseStockObserver

logger = logging.getLogger(__name__)


class TraderObserver(BaseStockObserver):
    """Trader humano que só acompanha os preços."""

    def update(self, symbol: str, price: float) -> None:
        logger.info(f"[Trader {self.name}] Ação {symbol} agora custa: {price}")
