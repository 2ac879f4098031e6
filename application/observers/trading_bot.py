# application/observers/trading_bot.py
"""Robô de trading baseado em limiar por símbolo."""
import logging
from typing import Dict, Optional

from core.contracts.messaging import ISystemEventBus
from core.entities.signal import Signal, SignalLevel, SignalSource, TradingSignal
from core.rules.threshold import DEFAULT_SELL_RATIO, evaluate_threshold_rule

from .base import BaseStockObserver

logger = logging.getLogger(__name__)

TRADING_SIGNAL_EVENT = "TRADING_SIGNAL"


class TradingBotObserver(BaseStockObserver):
    """
    Avalia a regra de compra/venda a cada cotação:
    - preço acima do limiar: COMPRA
    - preço abaixo de sell_ratio * limiar: VENDA
    - símbolo sem limiar: ignorado

    O sinal não é guardado; BUY/SELL são publicados no event bus (se houver).
    """

    def __init__(self, name: str, event_bus: Optional[ISystemEventBus] = None,
                 sell_ratio: float = DEFAULT_SELL_RATIO):
        super().__init__(name)
        self.event_bus = event_bus
        self.sell_ratio = sell_ratio
        self._thresholds: Dict[str, float] = {}

    def set_threshold(self, symbol: str, threshold: float) -> None:
        with self._lock:
            self._thresholds[symbol] = threshold

    def get_threshold(self, symbol: str) -> Optional[float]:
        with self._lock:
            return self._thresholds.get(symbol)

    def update(self, symbol: str, price: float) -> TradingSignal:
        threshold = self.get_threshold(symbol)
        signal = evaluate_threshold_rule(price, threshold, self.sell_ratio)

        if signal == TradingSignal.BUY_SIGNAL:
            logger.info(
                f"[Robô {self.name}] COMPRA da ação {symbol} a {price} (limiar: {threshold})"
            )
        elif signal == TradingSignal.SELL_SIGNAL:
            logger.info(f"[Robô {self.name}] VENDA da ação {symbol} a {price}")
        else:
            return signal

        self._publish(signal, symbol, price, threshold)
        return signal

    def _publish(self, signal: TradingSignal, symbol: str, price: float, threshold: float) -> None:
        if self.event_bus is None:
            return

        action = "COMPRA" if signal == TradingSignal.BUY_SIGNAL else "VENDA"
        self.event_bus.publish(TRADING_SIGNAL_EVENT, Signal(
            source=SignalSource.TRADING_BOT,
            level=SignalLevel.ALERT,
            message=f"{action} {symbol} @ {price}",
            details={
                'bot': self.name,
                'signal': signal.value,
                'symbol': symbol,
                'price': price,
                'threshold': threshold
            }
        ))
