#core/rules/threshold.py
"""Regra de compra/venda por limiar de preço."""
from typing import Optional

from core.entities.signal import TradingSignal

DEFAULT_SELL_RATIO = 0.9


def evaluate_threshold_rule(price: float, threshold: Optional[float],
                            sell_ratio: float = DEFAULT_SELL_RATIO) -> TradingSignal:
    """
    Avalia a regra do robô para uma cotação.

    - sem limiar configurado: NO_SIGNAL
    - price > threshold: BUY_SIGNAL
    - price < threshold * sell_ratio: SELL_SIGNAL
    - caso contrário: NO_SIGNAL

    Args:
        price: Cotação recebida
        threshold: Limiar configurado para o símbolo (None se ausente)
        sell_ratio: Fração do limiar abaixo da qual o robô vende

    Returns:
        Sinal resultante
    """
    if threshold is None:
        return TradingSignal.NO_SIGNAL
    if price > threshold:
        return TradingSignal.BUY_SIGNAL
    if price < threshold * sell_ratio:
        return TradingSignal.SELL_SIGNAL
    return TradingSignal.NO_SIGNAL
