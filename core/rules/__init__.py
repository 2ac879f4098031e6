"""Regras puras de decisão usadas pelos observadores."""

from .threshold import DEFAULT_SELL_RATIO, evaluate_threshold_rule

__all__ = ['DEFAULT_SELL_RATIO', 'evaluate_threshold_rule']
