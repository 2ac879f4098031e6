"""Factories para criação de componentes."""
from .exchange import ExchangeFactory

__all__ = ['ExchangeFactory']
