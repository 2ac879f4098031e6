"""Serviços de aplicação."""
from .exchange import StockExchange

__all__ = ['StockExchange']
