"""Fixtures compartilhadas dos testes de unidade."""
import pytest

from application.observers.base import BaseStockObserver
from application.services.exchange import StockExchange


class RecordingObserver(BaseStockObserver):
    """Observador de teste que guarda cada entrega recebida."""

    def __init__(self, name, symbols=()):
        super().__init__(name)
        self.received = []
        for symbol in symbols:
            self.subscribe_to(symbol)

    def update(self, symbol, price):
        with self._lock:
            self.received.append((symbol, price))

    def deliveries(self):
        with self._lock:
            return list(self.received)


@pytest.fixture
def make_recorder():
    def _make(name="rec", symbols=()):
        return RecordingObserver(name, symbols)
    return _make


@pytest.fixture
def exchange():
    exchange = StockExchange()
    yield exchange
    exchange.shutdown()
