"""Testes do armazenamento de preços."""

import math

import pytest

from core.contracts.messaging import INotificationDispatcher
from core.entities.price import PriceUpdate
from core.exceptions import DispatcherShutdownError, InvalidPriceError
from infrastructure.store.prices import PriceStore


class FakeDispatcher(INotificationDispatcher):
    """Guarda as chamadas de dispatch sem agendar nada."""

    def __init__(self):
        self.calls = []
        self._shutdown = False

    def dispatch(self, symbol, price):
        self.calls.append((symbol, price))
        return 0

    @property
    def is_shutdown(self):
        return self._shutdown

    def shutdown(self, wait=True):
        self._shutdown = True


class ClosingDispatcher(FakeDispatcher):
    """Passa na checagem de shutdown mas fecha no momento do dispatch."""

    def dispatch(self, symbol, price):
        self._shutdown = True
        raise DispatcherShutdownError("encerrado durante o dispatch")


class TestPriceStore:
    """set_price / get_price."""

    def test_unknown_symbol_returns_none(self):
        store = PriceStore(FakeDispatcher())

        assert store.get_price("AAPL") is None

    def test_set_price_records_and_dispatches(self):
        dispatcher = FakeDispatcher()
        store = PriceStore(dispatcher)

        update = store.set_price("AAPL", 185.0)

        assert store.get_price("AAPL") == 185.0
        assert update.symbol == "AAPL"
        assert update.price == 185.0
        assert dispatcher.calls == [("AAPL", 185.0)]

    def test_last_write_wins(self):
        store = PriceStore(FakeDispatcher())

        store.set_price("AAPL", 185.0)
        store.set_price("AAPL", 192.0)

        assert store.get_price("AAPL") == 192.0
        assert store.get_last_update("AAPL").price == 192.0

    def test_zero_is_accepted(self):
        store = PriceStore(FakeDispatcher())

        store.set_price("AAPL", 0.0)

        assert store.get_price("AAPL") == 0.0

    @pytest.mark.parametrize("price", [-0.01, -1.0, -1000.0])
    def test_negative_price_rejected_and_state_unchanged(self, price):
        dispatcher = FakeDispatcher()
        store = PriceStore(dispatcher)
        store.set_price("AAPL", 185.0)

        with pytest.raises(InvalidPriceError) as exc_info:
            store.set_price("AAPL", price)

        assert exc_info.value.symbol == "AAPL"
        assert exc_info.value.price == price
        assert store.get_price("AAPL") == 185.0
        assert dispatcher.calls == [("AAPL", 185.0)]

    def test_negative_price_on_unknown_symbol_stays_unknown(self):
        store = PriceStore(FakeDispatcher())

        with pytest.raises(InvalidPriceError):
            store.set_price("TSLA", -5.0)

        assert store.get_price("TSLA") is None

    def test_nan_rejected(self):
        store = PriceStore(FakeDispatcher())

        with pytest.raises(InvalidPriceError):
            store.set_price("AAPL", math.nan)

    def test_rejected_after_shutdown(self):
        dispatcher = FakeDispatcher()
        store = PriceStore(dispatcher)
        store.set_price("AAPL", 185.0)
        dispatcher.shutdown()

        with pytest.raises(DispatcherShutdownError):
            store.set_price("AAPL", 200.0)

        assert store.get_price("AAPL") == 185.0

    def test_stats(self):
        store = PriceStore(FakeDispatcher())
        store.set_price("AAPL", 1.0)
        store.set_price("GOOGL", 2.0)
        with pytest.raises(InvalidPriceError):
            store.set_price("AAPL", -1.0)

        stats = store.get_stats()

        assert stats['accepted'] == 2
        assert stats['rejected'] == 1
        assert stats['symbols'] == ["AAPL", "GOOGL"]

    def test_rejected_by_dispatch_restores_previous_price(self):
        dispatcher = ClosingDispatcher()
        store = PriceStore(dispatcher)
        store.prices["AAPL"] = PriceUpdate(symbol="AAPL", price=185.0)

        with pytest.raises(DispatcherShutdownError):
            store.set_price("AAPL", 200.0)
        dispatcher._shutdown = False
        with pytest.raises(DispatcherShutdownError):
            store.set_price("TSLA", 10.0)

        assert store.get_price("AAPL") == 185.0
        assert store.get_price("TSLA") is None
        assert store.get_stats()['accepted'] == 0
