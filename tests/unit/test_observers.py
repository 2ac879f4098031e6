"""Testes dos observadores (trader passivo e robô)."""

import logging

from application.observers import TraderObserver, TradingBotObserver, TRADING_SIGNAL_EVENT
from core.entities.signal import Signal, SignalSource, TradingSignal
from infrastructure.messaging.event_bus import LocalEventBus


class TestTraderObserver:
    """Observador passivo."""

    def test_subscribe_and_unsubscribe(self):
        trader = TraderObserver("T1")
        trader.subscribe_to("AAPL")
        trader.subscribe_to("GOOGL")
        trader.unsubscribe_from("GOOGL")
        trader.unsubscribe_from("MSFT")

        assert trader.get_subscribed_symbols() == {"AAPL"}

    def test_subscribed_symbols_is_a_copy(self):
        trader = TraderObserver("T1")
        trader.subscribe_to("AAPL")

        trader.get_subscribed_symbols().add("TSLA")

        assert trader.get_subscribed_symbols() == {"AAPL"}

    def test_update_logs_notification(self, caplog):
        trader = TraderObserver("T1")

        with caplog.at_level(logging.INFO):
            result = trader.update("AAPL", 185.0)

        assert result is None
        assert "[Trader T1] Ação AAPL agora custa: 185.0" in caplog.text


class TestTradingBotObserver:
    """Robô por limiar."""

    def _bot(self, event_bus=None):
        bot = TradingBotObserver("Bot", event_bus=event_bus)
        bot.subscribe_to("AAPL")
        bot.set_threshold("AAPL", 190.0)
        return bot

    def test_update_returns_rule_result(self):
        bot = self._bot()

        assert bot.update("AAPL", 192.0) == TradingSignal.BUY_SIGNAL
        assert bot.update("AAPL", 170.0) == TradingSignal.SELL_SIGNAL
        assert bot.update("AAPL", 180.0) == TradingSignal.NO_SIGNAL

    def test_symbol_without_threshold_is_ignored(self, caplog):
        bot = self._bot()
        bot.subscribe_to("MSFT")

        with caplog.at_level(logging.INFO):
            result = bot.update("MSFT", 1_000_000.0)

        assert result == TradingSignal.NO_SIGNAL
        assert "[Robô Bot]" not in caplog.text

    def test_threshold_can_be_replaced(self):
        bot = self._bot()
        bot.set_threshold("AAPL", 200.0)

        assert bot.get_threshold("AAPL") == 200.0
        assert bot.update("AAPL", 192.0) == TradingSignal.NO_SIGNAL

    def test_buy_and_sell_are_logged(self, caplog):
        bot = self._bot()

        with caplog.at_level(logging.INFO):
            bot.update("AAPL", 192.0)
            bot.update("AAPL", 170.0)

        assert "COMPRA da ação AAPL a 192.0 (limiar: 190.0)" in caplog.text
        assert "VENDA da ação AAPL a 170.0" in caplog.text

    def test_signals_published_on_event_bus(self):
        event_bus = LocalEventBus()
        published = []
        event_bus.subscribe(TRADING_SIGNAL_EVENT, published.append)
        bot = self._bot(event_bus)

        bot.update("AAPL", 192.0)
        bot.update("AAPL", 180.0)
        bot.update("AAPL", 170.0)

        assert [s.details['signal'] for s in published] == ["BUY_SIGNAL", "SELL_SIGNAL"]
        assert all(isinstance(s, Signal) for s in published)
        assert published[0].source == SignalSource.TRADING_BOT
        assert published[0].details['threshold'] == 190.0
        assert published[0].details['bot'] == "Bot"

    def test_custom_sell_ratio(self):
        bot = TradingBotObserver("Bot", sell_ratio=0.5)
        bot.set_threshold("AAPL", 100.0)

        assert bot.update("AAPL", 60.0) == TradingSignal.NO_SIGNAL
        assert bot.update("AAPL", 49.0) == TradingSignal.SELL_SIGNAL
