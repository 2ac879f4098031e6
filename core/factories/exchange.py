#core/factories/exchange.py
"""Factory para montar a bolsa a partir da configuração."""
from typing import Dict, Any, Optional

from core.contracts.messaging import ISystemEventBus
from infrastructure.messaging.dispatcher import NotificationDispatcher
from infrastructure.messaging.event_bus import LocalEventBus
from infrastructure.registry.subscriptions import SubscriptionRegistry
from application.observers.trader import TraderObserver
from application.observers.trading_bot import TradingBotObserver
from application.services.exchange import StockExchange


class ExchangeFactory:
    """Factory para a bolsa e seus observadores."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config

    def create_event_bus(self) -> ISystemEventBus:
        return LocalEventBus()

    def create_exchange(self) -> StockExchange:
        """Cria uma bolsa com registro e despachante próprios."""
        dispatcher_config = self.config.get('dispatcher', {})
        registry = SubscriptionRegistry()
        dispatcher = NotificationDispatcher(
            registry,
            max_workers=dispatcher_config.get('max_workers'),
            thread_name_prefix=dispatcher_config.get('thread_name_prefix', 'stock-notify')
        )
        return StockExchange(registry=registry, dispatcher=dispatcher)

    def create_trader(self, name: str) -> TraderObserver:
        return TraderObserver(name)

    def create_trading_bot(self, name: str,
                           event_bus: Optional[ISystemEventBus] = None) -> TradingBotObserver:
        """Cria um robô com o sell_ratio configurado."""
        sell_ratio = self.config.get('trading_bot', {}).get('sell_ratio', 0.9)
        return TradingBotObserver(name, event_bus=event_bus, sell_ratio=sell_ratio)
