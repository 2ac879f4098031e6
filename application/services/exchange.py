# application/services/exchange.py
"""Fachada da bolsa: registro de assinaturas, preços e despacho."""
import logging
from typing import Any, Dict, Optional

from core.contracts.observer import IStockObserver, IStockSubject
from core.entities.price import PriceUpdate
from infrastructure.messaging.dispatcher import NotificationDispatcher
from infrastructure.registry.subscriptions import SubscriptionRegistry
from infrastructure.store.prices import PriceStore

logger = logging.getLogger(__name__)


class StockExchange(IStockSubject):
    """
    Sujeito observado. Cada instância possui seu próprio registro,
    armazenamento de preços e despachante (nada global).
    """

    def __init__(self, registry: Optional[SubscriptionRegistry] = None,
                 dispatcher: Optional[NotificationDispatcher] = None,
                 max_workers: Optional[int] = None):
        """
        Args:
            registry: Registro de assinaturas (um novo é criado se omitido)
            dispatcher: Despachante; se omitido, é criado sobre o registro
            max_workers: Limite do pool quando o despachante é criado aqui
        """
        self.registry = registry or SubscriptionRegistry()
        self.dispatcher = dispatcher or NotificationDispatcher(self.registry, max_workers=max_workers)
        self.store = PriceStore(self.dispatcher)

    def register_observer(self, observer: IStockObserver, symbol: str) -> None:
        self.registry.register(observer, symbol)

    def remove_observer(self, observer: IStockObserver, symbol: str) -> None:
        self.registry.remove(observer, symbol)

    def notify_observers(self, symbol: str, price: float) -> int:
        return self.dispatcher.dispatch(symbol, price)

    def set_stock_price(self, symbol: str, price: float) -> PriceUpdate:
        """
        Raises:
            InvalidPriceError: preço negativo
            DispatcherShutdownError: bolsa já encerrada
        """
        return self.store.set_price(symbol, price)

    def get_stock_price(self, symbol: str) -> Optional[float]:
        return self.store.get_price(symbol)

    def wait_until_idle(self, timeout: Optional[float] = None) -> bool:
        return self.dispatcher.wait_until_idle(timeout)

    def shutdown(self, wait: bool = True) -> None:
        """Drena e encerra o pool de entregas."""
        self.dispatcher.shutdown(wait=wait)

    def get_stats(self) -> Dict[str, Any]:
        return {
            'prices': self.store.get_stats(),
            'dispatcher': self.dispatcher.get_stats(),
            'symbols_with_subscribers': sorted(self.registry.symbols())
        }
