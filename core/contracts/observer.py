#core/contracts/observer.py
"""Interfaces do padrão observer da bolsa."""
from abc import ABC, abstractmethod
from typing import Any, Optional, Set

from core.entities.price import PriceUpdate


class IStockObserver(ABC):
    """
    Interface para observadores de cotações.
    O registro identifica observadores pela identidade do objeto; __eq__ não é usado.
    """

    @abstractmethod
    def update(self, symbol: str, price: float) -> Any:
        """Recebe uma nova cotação. O retorno é ignorado pelo despachante."""
        pass

    @abstractmethod
    def get_subscribed_symbols(self) -> Set[str]:
        """Retorna os símbolos que o próprio observador acompanha."""
        pass


class IStockSubject(ABC):
    """Interface para o sujeito observado (a bolsa)."""

    @abstractmethod
    def register_observer(self, observer: IStockObserver, symbol: str) -> None:
        """Inscreve um observador em um símbolo."""
        pass

    @abstractmethod
    def remove_observer(self, observer: IStockObserver, symbol: str) -> None:
        """Remove a inscrição de um observador em um símbolo."""
        pass

    @abstractmethod
    def notify_observers(self, symbol: str, price: float) -> int:
        """Notifica os assinantes do símbolo."""
        pass

    @abstractmethod
    def set_stock_price(self, symbol: str, price: float) -> PriceUpdate:
        """Registra um novo preço, notifica os assinantes e retorna a atualização."""
        pass

    @abstractmethod
    def get_stock_price(self, symbol: str) -> Optional[float]:
        """Retorna o último preço conhecido."""
        pass
