# application/observers/base.py
"""Base comum dos observadores de cotações."""
import threading
from typing import Set

from core.contracts.observer import IStockObserver


class BaseStockObserver(IStockObserver):
    """Guarda o nome e o conjunto de símbolos acompanhados pelo observador."""

    def __init__(self, name: str):
        self.name = name
        self._symbols: Set[str] = set()
        self._lock = threading.Lock()

    def subscribe_to(self, symbol: str) -> None:
        with self._lock:
            self._symbols.add(symbol)

    def unsubscribe_from(self, symbol: str) -> None:
        """
        Deixa de acompanhar o símbolo. Não altera o registro da bolsa:
        o despachante passa a ignorar este observador para o símbolo.
        """
        with self._lock:
            self._symbols.discard(symbol)

    def get_subscribed_symbols(self) -> Set[str]:
        with self._lock:
            return set(self._symbols)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
