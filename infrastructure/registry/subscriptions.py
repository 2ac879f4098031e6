# infrastructure/registry/subscriptions.py
"""Registro de assinaturas símbolo -> observadores."""
import logging
import threading
import weakref
from typing import Dict, List, Set

from core.contracts.observer import IStockObserver

logger = logging.getLogger(__name__)


class SubscriptionRegistry:
    """
    Mapeia cada símbolo aos observadores inscritos.
    Thread-safe. Os observadores são referenciados fracamente: o registro
    nunca controla o ciclo de vida deles.

    A identidade é a do objeto (id + weakref), nunca __eq__/__hash__:
    dois observadores iguais por valor continuam sendo assinantes distintos.
    """

    __slots__ = ['subscribers', 'lock']

    def __init__(self):
        self.subscribers: Dict[str, Dict[int, "weakref.ref[IStockObserver]"]] = {}
        self.lock = threading.RLock()

    def register(self, observer: IStockObserver, symbol: str) -> None:
        """Inscreve o observador no símbolo. Idempotente (por identidade)."""
        with self.lock:
            refs = self.subscribers.setdefault(symbol, {})
            existing = refs.get(id(observer))
            if existing is not None and existing() is observer:
                logger.debug(f"{observer!r} já inscrito em {symbol}")
                return
            # id reaproveitado de um observador já coletado é sobrescrito
            refs[id(observer)] = weakref.ref(observer)
        logger.info(f"Observador inscrito na ação: {symbol}")

    def remove(self, observer: IStockObserver, symbol: str) -> None:
        """Remove a inscrição se existir. Nunca levanta erro."""
        with self.lock:
            refs = self.subscribers.get(symbol)
            if refs is None:
                return
            existing = refs.get(id(observer))
            if existing is None or existing() is not observer:
                return
            del refs[id(observer)]
        logger.info(f"Observador removido da ação: {symbol}")

    def subscribers_of(self, symbol: str) -> List[IStockObserver]:
        """
        Retorna uma cópia dos assinantes vivos (possivelmente vazia, sem
        repetições). A cópia pode ser iterada sem segurar o lock.
        """
        with self.lock:
            return self._live(symbol)

    def symbols(self) -> Set[str]:
        """Símbolos com pelo menos um assinante vivo."""
        with self.lock:
            return {symbol for symbol in list(self.subscribers) if self._live(symbol)}

    def _live(self, symbol: str) -> List[IStockObserver]:
        refs = self.subscribers.get(symbol)
        if not refs:
            return []

        live = []
        for key, ref in list(refs.items()):
            observer = ref()
            if observer is None:
                del refs[key]
            else:
                live.append(observer)
        return live
