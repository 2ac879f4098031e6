# infrastructure/store/prices.py
"""Armazenamento em memória do último preço por símbolo."""
import logging
import math
import threading
from typing import Any, Dict, Optional

from core.contracts.messaging import INotificationDispatcher
from core.entities.price import PriceUpdate
from core.exceptions import DispatcherShutdownError, InvalidPriceError

logger = logging.getLogger(__name__)


class PriceStore:
    """
    Último preço conhecido por símbolo (sem histórico).
    Toda escrita aceita é repassada ao despachante.
    """

    __slots__ = ['dispatcher', 'prices', 'lock', 'stats']

    def __init__(self, dispatcher: INotificationDispatcher):
        self.dispatcher = dispatcher
        self.prices: Dict[str, PriceUpdate] = {}
        self.lock = threading.RLock()

        self.stats = {
            'accepted': 0,
            'rejected': 0
        }

    def set_price(self, symbol: str, price: float) -> PriceUpdate:
        """
        Registra o preço e agenda a notificação dos assinantes.

        Args:
            symbol: Símbolo do ativo
            price: Novo preço (não negativo)

        Returns:
            A atualização registrada

        Raises:
            InvalidPriceError: Se o preço for negativo; o valor anterior é mantido
            DispatcherShutdownError: Se o despachante já foi encerrado
        """
        if price < 0 or math.isnan(price):
            with self.lock:
                self.stats['rejected'] += 1
            logger.warning(f"Erro: o preço da ação {symbol} não pode ser negativo ({price})")
            raise InvalidPriceError(symbol, price)

        with self.lock:
            if self.dispatcher.is_shutdown:
                raise DispatcherShutdownError(
                    f"Bolsa encerrada: atualização de {symbol} rejeitada"
                )

            update = PriceUpdate(symbol=symbol, price=price)
            previous = self.prices.get(symbol)
            self.prices[symbol] = update

            # dispatch verifica o encerramento e agenda de forma atômica;
            # se o despachante fechou depois da checagem acima, desfaz a escrita
            try:
                self.dispatcher.dispatch(symbol, price)
            except DispatcherShutdownError:
                if previous is None:
                    del self.prices[symbol]
                else:
                    self.prices[symbol] = previous
                raise

            self.stats['accepted'] += 1
            logger.info(f"Preço da ação {symbol} atualizado: {price}")

        return update

    def get_price(self, symbol: str) -> Optional[float]:
        """Retorna o último preço, ou None se nunca definido."""
        with self.lock:
            update = self.prices.get(symbol)
            return update.price if update is not None else None

    def get_last_update(self, symbol: str) -> Optional[PriceUpdate]:
        with self.lock:
            return self.prices.get(symbol)

    def get_stats(self) -> Dict[str, Any]:
        with self.lock:
            return {
                **self.stats,
                'symbols': sorted(self.prices.keys())
            }
