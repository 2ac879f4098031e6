# infrastructure/messaging/dispatcher.py
"""Despachante assíncrono de cotações sobre um pool de threads."""
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Dict, Optional, Set

from core.contracts.messaging import INotificationDispatcher
from core.contracts.observer import IStockObserver
from core.exceptions import DispatcherShutdownError
from infrastructure.registry.subscriptions import SubscriptionRegistry

logger = logging.getLogger(__name__)


class NotificationDispatcher(INotificationDispatcher):
    """
    Agenda cada entrega como uma tarefa independente no pool (fire-and-forget).

    Um observador só é notificado se estiver no registro do símbolo E se o
    seu próprio get_subscribed_symbols() contiver o símbolo. Erros em um
    handler são registrados no log e nunca chegam ao chamador nem afetam
    os demais observadores.
    """

    def __init__(self, registry: SubscriptionRegistry,
                 max_workers: Optional[int] = None,
                 thread_name_prefix: str = "stock-notify"):
        """
        Args:
            registry: Registro de assinaturas consultado a cada despacho
            max_workers: Limite do pool (None = padrão do ThreadPoolExecutor)
            thread_name_prefix: Prefixo dos nomes das threads de entrega
        """
        self.registry = registry
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=thread_name_prefix
        )
        self._lock = threading.RLock()
        self._state_lock = threading.Lock()
        self._pending: Set[Future] = set()
        self._shutdown = False

        self.stats = {
            'dispatches': 0,
            'scheduled': 0,
            'skipped': 0,
            'delivered': 0,
            'failed': 0
        }

        logger.info(f"NotificationDispatcher inicializado com max_workers={max_workers}")

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    def dispatch(self, symbol: str, price: float) -> int:
        """
        Agenda update(symbol, price) para cada assinante válido.

        Returns:
            Número de entregas agendadas

        Raises:
            DispatcherShutdownError: Se chamado após shutdown()
        """
        with self._lock:
            if self._shutdown:
                raise DispatcherShutdownError("Despachante encerrado")

            scheduled = 0
            for observer in self.registry.subscribers_of(symbol):
                if symbol not in observer.get_subscribed_symbols():
                    self._count('skipped')
                    logger.debug(f"{observer!r} não acompanha mais {symbol}, ignorado")
                    continue

                future = self._executor.submit(self._deliver, observer, symbol, price)
                with self._state_lock:
                    self._pending.add(future)
                future.add_done_callback(self._forget)
                scheduled += 1

            self._count('dispatches')
            self._count('scheduled', scheduled)

        logger.debug(f"{scheduled} entregas agendadas para {symbol} @ {price}")
        return scheduled

    def _deliver(self, observer: IStockObserver, symbol: str, price: float) -> None:
        """Executa o handler isolando qualquer exceção."""
        try:
            observer.update(symbol, price)
        except Exception as e:
            self._count('failed')
            logger.error(
                f"Erro ao notificar {observer!r} sobre {symbol} @ {price}: {e}",
                exc_info=True
            )
        else:
            self._count('delivered')

    def _forget(self, future: Future) -> None:
        with self._state_lock:
            self._pending.discard(future)

    def _count(self, key: str, amount: int = 1) -> None:
        with self._state_lock:
            self.stats[key] += amount

    def wait_until_idle(self, timeout: Optional[float] = None) -> bool:
        """
        Aguarda as entregas agendadas até agora.

        Returns:
            True se todas terminaram dentro do timeout
        """
        with self._state_lock:
            pending = set(self._pending)
        if not pending:
            return True
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def shutdown(self, wait: bool = True) -> None:
        """Encerra o pool. Chamadas repetidas são ignoradas."""
        with self._lock:
            if self._shutdown:
                return
            self._shutdown = True
        logger.info("Encerrando NotificationDispatcher...")
        self._executor.shutdown(wait=wait)
        logger.info("NotificationDispatcher encerrado")

    def get_stats(self) -> Dict[str, Any]:
        with self._state_lock:
            return {
                **self.stats,
                'pending': len(self._pending),
                'is_shutdown': self._shutdown
            }
