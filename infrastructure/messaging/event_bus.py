#infrastructure/messaging/event_bus.py
"""Barramento de eventos local."""
import logging
import threading
from collections import defaultdict
from typing import Callable, Any, List
from core.contracts.messaging import ISystemEventBus

logger = logging.getLogger(__name__)


class LocalEventBus(ISystemEventBus):
    """
    Barramento de eventos em memória, síncrono.
    Thread-safe: pode ser chamado a partir das threads de entrega.
    """

    __slots__ = ['handlers', 'lock']

    def __init__(self):
        self.handlers: defaultdict[str, List[Callable]] = defaultdict(list)
        self.lock = threading.Lock()

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Inscreve um handler para um tipo de evento."""
        with self.lock:
            self.handlers[event_type].append(handler)
        logger.debug(f"Handler {_name(handler)} inscrito para o evento '{event_type}'.")

    def publish(self, event_type: str, data: Any) -> None:
        """Publica um evento, acionando todos os handlers inscritos."""
        with self.lock:
            handlers = list(self.handlers.get(event_type, ()))
        if not handlers:
            return

        logger.debug(f"Publicando evento '{event_type}' com dados: {data}")
        for handler in handlers:
            try:
                handler(data)
            except Exception as e:
                logger.error(
                    f"Erro ao executar o handler {_name(handler)} para o evento '{event_type}': {e}",
                    exc_info=True
                )

    def unsubscribe(self, event_type: str, handler: Callable) -> None:
        """Remove um handler de um tipo de evento."""
        with self.lock:
            if event_type in self.handlers and handler in self.handlers[event_type]:
                self.handlers[event_type].remove(handler)
                logger.debug(f"Handler {_name(handler)} removido do evento '{event_type}'.")


def _name(handler: Callable) -> str:
    return getattr(handler, '__name__', repr(handler))
