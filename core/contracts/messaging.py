#core/contracts/messaging.py
"""Interfaces para sistema de mensagens/eventos."""
from abc import ABC, abstractmethod
from typing import Callable, Any


class ISystemEventBus(ABC):
    """Interface para o barramento de eventos do sistema."""

    @abstractmethod
    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Inscreve um handler para um tipo de evento."""
        pass

    @abstractmethod
    def publish(self, event_type: str, data: Any) -> None:
        """Publica um evento para todos os seus assinantes."""
        pass

    @abstractmethod
    def unsubscribe(self, event_type: str, handler: Callable) -> None:
        """Remove a inscrição de um handler."""
        pass


class INotificationDispatcher(ABC):
    """Interface para o despachante assíncrono de cotações."""

    @abstractmethod
    def dispatch(self, symbol: str, price: float) -> int:
        """
        Agenda a entrega de (symbol, price) aos assinantes válidos.

        Returns:
            Número de entregas agendadas
        """
        pass

    @property
    @abstractmethod
    def is_shutdown(self) -> bool:
        """Indica se o despachante já foi encerrado."""
        pass

    @abstractmethod
    def shutdown(self, wait: bool = True) -> None:
        """Encerra o pool de workers."""
        pass
