#core/fares/context.py
"""Contexto de reserva que delega o cálculo à estratégia escolhida."""
import logging
from typing import Optional

from core.contracts.fares import ICostCalculationStrategy
from core.exceptions import InvalidInputError, StrategyNotSetError

logger = logging.getLogger(__name__)


class TravelBookingContext:
    """Mantém a estratégia de transporte atual."""

    def __init__(self, strategy: Optional[ICostCalculationStrategy] = None):
        self.strategy = strategy

    def set_strategy(self, strategy: ICostCalculationStrategy) -> None:
        self.strategy = strategy
        logger.debug(f"Estratégia definida: {type(strategy).__name__}")

    def calculate_total_cost(self, distance: float, service_class: str, passengers: int,
                             has_luggage: bool, is_discounted: bool) -> float:
        """
        Calcula o custo total da viagem.

        Raises:
            StrategyNotSetError: Se nenhuma estratégia foi definida
            InvalidInputError: Se distância ou passageiros não forem positivos
        """
        if self.strategy is None:
            raise StrategyNotSetError("Estratégia não definida.")
        if distance <= 0 or passengers <= 0:
            raise InvalidInputError(
                f"Dados de entrada inválidos: distância={distance}, passageiros={passengers}"
            )
        return self.strategy.calculate_cost(
            distance, service_class, passengers, has_luggage, is_discounted
        )
