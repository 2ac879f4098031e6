#core/contracts/fares.py
"""Interface para estratégias de cálculo de tarifa."""
from abc import ABC, abstractmethod


class ICostCalculationStrategy(ABC):
    """Estratégia de custo de viagem por meio de transporte."""

    @abstractmethod
    def calculate_cost(self, distance: float, service_class: str, passengers: int,
                       has_luggage: bool, is_discounted: bool) -> float:
        """
        Calcula o custo total da viagem.

        Args:
            distance: Distância em km
            service_class: Classe de serviço (ECONOMY/BUSINESS)
            passengers: Número de passageiros
            has_luggage: Se há bagagem
            is_discounted: Se há crianças ou idosos (desconto)

        Returns:
            Custo total
        """
        pass
