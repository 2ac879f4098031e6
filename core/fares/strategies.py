#core/fares/strategies.py
"""Estratégias de custo por meio de transporte."""
from typing import Dict, Type

from core.contracts.fares import ICostCalculationStrategy
from core.entities.fare import ServiceClass, TransportMode


class RateBasedStrategy(ICostCalculationStrategy):
    """
    Custo = distância * tarifa base * multiplicador de classe * passageiros,
    mais taxa de bagagem por passageiro, com desconto opcional e taxa fixa.
    """

    base_rate: float = 0.0
    business_multiplier: float = 1.0
    luggage_fee: float = 0.0
    discount_factor: float = 1.0
    fixed_fee: float = 0.0

    def calculate_cost(self, distance: float, service_class: str, passengers: int,
                       has_luggage: bool, is_discounted: bool) -> float:
        class_multiplier = self.business_multiplier if _is_business(service_class) else 1.0
        cost = distance * self.base_rate * class_multiplier * passengers
        if has_luggage:
            cost += self.luggage_fee * passengers
        if is_discounted:
            cost *= self.discount_factor
        return cost + self.fixed_fee


class AirplaneStrategy(RateBasedStrategy):
    """Avião: inclui taxa aeroportuária fixa."""
    base_rate = 0.3
    business_multiplier = 2.5
    luggage_fee = 25.0
    discount_factor = 0.85
    fixed_fee = 50.0


class TrainStrategy(RateBasedStrategy):
    base_rate = 0.12
    business_multiplier = 1.8
    luggage_fee = 10.0
    discount_factor = 0.75


class BusStrategy(RateBasedStrategy):
    base_rate = 0.08
    business_multiplier = 1.5
    luggage_fee = 5.0
    discount_factor = 0.8


_STRATEGIES: Dict[TransportMode, Type[ICostCalculationStrategy]] = {
    TransportMode.AIRPLANE: AirplaneStrategy,
    TransportMode.TRAIN: TrainStrategy,
    TransportMode.BUS: BusStrategy,
}


def create_strategy(mode: TransportMode) -> ICostCalculationStrategy:
    """Cria a estratégia correspondente ao meio de transporte."""
    return _STRATEGIES[TransportMode(mode)]()


def _is_business(service_class) -> bool:
    value = service_class.value if isinstance(service_class, ServiceClass) else str(service_class)
    return value.upper() == ServiceClass.BUSINESS.value
