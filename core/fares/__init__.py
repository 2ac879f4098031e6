"""Calculadora de tarifas de viagem (padrão strategy)."""

from .context import TravelBookingContext
from .strategies import AirplaneStrategy, TrainStrategy, BusStrategy, create_strategy

__all__ = [
    'TravelBookingContext',
    'AirplaneStrategy',
    'TrainStrategy',
    'BusStrategy',
    'create_strategy'
]
