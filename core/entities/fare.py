#core/entities/fare.py
"""Tipos da calculadora de tarifas de viagem."""
from enum import Enum


class TransportMode(str, Enum):
    """Meio de transporte escolhido."""
    AIRPLANE = "AIRPLANE"
    TRAIN = "TRAIN"
    BUS = "BUS"


class ServiceClass(str, Enum):
    """Classe de serviço."""
    ECONOMY = "ECONOMY"
    BUSINESS = "BUSINESS"
