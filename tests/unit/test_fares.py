"""Testes da calculadora de tarifas (strategy)."""

import pytest

from core.entities.fare import ServiceClass, TransportMode
from core.exceptions import InvalidInputError, StrategyNotSetError
from core.fares import (
    AirplaneStrategy, BusStrategy, TrainStrategy, TravelBookingContext, create_strategy
)


class TestStrategies:

    def test_airplane_economy_with_luggage(self):
        """1000 km * 0.3 * 2 pax = 600, +25*2 bagagem, +50 taxa."""
        cost = AirplaneStrategy().calculate_cost(1000, ServiceClass.ECONOMY, 2, True, False)

        assert cost == pytest.approx(700.0)

    def test_airplane_business_discounted(self):
        """1000 * 0.3 * 2.5 = 750, *0.85 = 637.5, +50 (taxa após desconto)."""
        cost = AirplaneStrategy().calculate_cost(1000, ServiceClass.BUSINESS, 1, False, True)

        assert cost == pytest.approx(687.5)

    def test_train_business_luggage_discounted(self):
        """500 * 0.12 * 1.8 * 2 = 216, +20, *0.75."""
        cost = TrainStrategy().calculate_cost(500, ServiceClass.BUSINESS, 2, True, True)

        assert cost == pytest.approx(177.0)

    def test_bus_economy(self):
        """100 * 0.08 * 3 = 24, +15 bagagem."""
        cost = BusStrategy().calculate_cost(100, ServiceClass.ECONOMY, 3, True, False)

        assert cost == pytest.approx(39.0)

    def test_service_class_accepts_plain_strings(self):
        strategy = BusStrategy()

        assert strategy.calculate_cost(100, "business", 1, False, False) == pytest.approx(12.0)
        assert strategy.calculate_cost(100, "economy", 1, False, False) == pytest.approx(8.0)

    @pytest.mark.parametrize("mode,expected", [
        (TransportMode.AIRPLANE, AirplaneStrategy),
        (TransportMode.TRAIN, TrainStrategy),
        (TransportMode.BUS, BusStrategy),
        ("BUS", BusStrategy),
    ])
    def test_create_strategy(self, mode, expected):
        assert isinstance(create_strategy(mode), expected)


class TestTravelBookingContext:

    def test_strategy_not_set(self):
        with pytest.raises(StrategyNotSetError):
            TravelBookingContext().calculate_total_cost(100, ServiceClass.ECONOMY, 1, False, False)

    def test_strategy_checked_before_inputs(self):
        with pytest.raises(StrategyNotSetError):
            TravelBookingContext().calculate_total_cost(0, ServiceClass.ECONOMY, 0, False, False)

    @pytest.mark.parametrize("distance,passengers", [(0, 1), (-10, 1), (100, 0), (100, -2)])
    def test_invalid_input(self, distance, passengers):
        context = TravelBookingContext()
        context.set_strategy(TrainStrategy())

        with pytest.raises(InvalidInputError):
            context.calculate_total_cost(distance, ServiceClass.ECONOMY, passengers, False, False)

    def test_delegates_to_strategy(self):
        context = TravelBookingContext(BusStrategy())

        assert context.calculate_total_cost(100, ServiceClass.ECONOMY, 1, False, False) == pytest.approx(8.0)
        context.set_strategy(TrainStrategy())
        assert context.calculate_total_cost(100, ServiceClass.ECONOMY, 1, False, False) == pytest.approx(12.0)
