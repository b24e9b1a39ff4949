import pytest
from app.services.pricing import CarTypePriceCalculator, CAR_TYPE_RATES
from app.core.enums import CarType


@pytest.fixture
def calculator():
    return CarTypePriceCalculator(base_day_rental=100.0, base_km_price=2.0)


@pytest.mark.pricing
class TestPricingFormula:
    """Test the per-car-type pricing formula"""

    @pytest.mark.parametrize("car_type,days,km,expected", [
        (CarType.COMPACT, 3, 100, 300.0),          # 100*3
        (CarType.COMPACT, 0, 500, 0.0),            # distance is free for compacts
        (CarType.STATION_WAGON, 3, 100, 590.0),    # 100*3*1.3 + 2*100
        (CarType.STATION_WAGON, 1, 0, 130.0),      # 100*1*1.3
        (CarType.TRUCK, 3, 100, 750.0),            # 100*3*1.5 + 2*100*1.5
        (CarType.TRUCK, 0, 10, 30.0),              # 2*10*1.5
    ])
    def test_pricing_formula(self, calculator, car_type, days, km, expected):
        assert calculator.calculate_price(car_type, days, km) == pytest.approx(expected)

    def test_zero_rental_costs_nothing(self, calculator):
        for car_type in CarType:
            assert calculator.calculate_price(car_type, 0, 0) == 0.0

    def test_car_type_ordering(self, calculator):
        prices = [calculator.calculate_price(car_type, 2, 150) for car_type in
                  (CarType.COMPACT, CarType.STATION_WAGON, CarType.TRUCK)]

        assert prices[2] > prices[1] > prices[0]

    def test_base_rates_scale_price(self):
        cheap = CarTypePriceCalculator(base_day_rental=50.0, base_km_price=1.0)
        expensive = CarTypePriceCalculator(base_day_rental=100.0, base_km_price=2.0)

        assert expensive.calculate_price(CarType.TRUCK, 4, 250) == pytest.approx(
            2 * cheap.calculate_price(CarType.TRUCK, 4, 250)
        )

    def test_accepts_car_type_value(self, calculator):
        assert calculator.calculate_price("station_wagon", 3, 100) == pytest.approx(590.0)

    def test_unknown_car_type_raises(self, calculator):
        with pytest.raises(ValueError):
            calculator.calculate_price("limousine", 1, 1)


@pytest.mark.pricing
class TestPriceBreakdown:

    def test_breakdown_structure(self, calculator):
        breakdown = calculator.price_breakdown(CarType.TRUCK, 2, 40)

        assert set(breakdown) == {"day_cost", "distance_cost"}
        assert breakdown["day_cost"] == pytest.approx(300.0)
        assert breakdown["distance_cost"] == pytest.approx(120.0)

    def test_breakdown_adds_to_final_price(self, calculator):
        for car_type in CarType:
            breakdown = calculator.price_breakdown(car_type, 5, 321)
            assert sum(breakdown.values()) == calculator.calculate_price(car_type, 5, 321)

    def test_every_car_type_is_priced(self):
        assert set(CAR_TYPE_RATES) == set(CarType)
