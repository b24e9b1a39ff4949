from typing import Protocol
from app.core.enums import CarType

# (day multiplier, km multiplier) applied to the base rates
CAR_TYPE_RATES = {
    CarType.COMPACT: (1.0, 0.0),
    CarType.STATION_WAGON: (1.3, 1.0),
    CarType.TRUCK: (1.5, 1.5),
}


class PriceCalculator(Protocol):
    def calculate_price(self, car_type: CarType, full_days_rented: int, distance_driven: int) -> float:
        ...


class CarTypePriceCalculator:
    """Prices a rental from the base day rate and base km price of the car type.

    compact:        base_day_rental * days
    station wagon:  base_day_rental * days * 1.3 + base_km_price * km
    truck:          base_day_rental * days * 1.5 + base_km_price * km * 1.5
    """

    def __init__(self, base_day_rental: float, base_km_price: float):
        self.base_day_rental = base_day_rental
        self.base_km_price = base_km_price

    def price_breakdown(self, car_type: CarType, full_days_rented: int, distance_driven: int) -> dict:
        day_multiplier, km_multiplier = CAR_TYPE_RATES[CarType(car_type)]
        return {
            "day_cost": self.base_day_rental * full_days_rented * day_multiplier,
            "distance_cost": self.base_km_price * distance_driven * km_multiplier,
        }

    def calculate_price(self, car_type: CarType, full_days_rented: int, distance_driven: int) -> float:
        breakdown = self.price_breakdown(car_type, full_days_rented, distance_driven)
        return sum(breakdown.values())
