import pytest
from datetime import datetime, timezone
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.api.deps import get_rental_service
from app.core.config import settings
from app.core.enums import CarType
from app.schemas.rental import CheckoutRequest, Rental
from app.services.pricing import CarTypePriceCalculator
from app.services.rental_service import RentalService
from app.services.rental_store import InMemoryRentalStore


CHECKOUT_DATE = datetime(2024, 6, 20, tzinfo=timezone.utc)


@pytest.fixture
def rental_store():
    return InMemoryRentalStore()


@pytest.fixture
def price_calculator():
    return CarTypePriceCalculator(base_day_rental=100.0, base_km_price=2.0)


@pytest.fixture
def rental_service(rental_store, price_calculator):
    return RentalService(rental_store, price_calculator)


@pytest.fixture
async def test_client(rental_service):
    app.dependency_overrides[get_rental_service] = lambda: rental_service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def open_rental_factory():
    def _open_rental(booking_number="123", plate="ABC123", **kwargs):
        data = {
            "booking_number": booking_number,
            "car_registration_plate": plate,
            "customer_id": "456",
            "car_type": CarType.COMPACT,
            "checkout_date": CHECKOUT_DATE,
            "odometer_at_checkout": 1000,
        }
        data.update(kwargs)
        return Rental(**data)

    return _open_rental


@pytest.fixture
def checkout_request_factory():
    def _checkout_request(booking_number="123", plate="ABC123", **kwargs):
        data = {
            "booking_number": booking_number,
            "car_registration_plate": plate,
            "customer_id": "456",
            "car_type": CarType.COMPACT,
            "checkout_date": CHECKOUT_DATE,
            "odometer_at_checkout": 1000,
        }
        data.update(kwargs)
        return CheckoutRequest(**data)

    return _checkout_request


@pytest.fixture
def valid_checkout_data():
    return {
        "booking_number": "B-1001",
        "car_registration_plate": "ABC123",
        "customer_id": "C-42",
        "car_type": CarType.STATION_WAGON.value,
        "odometer": 1000,
        "checkout_date": "2024-06-20T00:00:00+00:00",
    }


@pytest.fixture
def app_settings():
    """Return application settings"""
    return settings


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "checkout: marks tests related to car checkout"
    )
    config.addinivalue_line(
        "markers", "return_car: marks tests related to car return"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "store: marks tests related to rental persistence"
    )
