"""Rental lifecycle: checkout and return of cars.

A rental is created open by ``checkout_car`` and closed exactly once by
``return_car``. Every check runs before the store is written, so a rejected
call leaves the stored record untouched.
"""
import logging

from app.core.exceptions import (
    BookingConflictError,
    DuplicateBookingError,
    InvalidRentalStateError,
    RentalNotFoundError,
    RentalValidationError,
)
from app.schemas.rental import CheckoutRequest, Rental, ReturnRequest, ReturnResult
from app.services.pricing import PriceCalculator
from app.services.rental_store import RentalStore

logger = logging.getLogger(__name__)


def _require(value: str, field_name: str) -> None:
    if not value or not value.strip():
        raise RentalValidationError(f"{field_name} is required")


class RentalService:

    def __init__(self, store: RentalStore, price_calculator: PriceCalculator):
        self.store = store
        self.price_calculator = price_calculator

    def get_rental(self, booking_number: str) -> Rental:
        rental = self.store.get_rental(booking_number)
        if rental is None:
            raise RentalNotFoundError(f"Rental with booking number {booking_number} not found")
        return rental

    def checkout_car(self, request: CheckoutRequest) -> Rental:
        _require(request.booking_number, "Booking number")
        _require(request.car_registration_plate, "Car registration plate")
        _require(request.customer_id, "Customer id")
        if request.odometer_at_checkout < 0:
            raise RentalValidationError("Odometer reading cannot be negative")

        if self.store.get_rental(request.booking_number) is not None:
            logger.warning(f"Checkout rejected: booking number {request.booking_number} already exists")
            raise DuplicateBookingError(f"Booking number {request.booking_number} already exists")

        bookings = self.store.get_bookings_for_car_at_date(
            request.car_registration_plate, request.checkout_date
        )
        if bookings:
            logger.warning(
                f"Checkout rejected: car {request.car_registration_plate} already booked "
                f"under {', '.join(b.booking_number for b in bookings)}"
            )
            raise BookingConflictError(f"Car {request.car_registration_plate} already booked")

        rental = Rental(
            booking_number=request.booking_number,
            car_registration_plate=request.car_registration_plate,
            customer_id=request.customer_id,
            car_type=request.car_type,
            checkout_date=request.checkout_date,
            odometer_at_checkout=request.odometer_at_checkout,
        )
        self.store.save_rental(rental)

        logger.info(
            f"Checked out car {rental.car_registration_plate} to customer {rental.customer_id} "
            f"(booking {rental.booking_number})"
        )
        return rental

    def return_car(self, request: ReturnRequest) -> ReturnResult:
        rental = self.get_rental(request.booking_number)

        if not rental.is_open:
            logger.warning(f"Return rejected: booking {rental.booking_number} is already closed")
            raise InvalidRentalStateError(f"Rental {rental.booking_number} has already been returned")

        if request.return_date < rental.checkout_date:
            logger.warning(f"Return rejected: return date before checkout date for booking {rental.booking_number}")
            raise RentalValidationError("Return date before checkout date")

        if request.odometer_at_return < rental.odometer_at_checkout:
            logger.warning(f"Return rejected: odometer reading decreased for booking {rental.booking_number}")
            raise RentalValidationError("Odometer reading decreased")

        distance_driven = request.odometer_at_return - rental.odometer_at_checkout
        # complete 24h periods, partial days are dropped
        full_days_rented = (request.return_date - rental.checkout_date).days

        total_cost = self.price_calculator.calculate_price(
            rental.car_type, full_days_rented, distance_driven
        )

        self.store.save_rental(rental.close(request.return_date, request.odometer_at_return))

        logger.info(
            f"Returned car {rental.car_registration_plate} (booking {rental.booking_number}): "
            f"{full_days_rented} days, {distance_driven} km, cost {total_cost}"
        )
        return ReturnResult(
            booking_number=rental.booking_number,
            car_registration_plate=rental.car_registration_plate,
            distance_driven=distance_driven,
            full_days_rented=full_days_rented,
            total_cost=total_cost,
        )
