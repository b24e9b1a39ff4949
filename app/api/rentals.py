from fastapi import APIRouter, Depends

from app.api.deps import get_rental_service
from app.core.metrics import rental_checkouts, rental_returns, rental_revenue
from app.core.response_builders import (
    build_checkout_response,
    build_rental_response,
    build_return_response,
)
from app.schemas.rental import (
    CheckoutIn,
    CheckoutOut,
    CheckoutRequest,
    RentalOut,
    ReturnIn,
    ReturnOut,
    ReturnRequest,
)
from app.services.rental_service import RentalService
from app.utils.timeutils import utcnow

router = APIRouter(prefix="/rentals", tags=["rentals"])


@router.post(
    "/checkout",
    response_model=CheckoutOut,
    description="Checkout a car for rental. CarType is one of compact, station_wagon, truck.",
)
async def checkout_car(
    payload: CheckoutIn,
    service: RentalService = Depends(get_rental_service),
):
    rental = service.checkout_car(CheckoutRequest(
        booking_number=payload.booking_number,
        car_registration_plate=payload.car_registration_plate,
        customer_id=payload.customer_id,
        car_type=payload.car_type,
        checkout_date=payload.checkout_date or utcnow(),
        odometer_at_checkout=payload.odometer,
    ))
    rental_checkouts.labels(car_type=rental.car_type.value).inc()

    return build_checkout_response(rental)


@router.post("/return", response_model=ReturnOut, description="Return a rental car.")
async def return_car(
    payload: ReturnIn,
    service: RentalService = Depends(get_rental_service),
):
    result = service.return_car(ReturnRequest(
        booking_number=payload.booking_number,
        return_date=payload.return_date or utcnow(),
        odometer_at_return=payload.odometer,
    ))
    rental_returns.inc()
    rental_revenue.inc(max(float(result.total_cost), 0.0))

    return build_return_response(result)


@router.get("/{booking_number}", response_model=RentalOut)
async def get_rental(
    booking_number: str,
    service: RentalService = Depends(get_rental_service),
):
    return build_rental_response(service.get_rental(booking_number))
