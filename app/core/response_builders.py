from app.schemas.rental import CheckoutOut, Rental, RentalOut, ReturnOut, ReturnResult


def build_checkout_response(rental: Rental) -> CheckoutOut:
    return CheckoutOut(
        booking_number=rental.booking_number,
        car_registration_plate=rental.car_registration_plate,
        customer_id=rental.customer_id,
        car_type=rental.car_type,
        checkout_date=rental.checkout_date,
    )


def build_return_response(result: ReturnResult) -> ReturnOut:
    return ReturnOut(
        booking_number=result.booking_number,
        car_registration_plate=result.car_registration_plate,
        distance_driven=result.distance_driven,
        full_days_rented=result.full_days_rented,
        total_cost=result.total_cost,
    )


def build_rental_response(rental: Rental) -> RentalOut:
    return RentalOut(
        booking_number=rental.booking_number,
        car_registration_plate=rental.car_registration_plate,
        customer_id=rental.customer_id,
        car_type=rental.car_type,
        status=rental.status,
        checkout_date=rental.checkout_date,
        odometer_at_checkout=rental.odometer_at_checkout,
        return_date=rental.return_date,
        odometer_at_return=rental.odometer_at_return,
    )
