"""Error taxonomy for the rental lifecycle.

Each failure condition has its own class so callers can tell them apart.
The API layer renders ``status_code`` and ``error_code`` directly.
"""


class RentalError(Exception):
    """Base class for all rental lifecycle failures."""

    status_code: int = 400
    error_code: str = "rental_error"

    def __init__(self, message: str = "Rental operation failed") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class RentalValidationError(RentalError):
    """Raised when request fields are missing or out of range."""

    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str = "Invalid rental request") -> None:
        super().__init__(message)


class BookingConflictError(RentalError):
    """Raised when the car already has an open or overlapping booking."""

    status_code = 409
    error_code = "booking_conflict"

    def __init__(self, message: str = "Car already booked") -> None:
        super().__init__(message)


class DuplicateBookingError(RentalError):
    """Raised when a booking number is reused at checkout."""

    status_code = 409
    error_code = "duplicate_booking"

    def __init__(self, message: str = "Booking number already exists") -> None:
        super().__init__(message)


class RentalNotFoundError(RentalError):
    """Raised when no rental exists for a booking number."""

    status_code = 404
    error_code = "rental_not_found"

    def __init__(self, message: str = "Rental not found") -> None:
        super().__init__(message)


class InvalidRentalStateError(RentalError):
    """Raised when returning a rental that is already closed."""

    status_code = 409
    error_code = "invalid_rental_state"

    def __init__(self, message: str = "Rental is already closed") -> None:
        super().__init__(message)
