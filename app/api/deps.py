from fastapi import Request
from app.services.rental_service import RentalService


def get_rental_service(request: Request) -> RentalService:
    return request.app.state.rental_service
