from sqlalchemy import Column, String, Integer, DateTime, Enum
from app.models.base import BaseModel
from app.core.enums import CarType

class RentalRecord(BaseModel):
    __tablename__ = "rentals"

    booking_number = Column(String(64), unique=True, nullable=False, index=True)
    car_registration_plate = Column(String(20), nullable=False, index=True)
    customer_id = Column(String(64), nullable=False)
    car_type = Column(Enum(CarType), nullable=False)

    # naive UTC
    checkout_date = Column(DateTime, nullable=False)
    odometer_at_checkout = Column(Integer, nullable=False)
    return_date = Column(DateTime, nullable=True)
    odometer_at_return = Column(Integer, nullable=True)
