from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, Union
from datetime import datetime
from decimal import Decimal
from app.core.enums import CarType, RentalStatus
from app.utils.timeutils import as_utc


class Rental(BaseModel):
    """One car rental, open until it is returned.

    Instances are frozen; a return produces a closed copy via ``close``.
    """

    model_config = ConfigDict(frozen=True)

    booking_number: str
    car_registration_plate: str
    customer_id: str
    car_type: CarType
    checkout_date: datetime
    odometer_at_checkout: int
    return_date: Optional[datetime] = None
    odometer_at_return: Optional[int] = None

    @field_validator("checkout_date", "return_date")
    @classmethod
    def normalize_dates(cls, value):
        return as_utc(value)

    @model_validator(mode="after")
    def check_invariants(self):
        if self.odometer_at_checkout < 0:
            raise ValueError("odometer_at_checkout cannot be negative")
        if (self.return_date is None) != (self.odometer_at_return is None):
            raise ValueError("return_date and odometer_at_return must be set together")
        if self.return_date is not None:
            if self.return_date < self.checkout_date:
                raise ValueError("return_date is before checkout_date")
            if self.odometer_at_return < self.odometer_at_checkout:
                raise ValueError("odometer_at_return is below odometer_at_checkout")
        return self

    @property
    def is_open(self) -> bool:
        return self.return_date is None and self.odometer_at_return is None

    @property
    def status(self) -> RentalStatus:
        return RentalStatus.OPEN if self.is_open else RentalStatus.CLOSED

    def close(self, return_date: datetime, odometer_at_return: int) -> "Rental":
        # rebuilt rather than copied so the invariants are checked again
        return Rental(
            **self.model_dump(exclude={"return_date", "odometer_at_return"}),
            return_date=return_date,
            odometer_at_return=odometer_at_return,
        )


class CheckoutRequest(BaseModel):
    booking_number: str
    car_registration_plate: str
    customer_id: str
    car_type: CarType
    checkout_date: datetime
    odometer_at_checkout: int

    @field_validator("checkout_date")
    @classmethod
    def normalize_checkout_date(cls, value):
        return as_utc(value)


class ReturnRequest(BaseModel):
    booking_number: str
    return_date: datetime
    odometer_at_return: int

    @field_validator("return_date")
    @classmethod
    def normalize_return_date(cls, value):
        return as_utc(value)


class ReturnResult(BaseModel):
    booking_number: str
    car_registration_plate: str
    distance_driven: int
    full_days_rented: int
    # whatever the price calculator produced
    total_cost: Union[float, Decimal]


# HTTP payloads

class CheckoutIn(BaseModel):
    booking_number: str
    car_registration_plate: str
    customer_id: str
    car_type: CarType
    odometer: int = Field(description="Odometer reading at checkout")
    checkout_date: Optional[datetime] = None


class CheckoutOut(BaseModel):
    booking_number: str
    car_registration_plate: str
    customer_id: str
    car_type: CarType
    checkout_date: datetime


class ReturnIn(BaseModel):
    booking_number: str
    odometer: int = Field(description="Odometer reading at return")
    return_date: Optional[datetime] = None


class ReturnOut(BaseModel):
    booking_number: str
    car_registration_plate: str
    distance_driven: int
    full_days_rented: int
    total_cost: float


class RentalOut(BaseModel):
    booking_number: str
    car_registration_plate: str
    customer_id: str
    car_type: CarType
    status: RentalStatus
    checkout_date: datetime
    odometer_at_checkout: int
    return_date: Optional[datetime] = None
    odometer_at_return: Optional[int] = None
