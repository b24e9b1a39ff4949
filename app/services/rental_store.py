"""Rental persistence: the store protocol and its in-memory and SQL implementations"""
import logging
from datetime import datetime
from threading import Lock
from typing import Dict, List, Optional, Protocol

from sqlalchemy import or_
from sqlalchemy.future import select
from sqlalchemy.orm import sessionmaker

from app.db.session import create_session_factory
from app.models.rental import RentalRecord
from app.schemas.rental import Rental
from app.utils.timeutils import as_utc, to_naive_utc

logger = logging.getLogger(__name__)


class RentalStore(Protocol):
    def get_rental(self, booking_number: str) -> Optional[Rental]:
        ...

    def save_rental(self, rental: Rental) -> None:
        ...

    def get_bookings_for_car_at_date(self, registration_plate: str, date: datetime) -> List[Rental]:
        ...

    def close(self) -> None:
        ...


def _holds_car_at(rental: Rental, date: datetime) -> bool:
    # an open rental holds the car indefinitely; a closed one until its return date
    return rental.return_date is None or rental.return_date > date


class InMemoryRentalStore:

    def __init__(self) -> None:
        self._rentals: Dict[str, Rental] = {}
        self._lock = Lock()

    def get_rental(self, booking_number: str) -> Optional[Rental]:
        with self._lock:
            return self._rentals.get(booking_number)

    def save_rental(self, rental: Rental) -> None:
        with self._lock:
            self._rentals[rental.booking_number] = rental

    def get_bookings_for_car_at_date(self, registration_plate: str, date: datetime) -> List[Rental]:
        date = as_utc(date)
        with self._lock:
            return [
                rental
                for rental in self._rentals.values()
                if rental.car_registration_plate == registration_plate and _holds_car_at(rental, date)
            ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._rentals)

    def close(self) -> None:
        pass


class SqlRentalStore:
    """SQLAlchemy-backed store over the ``rentals`` table.

    Datetimes are written as naive UTC and come back with UTC attached.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self.engine = session_factory.kw["bind"]

    @staticmethod
    def _to_rental(record: RentalRecord) -> Rental:
        return Rental(
            booking_number=record.booking_number,
            car_registration_plate=record.car_registration_plate,
            customer_id=record.customer_id,
            car_type=record.car_type,
            checkout_date=as_utc(record.checkout_date),
            odometer_at_checkout=record.odometer_at_checkout,
            return_date=as_utc(record.return_date),
            odometer_at_return=record.odometer_at_return,
        )

    def get_rental(self, booking_number: str) -> Optional[Rental]:
        with self._session_factory() as db:
            res = db.execute(select(RentalRecord).where(RentalRecord.booking_number == booking_number))
            record = res.scalars().first()
            return self._to_rental(record) if record else None

    def save_rental(self, rental: Rental) -> None:
        with self._session_factory() as db:
            res = db.execute(select(RentalRecord).where(RentalRecord.booking_number == rental.booking_number))
            record = res.scalars().first()
            if record is None:
                record = RentalRecord(booking_number=rental.booking_number)

            record.car_registration_plate = rental.car_registration_plate
            record.customer_id = rental.customer_id
            record.car_type = rental.car_type
            record.checkout_date = to_naive_utc(rental.checkout_date)
            record.odometer_at_checkout = rental.odometer_at_checkout
            record.return_date = to_naive_utc(rental.return_date)
            record.odometer_at_return = rental.odometer_at_return

            db.add(record)
            db.commit()

    def get_bookings_for_car_at_date(self, registration_plate: str, date: datetime) -> List[Rental]:
        with self._session_factory() as db:
            q = select(RentalRecord).where(
                RentalRecord.car_registration_plate == registration_plate,
                or_(
                    RentalRecord.return_date.is_(None),
                    RentalRecord.return_date > to_naive_utc(date),
                ),
            )
            res = db.execute(q)
            return [self._to_rental(record) for record in res.scalars().all()]

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Rental database connections released")


def create_rental_store(backend: str, database_url: Optional[str] = None) -> RentalStore:
    if backend == "memory":
        logger.info("Using in-memory rental store")
        return InMemoryRentalStore()
    if backend == "sql":
        if not database_url:
            raise ValueError("DATABASE_URL is required for the sql rental store")
        return SqlRentalStore(create_session_factory(database_url))
    raise ValueError(f"Unknown rental store backend: {backend!r}")
