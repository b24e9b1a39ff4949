from enum import Enum


class CarType(str, Enum):
    COMPACT = "compact"
    STATION_WAGON = "station_wagon"
    TRUCK = "truck"

    def __str__(self):
        return self.value


class RentalStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"

    def __str__(self):
        return self.value
