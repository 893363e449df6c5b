import re

import attrs

from cinema_booking.platform.exception.exceptions import ValidationError
from cinema_booking.service.booking.domain.enum.seat_tier import SeatTier


_SEAT_NUMBER_PATTERN = re.compile(r'^([A-Z])([1-9][0-9]*)$')


@attrs.define(frozen=True)
class SeatNumber:
    """Row letter + column number, e.g. "A1" (Value Object)"""

    row: str
    column: int

    def __str__(self) -> str:
        return f'{self.row}{self.column}'

    @classmethod
    def parse(cls, seat_number: str) -> 'SeatNumber':
        match = _SEAT_NUMBER_PATTERN.match(seat_number)
        if not match:
            raise ValidationError(
                f'Invalid seat number: {seat_number}. Expected row letter + column (e.g. A1)'
            )
        return cls(row=match.group(1), column=int(match.group(2)))


@attrs.define(frozen=True)
class Seat:
    seat_number: str
    tier: SeatTier
    price: int
    is_booked: bool = False

    @property
    def row(self) -> str:
        return SeatNumber.parse(self.seat_number).row


@attrs.define(frozen=True)
class BookingSeat:
    """Seat copied into a booking at selection time"""

    seat_number: str
    tier: SeatTier
    price: int

    @classmethod
    def from_seat(cls, seat: Seat) -> 'BookingSeat':
        return cls(seat_number=seat.seat_number, tier=seat.tier, price=seat.price)
