from datetime import date

import attrs
import uuid_utils

from cinema_booking.platform.exception.exceptions import ValidationError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.domain.pricing_domain import calculate_total
from cinema_booking.service.booking.domain.seat_map_domain import SeatMap
from cinema_booking.service.booking.domain.seat_selection_domain import SeatSelection
from cinema_booking.service.booking.domain.value_object.seat import BookingSeat
from cinema_booking.service.booking.domain.value_object.theatre import Showing


@attrs.define(frozen=True)
class BookingDraft:
    """Client-assembled booking payload, immutable once built"""

    movie_id: str
    theatre_name: str
    theatre_location: str
    show_date: date
    show_time: str
    seats: tuple[BookingSeat, ...] = attrs.field(converter=tuple)
    total_amount: int
    payment_method: str
    idempotency_key: str = attrs.field(factory=lambda: str(uuid_utils.uuid7()))

    def __attrs_post_init__(self) -> None:
        if not self.seats:
            raise ValidationError('Please select at least one seat')
        if self.total_amount != sum(seat.price for seat in self.seats):
            raise ValidationError('Total amount does not match the selected seats')

    @property
    def seat_numbers(self) -> list[str]:
        return [seat.seat_number for seat in self.seats]

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        movie_id: str,
        showing: Showing,
        selection: SeatSelection,
        seat_map: SeatMap,
        payment_method: str,
    ) -> 'BookingDraft':
        selection.validate_for_submission()

        seats = []
        for seat_number in selection.seat_numbers:
            seat = seat_map.get(seat_number)
            if seat is None or seat.is_booked:
                raise ValidationError(f'Seat {seat_number} is no longer available')
            seats.append(BookingSeat.from_seat(seat))

        return cls(
            movie_id=movie_id,
            theatre_name=showing.theatre.name,
            theatre_location=showing.theatre.location,
            show_date=showing.date,
            show_time=showing.time,
            seats=seats,
            total_amount=calculate_total(selection.seat_numbers, seat_map),
            payment_method=payment_method,
        )
