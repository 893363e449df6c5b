from datetime import date, datetime

import attrs

from cinema_booking.platform.exception.exceptions import ValidationError
from cinema_booking.service.booking.domain.enum.booking_status import BookingStatus, PaymentStatus
from cinema_booking.service.booking.domain.value_object.seat import BookingSeat


@attrs.define(frozen=True)
class MovieSummary:
    id: str
    title: str = ''
    poster: str = ''
    duration: str = ''
    rating: str = ''
    language: str = ''


@attrs.define(frozen=True)
class Booking:
    """Booking persisted by the Booking Service"""

    id: str
    booking_reference: str
    movie: MovieSummary
    theatre_name: str
    theatre_location: str
    show_date: date
    show_time: str
    seats: tuple[BookingSeat, ...] = attrs.field(converter=tuple)
    total_amount: int
    status: BookingStatus = BookingStatus.CONFIRMED
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: str = 'Card'
    booking_date: datetime | None = None

    @property
    def seat_numbers(self) -> list[str]:
        return [seat.seat_number for seat in self.seats]

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.COMPLETED

    def is_past_showtime(self, today: date) -> bool:
        return self.show_date < today

    def can_be_cancelled(self, today: date) -> bool:
        return self.status == BookingStatus.CONFIRMED and not self.is_past_showtime(today)

    def validate_can_be_cancelled(self, today: date) -> None:
        """
        Raises:
            ValidationError: When booking status or showtime does not allow cancellation
        """
        if self.status == BookingStatus.CANCELLED:
            raise ValidationError('Booking already cancelled')
        if self.status == BookingStatus.COMPLETED:
            raise ValidationError('Cannot cancel completed booking')
        if self.is_past_showtime(today):
            raise ValidationError('Cannot cancel a booking for a past showtime')
