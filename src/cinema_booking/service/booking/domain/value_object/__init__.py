"""Booking Domain Value Objects"""

from cinema_booking.service.booking.domain.value_object.calendar_date import parse_calendar_date
from cinema_booking.service.booking.domain.value_object.seat import BookingSeat, Seat, SeatNumber
from cinema_booking.service.booking.domain.value_object.session import Session
from cinema_booking.service.booking.domain.value_object.theatre import Movie, Showing, Theatre

__all__ = [
    'BookingSeat',
    'Movie',
    'Seat',
    'SeatNumber',
    'Session',
    'Showing',
    'Theatre',
    'parse_calendar_date',
]
