from datetime import date
from typing import List

import attrs

from cinema_booking.service.booking.app.query.list_bookings_use_case import (
    ALL_STATUSES,
    BookingListing,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.enum.booking_status import BookingStatus
from cinema_booking.service.booking.driving_adapter.view_model.formatting import (
    format_currency,
    format_show_date,
)


@attrs.define(frozen=True)
class FilterTab:
    status: str
    label: str
    is_active: bool


@attrs.define(frozen=True)
class BookingRow:
    booking_id: str
    reference: str
    movie_title: str
    theatre: str
    showtime: str
    seats: str
    total: str
    status: BookingStatus
    payment_status: str
    can_cancel: bool


@attrs.define(frozen=True)
class BookingListView:
    tabs: List[FilterTab]
    rows: List[BookingRow]
    empty_message: str | None


def build_booking_row(booking: Booking, *, today: date, currency: str = 'Rs') -> BookingRow:
    return BookingRow(
        booking_id=booking.id,
        reference=booking.booking_reference,
        movie_title=booking.movie.title,
        theatre=', '.join(filter(None, (booking.theatre_name, booking.theatre_location))),
        showtime=f'{format_show_date(booking.show_date)} {booking.show_time}',
        seats=', '.join(booking.seat_numbers),
        total=format_currency(booking.total_amount, currency),
        status=booking.status,
        payment_status=booking.payment_status.value,
        can_cancel=booking.can_be_cancelled(today),
    )


def build_booking_list_view(
    listing: BookingListing, *, today: date, currency: str = 'Rs'
) -> BookingListView:
    tabs = [
        FilterTab(
            status=ALL_STATUSES,
            label='All Bookings',
            is_active=listing.status_filter == ALL_STATUSES,
        )
    ]
    tabs += [
        FilterTab(
            status=status.value,
            label=f'{status.value} ({listing.counts.get(status, 0)})',
            is_active=listing.status_filter == status,
        )
        for status in BookingStatus
    ]

    rows = [
        build_booking_row(booking, today=today, currency=currency) for booking in listing.bookings
    ]

    empty_message = None
    if not rows:
        empty_message = (
            'No bookings yet'
            if listing.status_filter == ALL_STATUSES
            else f'No {listing.status_filter.lower()} bookings'
        )
    return BookingListView(tabs=tabs, rows=rows, empty_message=empty_message)
