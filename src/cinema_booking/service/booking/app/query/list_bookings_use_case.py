from typing import Dict, List

import attrs

from cinema_booking.platform.exception.exceptions import ValidationError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_booking_service_client import (
    IBookingServiceClient,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.enum.booking_status import BookingStatus
from cinema_booking.service.booking.domain.value_object.session import Session


ALL_STATUSES = 'all'


@attrs.define(frozen=True)
class BookingListing:
    bookings: List[Booking]
    status_filter: str
    counts: Dict[BookingStatus, int]
    total_count: int


class ListBookingsUseCase:
    def __init__(self, *, booking_service_client: IBookingServiceClient) -> None:
        self.booking_service_client = booking_service_client

    @Logger.io
    async def execute(
        self, *, session: Session, status_filter: str = ALL_STATUSES
    ) -> BookingListing:
        session.require_token()
        if status_filter != ALL_STATUSES and status_filter not in set(BookingStatus):
            raise ValidationError(f'Unknown booking status filter: {status_filter}')

        bookings = await self.booking_service_client.list_bookings(session=session)

        counts = {status: 0 for status in BookingStatus}
        for booking in bookings:
            counts[booking.status] += 1

        filtered = (
            bookings
            if status_filter == ALL_STATUSES
            else [booking for booking in bookings if booking.status == status_filter]
        )
        return BookingListing(
            bookings=filtered,
            status_filter=status_filter,
            counts=counts,
            total_count=len(bookings),
        )
