from datetime import date
from typing import Callable

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_booking_service_client import (
    IBookingServiceClient,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.value_object.session import Session


class CancelBookingUseCase:
    """
    Cancel a booking.

    Only Confirmed bookings whose showtime is not in the past may be
    cancelled. The returned booking is the server's view after cancellation.
    """

    def __init__(
        self,
        *,
        booking_service_client: IBookingServiceClient,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.booking_service_client = booking_service_client
        self.today = today

    @Logger.io
    async def execute(self, *, session: Session, booking_id: str) -> Booking:
        session.require_token()

        booking = await self.booking_service_client.get_booking(
            session=session, booking_id=booking_id
        )
        booking.validate_can_be_cancelled(self.today())

        cancelled = await self.booking_service_client.cancel_booking(
            session=session, booking_id=booking_id
        )
        Logger.base.info(
            f'🗑️ [CANCEL] Booking {cancelled.booking_reference} is now {cancelled.status}'
        )
        return cancelled
