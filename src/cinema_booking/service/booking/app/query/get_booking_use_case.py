from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_booking_service_client import (
    IBookingServiceClient,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.value_object.session import Session


class GetBookingUseCase:
    def __init__(self, *, booking_service_client: IBookingServiceClient) -> None:
        self.booking_service_client = booking_service_client

    @Logger.io
    async def execute(self, *, session: Session, booking_id: str) -> Booking:
        session.require_token()
        return await self.booking_service_client.get_booking(
            session=session, booking_id=booking_id
        )
