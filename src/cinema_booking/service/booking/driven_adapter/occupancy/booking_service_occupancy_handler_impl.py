from pydantic import ValidationError as PydanticValidationError

from cinema_booking.platform.constant.route_constant import BOOKING_OCCUPIED_SEATS
from cinema_booking.platform.exception.exceptions import ServiceRejectionError
from cinema_booking.platform.http.api_client import ApiClient
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_seat_occupancy_query_handler import (
    ISeatOccupancyQueryHandler,
)
from cinema_booking.service.booking.domain.value_object.session import Session
from cinema_booking.service.booking.domain.value_object.theatre import Showing
from cinema_booking.service.booking.driven_adapter.schema.booking_schema import (
    OccupiedSeatsSchema,
)


class BookingServiceOccupancyHandlerImpl(ISeatOccupancyQueryHandler):
    """Occupancy as recorded by the Booking Service, keyed by theatre + date + time"""

    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    @Logger.io
    async def get_booked_seat_numbers(
        self, *, session: Session, movie_id: str, showing: Showing
    ) -> frozenset[str]:
        data = await self.api_client.request(
            'GET',
            BOOKING_OCCUPIED_SEATS,
            token=session.require_token(),
            params={
                'movieId': movie_id,
                'theatre': showing.theatre.name,
                'date': showing.date.isoformat(),
                'time': showing.time,
            },
            fallback_message='Failed to load seat availability',
        )
        try:
            occupied = OccupiedSeatsSchema.model_validate(data or {})
        except PydanticValidationError as e:
            raise ServiceRejectionError(
                f'Unexpected seat data: {e.error_count()} error(s)', 502
            ) from e
        return frozenset(occupied.seats)
