from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_seat_occupancy_query_handler import (
    ISeatOccupancyQueryHandler,
)
from cinema_booking.service.booking.domain.seat_map_domain import SeatMap, SeatMapGenerator
from cinema_booking.service.booking.domain.value_object.session import Session
from cinema_booking.service.booking.domain.value_object.theatre import Showing


class LoadSeatMapUseCase:
    """Seat map for one showtime, with occupancy from the configured source"""

    def __init__(
        self,
        *,
        occupancy_handler: ISeatOccupancyQueryHandler,
        seat_map_generator: SeatMapGenerator,
    ) -> None:
        self.occupancy_handler = occupancy_handler
        self.seat_map_generator = seat_map_generator

    @Logger.io
    async def execute(self, *, session: Session, movie_id: str, showing: Showing) -> SeatMap:
        booked = await self.occupancy_handler.get_booked_seat_numbers(
            session=session, movie_id=movie_id, showing=showing
        )
        return self.seat_map_generator.generate(
            base_price=showing.theatre.base_price, booked_seat_numbers=booked
        )
