import hashlib
import random

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_seat_occupancy_query_handler import (
    ISeatOccupancyQueryHandler,
)
from cinema_booking.service.booking.domain.seat_map_domain import SeatLayout
from cinema_booking.service.booking.domain.value_object.session import Session
from cinema_booking.service.booking.domain.value_object.theatre import Showing


class DemoOccupancyHandlerImpl(ISeatOccupancyQueryHandler):
    """
    Simulated occupancy for demos without a Booking Service.

    Each seat is booked with probability occupancy_rate. The RNG is seeded
    from movie + theatre + date + time, so the same showtime always shows
    the same pattern.
    """

    def __init__(self, *, layout: SeatLayout, occupancy_rate: float = 0.3) -> None:
        self.layout = layout
        self.occupancy_rate = occupancy_rate

    @staticmethod
    def _seed(movie_id: str, showing: Showing) -> int:
        key = '|'.join(
            (movie_id, showing.theatre.name, showing.date.isoformat(), showing.time)
        ).encode()
        return int.from_bytes(hashlib.sha256(key).digest()[:8], 'big')

    @Logger.io
    async def get_booked_seat_numbers(
        self, *, session: Session, movie_id: str, showing: Showing
    ) -> frozenset[str]:
        rng = random.Random(self._seed(movie_id, showing))
        return frozenset(
            f'{row}{column}'
            for row in self.layout.rows
            for column in range(1, self.layout.seats_per_row + 1)
            if rng.random() < self.occupancy_rate
        )
