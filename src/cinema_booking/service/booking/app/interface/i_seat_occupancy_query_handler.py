from abc import ABC, abstractmethod

from cinema_booking.service.booking.domain.value_object.session import Session
from cinema_booking.service.booking.domain.value_object.theatre import Showing


class ISeatOccupancyQueryHandler(ABC):
    @abstractmethod
    async def get_booked_seat_numbers(
        self, *, session: Session, movie_id: str, showing: Showing
    ) -> frozenset[str]:
        """Seat numbers already booked for one theatre showtime"""
        pass
