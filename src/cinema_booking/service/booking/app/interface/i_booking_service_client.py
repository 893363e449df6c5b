"""
Booking Service Client Interface

Port to the external Booking Service, which owns persistence, payment status
and seat concurrency control.
"""

from abc import ABC, abstractmethod
from typing import List

from cinema_booking.service.booking.domain.entity.booking_draft import BookingDraft
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.enum.booking_status import PaymentStatus
from cinema_booking.service.booking.domain.value_object.session import Session


class IBookingServiceClient(ABC):
    @abstractmethod
    async def create_booking(
        self,
        *,
        session: Session,
        draft: BookingDraft,
        payment_status: PaymentStatus | None = None,
    ) -> Booking:
        """
        Persist a booking draft

        Args:
            session: Authenticated session
            draft: Booking draft to persist
            payment_status: When given, the service records the payment in the
                same request (atomic checkout)

        Raises:
            SeatConflictError: When a seat was booked by another session
        """
        pass

    @abstractmethod
    async def update_payment_status(
        self, *, session: Session, booking_id: str, payment_status: PaymentStatus
    ) -> Booking:
        pass

    @abstractmethod
    async def get_booking(self, *, session: Session, booking_id: str) -> Booking:
        pass

    @abstractmethod
    async def cancel_booking(self, *, session: Session, booking_id: str) -> Booking:
        pass

    @abstractmethod
    async def list_bookings(self, *, session: Session) -> List[Booking]:
        pass
