"""Booking Service Client - httpx adapter for /api/bookings"""

from typing import Any, List

from pydantic import ValidationError as PydanticValidationError

from cinema_booking.platform.constant.route_constant import (
    BOOKING_CANCEL,
    BOOKING_CREATE,
    BOOKING_GET,
    BOOKING_LIST,
    BOOKING_PAYMENT,
    IDEMPOTENCY_KEY_HEADER,
)
from cinema_booking.platform.exception.exceptions import ServiceRejectionError
from cinema_booking.platform.http.api_client import ApiClient
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_booking_service_client import (
    IBookingServiceClient,
)
from cinema_booking.service.booking.domain.entity.booking_draft import BookingDraft
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.enum.booking_status import PaymentStatus
from cinema_booking.service.booking.domain.value_object.session import Session
from cinema_booking.service.booking.driven_adapter.schema.booking_schema import (
    BookingSchema,
    CreateBookingRequest,
    PaymentUpdateRequest,
)


def _to_booking(data: Any) -> Booking:
    try:
        return BookingSchema.model_validate(data).to_domain()
    except PydanticValidationError as e:
        raise ServiceRejectionError(
            f'Unexpected booking data: {e.error_count()} error(s)', 502
        ) from e


class BookingServiceClientImpl(IBookingServiceClient):
    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    @Logger.io
    async def create_booking(
        self,
        *,
        session: Session,
        draft: BookingDraft,
        payment_status: PaymentStatus | None = None,
    ) -> Booking:
        request = CreateBookingRequest.from_draft(draft, payment_status=payment_status)
        data = await self.api_client.request(
            'POST',
            BOOKING_CREATE,
            token=session.require_token(),
            payload=request.to_payload(),
            headers={IDEMPOTENCY_KEY_HEADER: draft.idempotency_key},
            fallback_message='Booking failed',
        )
        return _to_booking(data)

    @Logger.io
    async def update_payment_status(
        self, *, session: Session, booking_id: str, payment_status: PaymentStatus
    ) -> Booking:
        data = await self.api_client.request(
            'PUT',
            BOOKING_PAYMENT.format(booking_id=booking_id),
            token=session.require_token(),
            payload=PaymentUpdateRequest(payment_status=payment_status).to_payload(),
            fallback_message='Payment update failed',
        )
        return _to_booking(data)

    @Logger.io
    async def get_booking(self, *, session: Session, booking_id: str) -> Booking:
        data = await self.api_client.request(
            'GET',
            BOOKING_GET.format(booking_id=booking_id),
            token=session.require_token(),
            fallback_message='Booking not found',
        )
        return _to_booking(data)

    @Logger.io
    async def cancel_booking(self, *, session: Session, booking_id: str) -> Booking:
        data = await self.api_client.request(
            'PUT',
            BOOKING_CANCEL.format(booking_id=booking_id),
            token=session.require_token(),
            fallback_message='Failed to cancel booking',
        )
        return _to_booking(data)

    @Logger.io
    async def list_bookings(self, *, session: Session) -> List[Booking]:
        data = await self.api_client.request(
            'GET',
            BOOKING_LIST,
            token=session.require_token(),
            fallback_message='Failed to load bookings',
        )
        return [_to_booking(item) for item in data or []]
