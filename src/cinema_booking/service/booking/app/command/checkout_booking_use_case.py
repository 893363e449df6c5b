from opentelemetry import trace

from cinema_booking.platform.config.core_setting import CheckoutMode
from cinema_booking.platform.exception.exceptions import CustomBaseError, PaymentIncompleteError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_booking_service_client import (
    IBookingServiceClient,
)
from cinema_booking.service.booking.domain.entity.booking_draft import BookingDraft
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.enum.booking_status import PaymentStatus
from cinema_booking.service.booking.domain.value_object.session import Session


class CheckoutBookingUseCase:
    """
    Persist a booking draft and complete its payment.

    Modes:
    - ATOMIC: one create request carrying paymentStatus=Completed and an
      Idempotency-Key, so a crash cannot leave the booking Pending
    - TWO_STEP: create, then mark payment completed. If the second call
      fails, PaymentIncompleteError carries the created booking; passing it
      back as pending_booking retries only the payment call.
    """

    def __init__(
        self,
        *,
        booking_service_client: IBookingServiceClient,
        checkout_mode: CheckoutMode = CheckoutMode.ATOMIC,
    ) -> None:
        self.booking_service_client = booking_service_client
        self.checkout_mode = checkout_mode
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(
        self,
        *,
        session: Session,
        draft: BookingDraft,
        pending_booking: Booking | None = None,
    ) -> Booking:
        session.require_token()

        with self.tracer.start_as_current_span(
            'use_case.checkout_booking',
            attributes={
                'booking.idempotency_key': draft.idempotency_key,
                'booking.checkout_mode': self.checkout_mode.value,
                'booking.seat_count': len(draft.seats),
            },
        ):
            if pending_booking is not None:
                Logger.base.info(
                    f'🔁 [CHECKOUT] Retrying payment for {pending_booking.booking_reference}'
                )
                return await self._complete_payment(session=session, booking=pending_booking)

            if self.checkout_mode == CheckoutMode.ATOMIC:
                booking = await self.booking_service_client.create_booking(
                    session=session, draft=draft, payment_status=PaymentStatus.COMPLETED
                )
                Logger.base.info(
                    f'✅ [CHECKOUT] Booking {booking.booking_reference} created and paid, '
                    f'total: {booking.total_amount}'
                )
                return booking

            booking = await self.booking_service_client.create_booking(
                session=session, draft=draft
            )
            Logger.base.info(
                f'📝 [CHECKOUT] Booking {booking.booking_reference} created, completing payment'
            )
            return await self._complete_payment(session=session, booking=booking)

    async def _complete_payment(self, *, session: Session, booking: Booking) -> Booking:
        try:
            return await self.booking_service_client.update_payment_status(
                session=session, booking_id=booking.id, payment_status=PaymentStatus.COMPLETED
            )
        except CustomBaseError as e:
            raise PaymentIncompleteError(
                f'Booking {booking.booking_reference} was created but payment could not be '
                f'completed: {e.message}',
                booking=booking,
            ) from e
