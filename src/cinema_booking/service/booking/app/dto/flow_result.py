"""Outcome of a booking flow operation, as shown to the user."""

from enum import StrEnum
from typing import Optional

import attrs

from cinema_booking.platform.exception.exceptions import (
    AuthenticationError,
    CustomBaseError,
    NetworkError,
    NotFoundError,
    PaymentIncompleteError,
    SeatConflictError,
    ServiceRejectionError,
    ValidationError,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.enum.flow_state import FlowState


GENERIC_ERROR_MESSAGE = 'Something went wrong. Please try again.'


class ErrorKind(StrEnum):
    VALIDATION = 'validation'
    AUTHENTICATION = 'authentication'
    NOT_FOUND = 'not_found'
    NETWORK = 'network'
    SERVICE_REJECTION = 'service_rejection'
    SEAT_CONFLICT = 'seat_conflict'
    PAYMENT_INCOMPLETE = 'payment_incomplete'
    UNEXPECTED = 'unexpected'


# Most specific first
_ERROR_KINDS: tuple[tuple[type[CustomBaseError], ErrorKind], ...] = (
    (ValidationError, ErrorKind.VALIDATION),
    (SeatConflictError, ErrorKind.SEAT_CONFLICT),
    (PaymentIncompleteError, ErrorKind.PAYMENT_INCOMPLETE),
    (AuthenticationError, ErrorKind.AUTHENTICATION),
    (NotFoundError, ErrorKind.NOT_FOUND),
    (NetworkError, ErrorKind.NETWORK),
    (ServiceRejectionError, ErrorKind.SERVICE_REJECTION),
)


def error_kind_of(error: Exception) -> ErrorKind:
    for error_type, kind in _ERROR_KINDS:
        if isinstance(error, error_type):
            return kind
    return ErrorKind.UNEXPECTED


@attrs.define(frozen=True)
class FlowResult:
    ok: bool
    state: FlowState
    message: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    booking: Optional[Booking] = None

    @classmethod
    def success(
        cls, state: FlowState, *, message: str | None = None, booking: Booking | None = None
    ) -> 'FlowResult':
        return cls(ok=True, state=state, message=message, booking=booking)

    @classmethod
    def failure(
        cls, state: FlowState, error: Exception, *, booking: Booking | None = None
    ) -> 'FlowResult':
        kind = error_kind_of(error)
        message = error.message if isinstance(error, CustomBaseError) else GENERIC_ERROR_MESSAGE
        return cls(ok=False, state=state, message=message, error_kind=kind, booking=booking)

    @classmethod
    def notice(cls, state: FlowState, message: str) -> 'FlowResult':
        """Rejected user action that leaves state unchanged"""
        return cls(ok=False, state=state, message=message, error_kind=ErrorKind.VALIDATION)
