from typing import TYPE_CHECKING, Sequence


if TYPE_CHECKING:
    from cinema_booking.service.booking.domain.entity.booking_entity import Booking


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Rejected locally, before any network call"""


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class ServiceRejectionError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class SeatConflictError(ServiceRejectionError):
    def __init__(self, message: str, seat_numbers: Sequence[str] = ()) -> None:
        self.seat_numbers = tuple(seat_numbers)
        super().__init__(message, 409)


class NetworkError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 503)


class PaymentIncompleteError(CustomBaseError):
    """Booking was created but its payment could not be marked completed"""

    def __init__(self, message: str, booking: 'Booking') -> None:
        self.booking = booking
        super().__init__(message, 502)
