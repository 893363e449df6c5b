import attrs

from cinema_booking.platform.exception.exceptions import AuthenticationError


@attrs.define(frozen=True)
class Session:
    """Authenticated user context handed to the booking flow"""

    token: str = attrs.field(repr=False)
    user_id: str | None = None
    user_name: str | None = None

    def require_token(self) -> str:
        if not self.token:
            raise AuthenticationError('Please log in to continue')
        return self.token
