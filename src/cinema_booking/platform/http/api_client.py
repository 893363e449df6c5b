"""
REST backend transport.

Every backend response is wrapped as ``{success, data?, message?}``. This
module unwraps it and turns transport failures, non-2xx statuses and
``success: false`` into the platform exception hierarchy.
"""

from typing import Any, Mapping

import anyio
import httpx
import orjson

from cinema_booking.platform.exception.exceptions import (
    AuthenticationError,
    NetworkError,
    NotFoundError,
    SeatConflictError,
    ServiceRejectionError,
)
from cinema_booking.platform.logging.loguru_io import Logger


NETWORK_ERROR_MESSAGE = 'Network error. Please check your connection and try again.'
SEAT_CONFLICT_MARKERS = ('already booked', 'not available', 'seat conflict')


def build_http_client(*, base_url: str, timeout_seconds: float) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout_seconds),
        headers={'Content-Type': 'application/json', 'Accept': 'application/json'},
    )


def _is_seat_conflict(status_code: int, message: str) -> bool:
    if status_code == 409:
        return True
    lowered = message.lower()
    return 'seat' in lowered and any(marker in lowered for marker in SEAT_CONFLICT_MARKERS)


def _conflicting_seats(body: Mapping[str, Any]) -> list[str]:
    data = body.get('data')
    if not isinstance(data, dict):
        return []
    seats = data.get('conflictingSeats') or data.get('seats') or []
    return [str(seat) for seat in seats if isinstance(seat, str)]


class ApiClient:
    def __init__(self, *, http_client: httpx.AsyncClient, timeout_seconds: float) -> None:
        self.http_client = http_client
        self.timeout_seconds = timeout_seconds

    @staticmethod
    def auth_headers(token: str) -> dict[str, str]:
        return {'Authorization': f'Bearer {token}'}

    @Logger.io
    async def request(
        self,
        method: str,
        path: str,
        *,
        fallback_message: str,
        token: str | None = None,
        payload: Any = None,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Send one request and return the unwrapped ``data`` field.

        Raises:
            NetworkError: transport, decoding or redirect failure, or timeout
            AuthenticationError: 401
            NotFoundError: 404
            SeatConflictError: 409 or a seat-already-booked rejection
            ServiceRejectionError: any other non-2xx or ``success: false``
        """
        request_headers = dict(headers or {})
        if token:
            request_headers |= self.auth_headers(token)

        try:
            # Deadline for the whole exchange; httpx timeouts apply per phase
            with anyio.fail_after(self.timeout_seconds):
                response = await self.http_client.request(
                    method,
                    path,
                    content=orjson.dumps(payload) if payload is not None else None,
                    params=params,
                    headers=request_headers,
                )
        except (httpx.TimeoutException, TimeoutError) as e:
            Logger.base.warning(f'⏱️ [API] {method} {path} timed out: {e}')
            raise NetworkError('The request timed out. Please try again.') from e
        except httpx.RequestError as e:
            Logger.base.warning(f'📡 [API] {method} {path} transport failure: {e}')
            raise NetworkError(NETWORK_ERROR_MESSAGE) from e

        return self._unwrap(response, fallback_message=fallback_message)

    def _unwrap(self, response: httpx.Response, *, fallback_message: str) -> Any:
        try:
            body = orjson.loads(response.content) if response.content else {}
        except orjson.JSONDecodeError:
            raise ServiceRejectionError(fallback_message, response.status_code or 502)

        if not isinstance(body, dict):
            raise ServiceRejectionError(fallback_message, 502)

        message = body.get('message') or fallback_message
        if response.is_success and body.get('success') is True:
            return body.get('data')

        status_code = response.status_code if not response.is_success else 400
        if _is_seat_conflict(status_code, str(body.get('message') or '')):
            raise SeatConflictError(message, _conflicting_seats(body))
        if status_code == 401:
            raise AuthenticationError(message)
        if status_code == 404:
            raise NotFoundError(message)
        raise ServiceRejectionError(message, status_code)
