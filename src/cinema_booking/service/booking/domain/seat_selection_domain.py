"""
Seat Selection Domain

Tracks the seats a user has tentatively chosen for the active seat map.
"""

from enum import StrEnum

from cinema_booking.platform.exception.exceptions import ValidationError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.domain.seat_map_domain import SeatMap


DEFAULT_MAX_SEATS = 10


class ToggleOutcome(StrEnum):
    ADDED = 'added'
    REMOVED = 'removed'
    IGNORED = 'ignored'  # unknown or already booked seat
    LIMIT_REACHED = 'limit_reached'


class SeatSelection:
    """
    Ordered set of selected seat numbers.

    Invariants:
    - never holds more than max_seats members
    - never holds a seat that is booked in the seat map
    """

    def __init__(self, seat_map: SeatMap, *, max_seats: int = DEFAULT_MAX_SEATS) -> None:
        self.seat_map = seat_map
        self.max_seats = max_seats
        # dict keeps insertion order
        self._selected: dict[str, None] = {}

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, seat_number: object) -> bool:
        return seat_number in self._selected

    @property
    def seat_numbers(self) -> list[str]:
        return list(self._selected)

    @property
    def is_empty(self) -> bool:
        return not self._selected

    @property
    def limit_notice(self) -> str:
        return f'Maximum {self.max_seats} seats can be selected'

    def toggle(self, seat_number: str) -> ToggleOutcome:
        if not self.seat_map.is_selectable(seat_number):
            return ToggleOutcome.IGNORED

        if seat_number in self._selected:
            del self._selected[seat_number]
            return ToggleOutcome.REMOVED

        if len(self._selected) >= self.max_seats:
            Logger.base.info(f'🚫 [SELECTION] {seat_number} rejected: {self.limit_notice}')
            return ToggleOutcome.LIMIT_REACHED

        self._selected[seat_number] = None
        return ToggleOutcome.ADDED

    def reset(self) -> None:
        self._selected.clear()

    def rebind(self, seat_map: SeatMap) -> list[str]:
        """
        Point the selection at a refreshed seat map, dropping seats that are
        no longer selectable. Returns the dropped seat numbers.
        """
        self.seat_map = seat_map
        dropped = [number for number in self._selected if not seat_map.is_selectable(number)]
        for number in dropped:
            del self._selected[number]
        return dropped

    def validate_for_submission(self) -> None:
        if not self._selected:
            raise ValidationError('Please select at least one seat')
        if len(self._selected) > self.max_seats:
            raise ValidationError(self.limit_notice)
