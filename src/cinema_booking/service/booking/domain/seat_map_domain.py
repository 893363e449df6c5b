"""
Seat Map Domain

Builds the fixed seat layout of one theatre showtime and assigns each seat
its tier and price. Pure domain logic: occupancy is supplied by the caller.
"""

from collections.abc import Iterable, Iterator
from decimal import ROUND_HALF_UP, Decimal

import attrs

from cinema_booking.platform.exception.exceptions import ValidationError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.domain.enum.seat_tier import SeatTier
from cinema_booking.service.booking.domain.value_object.seat import Seat


def _to_decimal(value: float | str | Decimal) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


@attrs.define(frozen=True)
class SeatLayout:
    """Rows, columns and tier bands of an auditorium"""

    rows: str = 'ABCDEFGHIJ'
    seats_per_row: int = 10
    vip_row_count: int = 3
    premium_row_count: int = 3
    vip_multiplier: Decimal = attrs.field(default=Decimal('1.5'), converter=_to_decimal)
    premium_multiplier: Decimal = attrs.field(default=Decimal('1.25'), converter=_to_decimal)

    @property
    def capacity(self) -> int:
        return len(self.rows) * self.seats_per_row

    def tier_for_row(self, row_index: int) -> SeatTier:
        if row_index < self.vip_row_count:
            return SeatTier.VIP
        if row_index < self.vip_row_count + self.premium_row_count:
            return SeatTier.PREMIUM
        return SeatTier.REGULAR

    def price_for_tier(self, tier: SeatTier, base_price: int) -> int:
        """Tier price rounded half-up to the nearest currency unit"""
        multiplier = {
            SeatTier.VIP: self.vip_multiplier,
            SeatTier.PREMIUM: self.premium_multiplier,
            SeatTier.REGULAR: Decimal(1),
        }[tier]
        return int((Decimal(base_price) * multiplier).quantize(Decimal(1), rounding=ROUND_HALF_UP))


class SeatMap:
    """Ordered seats of one showtime, addressable by seat number"""

    def __init__(self, seats: Iterable[Seat], *, layout: SeatLayout) -> None:
        self.layout = layout
        self._seats: dict[str, Seat] = {}
        for seat in seats:
            if seat.seat_number in self._seats:
                raise ValidationError(f'Duplicate seat number: {seat.seat_number}')
            self._seats[seat.seat_number] = seat

    def __len__(self) -> int:
        return len(self._seats)

    def __iter__(self) -> Iterator[Seat]:
        return iter(self._seats.values())

    def __contains__(self, seat_number: object) -> bool:
        return seat_number in self._seats

    def get(self, seat_number: str) -> Seat | None:
        return self._seats.get(seat_number)

    def is_selectable(self, seat_number: str) -> bool:
        seat = self._seats.get(seat_number)
        return seat is not None and not seat.is_booked

    def rows(self) -> list[tuple[str, list[Seat]]]:
        """Seats grouped by row letter, in layout order"""
        grouped: dict[str, list[Seat]] = {row: [] for row in self.layout.rows}
        for seat in self._seats.values():
            grouped.setdefault(seat.row, []).append(seat)
        return list(grouped.items())

    def booked_seat_numbers(self) -> frozenset[str]:
        return frozenset(seat.seat_number for seat in self._seats.values() if seat.is_booked)

    def with_booked(self, seat_numbers: Iterable[str]) -> 'SeatMap':
        """Copy of this map with the given seats additionally marked booked"""
        newly_booked = set(seat_numbers)
        return SeatMap(
            (
                attrs.evolve(seat, is_booked=True) if seat.seat_number in newly_booked else seat
                for seat in self._seats.values()
            ),
            layout=self.layout,
        )


class SeatMapGenerator:
    def __init__(self, layout: SeatLayout | None = None) -> None:
        self.layout = layout or SeatLayout()

    @Logger.io
    def generate(self, *, base_price: int, booked_seat_numbers: Iterable[str] = ()) -> SeatMap:
        """
        Generate the full seat map for one showtime.

        Rows are tiered front to back: VIP, then Premium, then Regular.
        Seats listed in booked_seat_numbers are marked as already booked.
        """
        if base_price <= 0:
            raise ValidationError('Base price must be positive')

        booked = frozenset(booked_seat_numbers)
        seats = []
        for row_index, row in enumerate(self.layout.rows):
            tier = self.layout.tier_for_row(row_index)
            price = self.layout.price_for_tier(tier, base_price)
            for column in range(1, self.layout.seats_per_row + 1):
                seat_number = f'{row}{column}'
                seats.append(
                    Seat(
                        seat_number=seat_number,
                        tier=tier,
                        price=price,
                        is_booked=seat_number in booked,
                    )
                )

        seat_map = SeatMap(seats, layout=self.layout)
        Logger.base.info(
            f'🪑 [SEAT_MAP] Generated {len(seat_map)} seats, '
            f'{len(seat_map.booked_seat_numbers())} already booked'
        )
        return seat_map
