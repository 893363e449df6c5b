"""Seat map as rendered by the seat selection step."""

from enum import StrEnum
from typing import List

import attrs

from cinema_booking.service.booking.domain.enum.seat_tier import SeatTier
from cinema_booking.service.booking.domain.seat_map_domain import SeatMap
from cinema_booking.service.booking.domain.seat_selection_domain import SeatSelection
from cinema_booking.service.booking.driving_adapter.view_model.formatting import format_currency


class SeatDisplayState(StrEnum):
    AVAILABLE = 'available'
    SELECTED = 'selected'
    BOOKED = 'booked'


@attrs.define(frozen=True)
class SeatCell:
    seat_number: str
    column: int
    tier: SeatTier
    price: int
    state: SeatDisplayState
    title: str

    @property
    def is_disabled(self) -> bool:
        return self.state == SeatDisplayState.BOOKED


@attrs.define(frozen=True)
class SeatRowView:
    row: str
    cells: List[SeatCell]


@attrs.define(frozen=True)
class LegendEntry:
    label: str
    state: SeatDisplayState | None = None
    tier: SeatTier | None = None


@attrs.define(frozen=True)
class SeatMapView:
    rows: List[SeatRowView]
    legend: List[LegendEntry]


def _display_state(seat_number: str, is_booked: bool, selection: SeatSelection) -> SeatDisplayState:
    if is_booked:
        return SeatDisplayState.BOOKED
    if seat_number in selection:
        return SeatDisplayState.SELECTED
    return SeatDisplayState.AVAILABLE


def build_seat_map_view(
    seat_map: SeatMap, selection: SeatSelection, *, base_price: int, currency: str = 'Rs'
) -> SeatMapView:
    rows = []
    for row, seats in seat_map.rows():
        cells = [
            SeatCell(
                seat_number=seat.seat_number,
                column=int(seat.seat_number[len(row):]),
                tier=seat.tier,
                price=seat.price,
                state=_display_state(seat.seat_number, seat.is_booked, selection),
                title=f'{seat.seat_number} - {seat.tier} - {format_currency(seat.price, currency)}',
            )
            for seat in seats
        ]
        rows.append(SeatRowView(row=row, cells=cells))

    layout = seat_map.layout
    vip_price = format_currency(layout.price_for_tier(SeatTier.VIP, base_price), currency)
    premium_price = format_currency(layout.price_for_tier(SeatTier.PREMIUM, base_price), currency)
    legend = [
        LegendEntry(label='Available', state=SeatDisplayState.AVAILABLE),
        LegendEntry(label='Selected', state=SeatDisplayState.SELECTED),
        LegendEntry(label='Booked', state=SeatDisplayState.BOOKED),
        LegendEntry(label=f'VIP ({vip_price})', tier=SeatTier.VIP),
        LegendEntry(label=f'Premium ({premium_price})', tier=SeatTier.PREMIUM),
    ]
    return SeatMapView(rows=rows, legend=legend)
