from typing import List

import attrs

from cinema_booking.service.booking.app.booking_flow_orchestrator import BookingFlowOrchestrator
from cinema_booking.service.booking.driving_adapter.view_model.formatting import (
    format_currency,
    format_show_date,
)


@attrs.define(frozen=True)
class SummaryLine:
    seat_number: str
    tier: str
    price: str


@attrs.define(frozen=True)
class BookingSummaryView:
    theatre_name: str
    theatre_location: str
    show_date: str
    show_time: str
    seat_count_label: str
    lines: List[SummaryLine]
    total: str
    pay_button_label: str
    pay_enabled: bool
    hint: str


def build_booking_summary(
    orchestrator: BookingFlowOrchestrator, *, currency: str = 'Rs'
) -> BookingSummaryView | None:
    showing, seat_map = orchestrator.showing, orchestrator.seat_map
    if showing is None or seat_map is None:
        return None

    lines = []
    for seat_number in orchestrator.selected_seat_numbers:
        seat = seat_map.get(seat_number)
        if seat is not None:
            lines.append(
                SummaryLine(
                    seat_number=seat_number,
                    tier=seat.tier.value,
                    price=format_currency(seat.price, currency),
                )
            )

    count = len(lines)
    total = format_currency(orchestrator.total, currency)
    return BookingSummaryView(
        theatre_name=showing.theatre.name,
        theatre_location=showing.theatre.location,
        show_date=format_show_date(showing.date),
        show_time=showing.time,
        seat_count_label=f'{count} seat(s)',
        lines=lines,
        total=total,
        pay_button_label='Processing...' if orchestrator.is_submitting else f'Pay {total}',
        pay_enabled=count > 0 and not orchestrator.is_submitting,
        hint='Please select at least one seat' if count == 0 else f'{count} seat(s) selected',
    )
