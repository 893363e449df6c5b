from collections.abc import Iterable

from cinema_booking.service.booking.domain.seat_map_domain import SeatMap


def calculate_total(selection: Iterable[str], seat_map: SeatMap) -> int:
    """Sum of the selected seats' prices. Seats missing from the map count as 0."""
    total = 0
    for seat_number in selection:
        seat = seat_map.get(seat_number)
        total += seat.price if seat else 0
    return total
