import attrs
import pytest

from cinema_booking.platform.exception.exceptions import ValidationError
from cinema_booking.service.booking.domain.entity.booking_draft import BookingDraft
from cinema_booking.service.booking.domain.enum.seat_tier import SeatTier
from cinema_booking.service.booking.domain.seat_map_domain import SeatMap, SeatMapGenerator
from cinema_booking.service.booking.domain.seat_selection_domain import SeatSelection
from cinema_booking.service.booking.domain.value_object.seat import BookingSeat
from cinema_booking.service.booking.domain.value_object.theatre import Showing, Theatre


@pytest.fixture
def seat_map(seat_map_generator: SeatMapGenerator) -> SeatMap:
    return seat_map_generator.generate(base_price=500)


@pytest.fixture
def showing(theatre: Theatre) -> Showing:
    return Showing(theatre=theatre, time='6:30 PM')


def _draft(showing: Showing, selection: SeatSelection, seat_map: SeatMap) -> BookingDraft:
    return BookingDraft.create(
        movie_id='m1',
        showing=showing,
        selection=selection,
        seat_map=seat_map,
        payment_method='Card',
    )


@pytest.mark.unit
class TestBookingDraft:
    def test_create_copies_seats_and_totals(
        self, showing: Showing, seat_map: SeatMap
    ) -> None:
        # Arrange
        selection = SeatSelection(seat_map)
        selection.toggle('A1')
        selection.toggle('D1')

        # Act
        draft = _draft(showing, selection, seat_map)

        # Assert
        assert draft.seats == (
            BookingSeat('A1', SeatTier.VIP, 750),
            BookingSeat('D1', SeatTier.PREMIUM, 625),
        )
        assert draft.total_amount == 1375
        assert draft.theatre_name == 'PVR Phoenix'
        assert draft.theatre_location == 'Lower Parel'
        assert draft.show_date == showing.date
        assert draft.show_time == '6:30 PM'
        assert draft.seat_numbers == ['A1', 'D1']

    def test_create_rejects_empty_selection(self, showing: Showing, seat_map: SeatMap) -> None:
        with pytest.raises(ValidationError, match='Please select at least one seat'):
            _draft(showing, SeatSelection(seat_map), seat_map)

    def test_create_rejects_seat_booked_since_selection(
        self, showing: Showing, seat_map: SeatMap
    ) -> None:
        selection = SeatSelection(seat_map)
        selection.toggle('A1')

        with pytest.raises(ValidationError, match='Seat A1 is no longer available'):
            _draft(showing, selection, seat_map.with_booked(['A1']))

    def test_total_must_match_seats(self, showing: Showing, seat_map: SeatMap) -> None:
        selection = SeatSelection(seat_map)
        selection.toggle('A1')
        draft = _draft(showing, selection, seat_map)

        with pytest.raises(ValidationError, match='Total amount does not match'):
            attrs.evolve(draft, total_amount=1)

    def test_each_draft_gets_its_own_idempotency_key(
        self, showing: Showing, seat_map: SeatMap
    ) -> None:
        selection = SeatSelection(seat_map)
        selection.toggle('A1')

        first = _draft(showing, selection, seat_map)
        second = _draft(showing, selection, seat_map)

        assert first.idempotency_key
        assert first.idempotency_key != second.idempotency_key

    def test_showing_must_be_offered_by_theatre(self, theatre: Theatre) -> None:
        with pytest.raises(ValidationError, match='Showtime 11:59 PM is not offered'):
            Showing(theatre=theatre, time='11:59 PM')
