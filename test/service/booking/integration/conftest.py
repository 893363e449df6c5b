"""
BDD Step Definitions for the booking flow

Drives BookingFlowOrchestrator end to end against the in-memory Booking
Service.

Note: pytest-bdd steps must be synchronous, so async operations run through
anyio.run().
"""

from collections.abc import Awaitable, Callable
from datetime import date
from typing import Any, TypeVar

import anyio
import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from booking_fakes import InMemoryBookingService
from cinema_booking.service.booking.app.booking_flow_orchestrator import BookingFlowOrchestrator
from cinema_booking.service.booking.app.command.cancel_booking_use_case import (
    CancelBookingUseCase,
)
from cinema_booking.service.booking.app.dto.flow_result import ErrorKind, FlowResult
from cinema_booking.service.booking.app.query.load_seat_map_use_case import LoadSeatMapUseCase
from cinema_booking.service.booking.domain.enum.flow_state import FlowState
from cinema_booking.service.booking.domain.value_object.session import Session
from cinema_booking.service.booking.domain.value_object.theatre import Movie, Showing, Theatre


scenarios('booking_flow.feature')

_T = TypeVar('_T')


# =============================================================================
# Helper Functions
# =============================================================================
def _run_async(operation: Callable[[], Awaitable[_T]]) -> _T:
    """Run an async operation in sync step context."""
    return anyio.run(operation)


def _seat_list(seats: str) -> list[str]:
    return [seat.strip() for seat in seats.split(',') if seat.strip()]


def _find_showing(movie: Movie, theatre_name: str, showtime: str) -> Showing:
    theatre: Theatre = next(t for t in movie.theatres if t.name == theatre_name)
    return Showing(theatre=theatre, time=showtime)


# =============================================================================
# Fixtures
# =============================================================================
@pytest.fixture
def context() -> dict[str, Any]:
    """Shared state between steps"""
    return {}


# =============================================================================
# Given Steps
# =============================================================================
@given(parsers.parse('I am logged in and viewing the movie "{title}"'))
def viewing_movie(
    context: dict[str, Any],
    make_orchestrator: Callable[..., BookingFlowOrchestrator],
    title: str,
) -> None:
    orchestrator = make_orchestrator()
    result = _run_async(orchestrator.load_movie)
    assert result.ok
    assert orchestrator.movie is not None and orchestrator.movie.title == title
    context['orchestrator'] = orchestrator


# =============================================================================
# When Steps
# =============================================================================
@when(parsers.parse('I choose the "{showtime}" show at "{theatre_name}"'))
def choose_showing(context: dict[str, Any], showtime: str, theatre_name: str) -> None:
    orchestrator: BookingFlowOrchestrator = context['orchestrator']
    showing = _find_showing(orchestrator.movie, theatre_name, showtime)
    result = _run_async(lambda: orchestrator.choose_showing(showing.theatre, showtime))
    assert result.ok, result.message


@when(parsers.parse('I select seats "{seats}"'))
def select_seats(context: dict[str, Any], seats: str) -> None:
    orchestrator: BookingFlowOrchestrator = context['orchestrator']
    for seat_number in _seat_list(seats):
        context['result'] = orchestrator.toggle_seat(seat_number)


@when(parsers.parse('another user books seats "{seats}"'))
def another_user_books(
    context: dict[str, Any], booking_service: InMemoryBookingService, movie: Movie, seats: str
) -> None:
    orchestrator: BookingFlowOrchestrator = context['orchestrator']
    booking_service.occupy(orchestrator.showing, movie.id, *_seat_list(seats))


@when('I pay')
def pay(context: dict[str, Any]) -> None:
    orchestrator: BookingFlowOrchestrator = context['orchestrator']
    context['result'] = _run_async(orchestrator.submit)


@when('I cancel my booking')
def cancel_booking(
    context: dict[str, Any], session: Session, booking_service: InMemoryBookingService
) -> None:
    orchestrator: BookingFlowOrchestrator = context['orchestrator']
    use_case = CancelBookingUseCase(
        booking_service_client=booking_service, today=lambda: date(2099, 1, 1)
    )
    context['cancelled'] = _run_async(
        lambda: use_case.execute(session=session, booking_id=orchestrator.next_booking_id)
    )


# =============================================================================
# Then Steps
# =============================================================================
@then(parsers.parse('the total should be {total:d}'))
def total_should_be(context: dict[str, Any], total: int) -> None:
    assert context['orchestrator'].total == total


@then(parsers.parse('my booking should be confirmed with reference "{reference}"'))
def confirmed_with_reference(context: dict[str, Any], reference: str) -> None:
    result: FlowResult = context['result']
    assert result.state == FlowState.CONFIRMED
    assert result.booking.booking_reference == reference
    assert result.message == f'Booking confirmed: {reference}'


@then(parsers.parse('my booking should be confirmed with seats "{seats}"'))
def confirmed_with_seats(context: dict[str, Any], seats: str) -> None:
    result: FlowResult = context['result']
    assert result.state == FlowState.CONFIRMED
    assert result.booking.seat_numbers == _seat_list(seats)


@then('my booking should fail with a seat conflict')
def fails_with_seat_conflict(context: dict[str, Any]) -> None:
    result: FlowResult = context['result']
    assert not result.ok
    assert result.state == FlowState.FAILED
    assert result.error_kind == ErrorKind.SEAT_CONFLICT


@then(parsers.parse('my selection should be "{seats}"'))
def selection_should_be(context: dict[str, Any], seats: str) -> None:
    assert context['orchestrator'].selected_seat_numbers == _seat_list(seats)


@then(parsers.parse('I should see "{message}"'))
def should_see(context: dict[str, Any], message: str) -> None:
    result: FlowResult = context['result']
    assert not result.ok
    assert result.message == message


@then('no booking request should have been sent')
def no_booking_request(booking_service: InMemoryBookingService) -> None:
    assert booking_service.create_calls == []


@then(parsers.parse('my booking should be "{status}"'))
def booking_status_should_be(
    context: dict[str, Any], booking_service: InMemoryBookingService, status: str
) -> None:
    assert context['cancelled'].status == status
    assert booking_service.bookings[context['cancelled'].id].status == status


def _booked_for(
    context: dict[str, Any],
    load_seat_map_use_case: LoadSeatMapUseCase,
    session: Session,
    movie: Movie,
    theatre_name: str,
    showtime: str,
) -> frozenset[str]:
    showing = _find_showing(context['orchestrator'].movie, theatre_name, showtime)
    seat_map = _run_async(
        lambda: load_seat_map_use_case.execute(session=session, movie_id=movie.id, showing=showing)
    )
    return seat_map.booked_seat_numbers()


@then(
    parsers.parse('seats "{seats}" should be taken for the "{showtime}" show at "{theatre_name}"')
)
def seats_taken(
    context: dict[str, Any],
    load_seat_map_use_case: LoadSeatMapUseCase,
    session: Session,
    movie: Movie,
    seats: str,
    showtime: str,
    theatre_name: str,
) -> None:
    booked = _booked_for(context, load_seat_map_use_case, session, movie, theatre_name, showtime)
    assert set(_seat_list(seats)) <= booked


@then(
    parsers.parse('seats "{seats}" should be free for the "{showtime}" show at "{theatre_name}"')
)
def seats_free(
    context: dict[str, Any],
    load_seat_map_use_case: LoadSeatMapUseCase,
    session: Session,
    movie: Movie,
    seats: str,
    showtime: str,
    theatre_name: str,
) -> None:
    booked = _booked_for(context, load_seat_map_use_case, session, movie, theatre_name, showtime)
    assert not set(_seat_list(seats)) & booked
