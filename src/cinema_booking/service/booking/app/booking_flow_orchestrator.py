"""
Booking Flow Orchestrator

Drives one user's movie booking session:

    SELECTING_THEATRE -> SELECTING_SEATS -> SUBMITTING -> CONFIRMED
                              ^                 |
                              +---- FAILED <----+

Every public operation returns a FlowResult and never raises. FAILED keeps
the seat map and selection so the user can retry without re-selecting.
"""

from collections.abc import Awaitable, Callable
from typing import Optional, TypeVar

import anyio

from cinema_booking.platform.exception.exceptions import (
    CustomBaseError,
    PaymentIncompleteError,
    SeatConflictError,
    ValidationError,
)
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.command.checkout_booking_use_case import (
    CheckoutBookingUseCase,
)
from cinema_booking.service.booking.app.dto.flow_result import FlowResult
from cinema_booking.service.booking.app.query.get_movie_showings_use_case import (
    GetMovieShowingsUseCase,
)
from cinema_booking.service.booking.app.query.load_seat_map_use_case import LoadSeatMapUseCase
from cinema_booking.service.booking.domain.entity.booking_draft import BookingDraft
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.enum.flow_state import FlowState
from cinema_booking.service.booking.domain.pricing_domain import calculate_total
from cinema_booking.service.booking.domain.seat_map_domain import SeatMap
from cinema_booking.service.booking.domain.seat_selection_domain import (
    DEFAULT_MAX_SEATS,
    SeatSelection,
    ToggleOutcome,
)
from cinema_booking.service.booking.domain.value_object.session import Session
from cinema_booking.service.booking.domain.value_object.theatre import Movie, Showing, Theatre


_T = TypeVar('_T')

SEAT_STEP_STATES = (FlowState.SELECTING_SEATS, FlowState.FAILED)
ABANDONED_MESSAGE = 'Booking flow was closed'


class _Abandoned(Exception):
    pass


class BookingFlowOrchestrator:
    def __init__(
        self,
        *,
        session: Session,
        movie_id: str,
        get_movie_showings_use_case: GetMovieShowingsUseCase,
        load_seat_map_use_case: LoadSeatMapUseCase,
        checkout_booking_use_case: CheckoutBookingUseCase,
        max_seats: int = DEFAULT_MAX_SEATS,
        payment_method: str = 'Card',
    ) -> None:
        self.session = session
        self.movie_id = movie_id
        self.get_movie_showings_use_case = get_movie_showings_use_case
        self.load_seat_map_use_case = load_seat_map_use_case
        self.checkout_booking_use_case = checkout_booking_use_case
        self.max_seats = max_seats
        self.payment_method = payment_method

        self.state = FlowState.SELECTING_THEATRE
        self.movie: Optional[Movie] = None
        self.showing: Optional[Showing] = None
        self.seat_map: Optional[SeatMap] = None
        self.selection: Optional[SeatSelection] = None
        self.pending_booking: Optional[Booking] = None
        self.confirmed_booking: Optional[Booking] = None
        self._draft: Optional[BookingDraft] = None
        self._abandoned = False
        self._cancel_scopes: set[anyio.CancelScope] = set()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def selected_seat_numbers(self) -> list[str]:
        return self.selection.seat_numbers if self.selection else []

    @property
    def total(self) -> int:
        if not self.selection or not self.seat_map:
            return 0
        return calculate_total(self.selection.seat_numbers, self.seat_map)

    @property
    def is_submitting(self) -> bool:
        return self.state == FlowState.SUBMITTING

    @property
    def next_booking_id(self) -> str | None:
        """Identity of the confirmed booking, for the booking detail view"""
        return self.confirmed_booking.id if self.confirmed_booking else None

    # ------------------------------------------------------------------
    # Step 1: theatre and showtime
    # ------------------------------------------------------------------

    async def load_movie(self) -> FlowResult:
        try:
            self.session.require_token()
            movie = await self._abandonable(
                lambda: self.get_movie_showings_use_case.execute(movie_id=self.movie_id)
            )
        except _Abandoned:
            return FlowResult.notice(self.state, ABANDONED_MESSAGE)
        except Exception as e:
            return self._fail_without_transition(e)

        self.movie = movie
        return FlowResult.success(self.state)

    async def choose_showing(self, theatre: Theatre, showtime: str) -> FlowResult:
        if self.state in (FlowState.SUBMITTING, FlowState.CONFIRMED):
            return FlowResult.notice(self.state, 'Showtime cannot be changed now')

        try:
            self._require_offered(theatre)
            showing = Showing(theatre=theatre, time=showtime)
            seat_map = await self._abandonable(
                lambda: self.load_seat_map_use_case.execute(
                    session=self.session, movie_id=self.movie_id, showing=showing
                )
            )
        except _Abandoned:
            return FlowResult.notice(self.state, ABANDONED_MESSAGE)
        except Exception as e:
            return self._fail_without_transition(e)

        self._discard_seat_step()
        self.showing = showing
        self.seat_map = seat_map
        self.selection = SeatSelection(seat_map, max_seats=self.max_seats)
        self.state = FlowState.SELECTING_SEATS
        Logger.base.info(
            f'🎟️ [FLOW] {theatre.name} {showing.date.isoformat()} {showtime} selected'
        )
        return FlowResult.success(self.state)

    def back(self) -> FlowResult:
        if self.state not in SEAT_STEP_STATES:
            return FlowResult.notice(self.state, 'Nothing to go back to')

        self._discard_seat_step()
        self.state = FlowState.SELECTING_THEATRE
        return FlowResult.success(self.state)

    # ------------------------------------------------------------------
    # Step 2: seats
    # ------------------------------------------------------------------

    def toggle_seat(self, seat_number: str) -> FlowResult:
        if self.state not in SEAT_STEP_STATES or self.selection is None:
            return FlowResult.notice(self.state, 'Choose a theatre and showtime first')

        outcome = self.selection.toggle(seat_number)
        if outcome == ToggleOutcome.LIMIT_REACHED:
            return FlowResult.notice(self.state, self.selection.limit_notice)
        return FlowResult.success(self.state)

    # ------------------------------------------------------------------
    # Step 3: submit
    # ------------------------------------------------------------------

    async def submit(self) -> FlowResult:
        if self.state == FlowState.SUBMITTING:
            return FlowResult.notice(self.state, 'Your booking is already being processed')
        if self.state not in SEAT_STEP_STATES:
            return FlowResult.notice(self.state, 'Choose a theatre and showtime first')

        try:
            draft = self._build_draft()
        except ValidationError as e:
            return FlowResult.failure(self.state, e)

        state_before = self.state
        self.state = FlowState.SUBMITTING
        try:
            booking = await self._abandonable(
                lambda: self.checkout_booking_use_case.execute(
                    session=self.session, draft=draft, pending_booking=self.pending_booking
                )
            )
        except _Abandoned:
            self.state = state_before
            return FlowResult.notice(self.state, ABANDONED_MESSAGE)
        except PaymentIncompleteError as e:
            self.pending_booking = e.booking
            return self._fail_submission(e, booking=e.booking)
        except SeatConflictError as e:
            return await self._handle_seat_conflict(e, state_before=state_before)
        except Exception as e:
            return self._fail_submission(e, booking=self.pending_booking)

        self.confirmed_booking = booking
        self.pending_booking = None
        self._draft = None
        self.state = FlowState.CONFIRMED
        return FlowResult.success(
            self.state,
            message=f'Booking confirmed: {booking.booking_reference}',
            booking=booking,
        )

    def abandon(self) -> None:
        """
        Stop waiting on in-flight requests. Late results are dropped; any
        server-side effect of a request already sent still happens.
        """
        self._abandoned = True
        for scope in self._cancel_scopes:
            scope.cancel()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _abandonable(self, operation: Callable[[], Awaitable[_T]]) -> _T:
        if self._abandoned:
            raise _Abandoned()
        with anyio.CancelScope() as scope:
            self._cancel_scopes.add(scope)
            try:
                result = await operation()
            finally:
                self._cancel_scopes.discard(scope)
        if scope.cancelled_caught or self._abandoned:
            raise _Abandoned()
        return result

    def _require_offered(self, theatre: Theatre) -> None:
        if self.movie is None:
            raise ValidationError('Movie details are not loaded yet')
        if theatre not in self.movie.theatres:
            raise ValidationError(f'{theatre.name} is not showing {self.movie.title}')

    def _build_draft(self) -> BookingDraft:
        if self.showing is None or self.selection is None or self.seat_map is None:
            raise ValidationError('Please select a theatre and showtime')

        # Same seats as the last attempt: keep the draft and its idempotency key
        if self._draft is not None and set(self._draft.seat_numbers) == set(
            self.selection.seat_numbers
        ):
            return self._draft

        if self.pending_booking is not None:
            raise ValidationError(
                f'Booking {self.pending_booking.booking_reference} is awaiting payment. '
                'Retry without changing seats.'
            )

        self._draft = BookingDraft.create(
            movie_id=self.movie_id,
            showing=self.showing,
            selection=self.selection,
            seat_map=self.seat_map,
            payment_method=self.payment_method,
        )
        return self._draft

    async def _handle_seat_conflict(
        self, error: SeatConflictError, *, state_before: FlowState
    ) -> FlowResult:
        showing, seat_map = self.showing, self.seat_map
        assert showing is not None and seat_map is not None
        assert self.selection is not None

        try:
            refreshed = await self._abandonable(
                lambda: self.load_seat_map_use_case.execute(
                    session=self.session, movie_id=self.movie_id, showing=showing
                )
            )
        except _Abandoned:
            self.state = state_before
            return FlowResult.notice(self.state, ABANDONED_MESSAGE)
        except Exception as refresh_error:
            # Keep the current map; the reported seats are still marked booked below
            self._log_unexpected(refresh_error)
            Logger.base.warning(
                f'⚠️ [FLOW] Seat map refresh failed: {type(refresh_error).__name__}: '
                f'{refresh_error}'
            )
            refreshed = seat_map
        refreshed = refreshed.with_booked(error.seat_numbers)

        self.seat_map = refreshed
        dropped = self.selection.rebind(refreshed)
        self._draft = None

        if dropped:
            error = SeatConflictError(
                f'{error.message}. Seats no longer available: {", ".join(dropped)}',
                dropped,
            )
        return self._fail_submission(error, booking=None)

    def _fail_submission(self, error: Exception, *, booking: Booking | None) -> FlowResult:
        self.state = FlowState.FAILED
        self._log_unexpected(error)
        Logger.base.warning(f'❌ [FLOW] Booking failed: {type(error).__name__}: {error}')
        return FlowResult.failure(self.state, error, booking=booking)

    def _fail_without_transition(self, error: Exception) -> FlowResult:
        self._log_unexpected(error)
        return FlowResult.failure(self.state, error)

    def _log_unexpected(self, error: Exception) -> None:
        if not isinstance(error, CustomBaseError):
            Logger.base.opt(exception=error).error(
                f'💥 [FLOW] Unexpected error: {type(error).__name__}: {error}'
            )

    def _discard_seat_step(self) -> None:
        if self.pending_booking is not None:
            Logger.base.warning(
                f'⚠️ [FLOW] Leaving booking {self.pending_booking.booking_reference} '
                'with payment pending'
            )
        self.showing = None
        self.seat_map = None
        self.selection = None
        self.pending_booking = None
        self._draft = None
