from typing import Callable

import pytest

from booking_fakes import InMemoryBookingService, InMemoryOccupancyHandler, StubMovieCatalogClient
from cinema_booking.platform.config.core_setting import CheckoutMode
from cinema_booking.service.booking.app.booking_flow_orchestrator import BookingFlowOrchestrator
from cinema_booking.service.booking.app.command.checkout_booking_use_case import (
    CheckoutBookingUseCase,
)
from cinema_booking.service.booking.app.query.get_movie_showings_use_case import (
    GetMovieShowingsUseCase,
)
from cinema_booking.service.booking.app.query.load_seat_map_use_case import LoadSeatMapUseCase
from cinema_booking.service.booking.domain.seat_map_domain import SeatMapGenerator
from cinema_booking.service.booking.domain.value_object.session import Session
from cinema_booking.service.booking.domain.value_object.theatre import Movie


@pytest.fixture
def booking_service() -> InMemoryBookingService:
    return InMemoryBookingService()


@pytest.fixture
def occupancy_handler(booking_service: InMemoryBookingService) -> InMemoryOccupancyHandler:
    return InMemoryOccupancyHandler(booking_service)


@pytest.fixture
def movie_catalog_client(movie: Movie) -> StubMovieCatalogClient:
    return StubMovieCatalogClient(movie)


@pytest.fixture
def load_seat_map_use_case(
    occupancy_handler: InMemoryOccupancyHandler, seat_map_generator: SeatMapGenerator
) -> LoadSeatMapUseCase:
    return LoadSeatMapUseCase(
        occupancy_handler=occupancy_handler, seat_map_generator=seat_map_generator
    )


@pytest.fixture
def make_orchestrator(
    session: Session,
    movie: Movie,
    booking_service: InMemoryBookingService,
    movie_catalog_client: StubMovieCatalogClient,
    load_seat_map_use_case: LoadSeatMapUseCase,
) -> Callable[..., BookingFlowOrchestrator]:
    """Factory so each test can pick its checkout mode and session"""

    def _make(
        *,
        checkout_mode: CheckoutMode = CheckoutMode.ATOMIC,
        flow_session: Session | None = None,
        max_seats: int = 10,
    ) -> BookingFlowOrchestrator:
        return BookingFlowOrchestrator(
            session=flow_session or session,
            movie_id=movie.id,
            get_movie_showings_use_case=GetMovieShowingsUseCase(
                movie_catalog_client=movie_catalog_client
            ),
            load_seat_map_use_case=load_seat_map_use_case,
            checkout_booking_use_case=CheckoutBookingUseCase(
                booking_service_client=booking_service, checkout_mode=checkout_mode
            ),
            max_seats=max_seats,
        )

    return _make
