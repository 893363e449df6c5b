"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any cinema_booking import (settings are read at import time)
- Shared domain fixtures: session, theatre, movie, seat layout
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEBUG', 'false')
    os.environ.setdefault('API_URL', 'http://booking.test')


_early_setup_test_environment()

from datetime import date  # noqa: E402

import pytest  # noqa: E402

from cinema_booking.service.booking.domain.seat_map_domain import (  # noqa: E402
    SeatLayout,
    SeatMapGenerator,
)
from cinema_booking.service.booking.domain.value_object.session import Session  # noqa: E402
from cinema_booking.service.booking.domain.value_object.theatre import (  # noqa: E402
    Movie,
    Theatre,
)
from test_constants import (  # noqa: E402
    BASE_PRICE,
    MOVIE_ID,
    SHOW_DATE,
    SHOWTIMES,
    TEST_TOKEN,
    TEST_USER_ID,
)


@pytest.fixture
def session() -> Session:
    return Session(token=TEST_TOKEN, user_id=TEST_USER_ID, user_name='Test Buyer')


@pytest.fixture
def anonymous_session() -> Session:
    return Session(token='')


@pytest.fixture
def theatre() -> Theatre:
    return Theatre(
        name='PVR Phoenix',
        location='Lower Parel',
        date=SHOW_DATE,
        showtimes=SHOWTIMES,
        base_price=BASE_PRICE,
    )


@pytest.fixture
def other_theatre() -> Theatre:
    return Theatre(
        name='INOX Nariman Point',
        location='Nariman Point',
        date=date(2099, 1, 11),
        showtimes=('11:00 AM', '9:15 PM'),
        base_price=300,
    )


@pytest.fixture
def movie(theatre: Theatre, other_theatre: Theatre) -> Movie:
    return Movie(
        id=MOVIE_ID,
        title='Interstellar',
        duration='2h 49m',
        rating='PG-13',
        language='English',
        theatres=(theatre, other_theatre),
    )


@pytest.fixture
def seat_layout() -> SeatLayout:
    return SeatLayout()


@pytest.fixture
def seat_map_generator(seat_layout: SeatLayout) -> SeatMapGenerator:
    return SeatMapGenerator(seat_layout)
