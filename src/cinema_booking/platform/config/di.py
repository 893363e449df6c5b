"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from cinema_booking.platform.config.core_setting import OccupancySource, Settings
from cinema_booking.platform.http.api_client import ApiClient, build_http_client
from cinema_booking.service.booking.app.booking_flow_orchestrator import BookingFlowOrchestrator
from cinema_booking.service.booking.app.command.cancel_booking_use_case import (
    CancelBookingUseCase,
)
from cinema_booking.service.booking.app.command.checkout_booking_use_case import (
    CheckoutBookingUseCase,
)
from cinema_booking.service.booking.app.interface.i_seat_occupancy_query_handler import (
    ISeatOccupancyQueryHandler,
)
from cinema_booking.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from cinema_booking.service.booking.app.query.get_movie_showings_use_case import (
    GetMovieShowingsUseCase,
)
from cinema_booking.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from cinema_booking.service.booking.app.query.load_seat_map_use_case import LoadSeatMapUseCase
from cinema_booking.service.booking.domain.seat_map_domain import SeatLayout, SeatMapGenerator
from cinema_booking.service.booking.driven_adapter.http.booking_service_client_impl import (
    BookingServiceClientImpl,
)
from cinema_booking.service.booking.driven_adapter.http.movie_catalog_client_impl import (
    MovieCatalogClientImpl,
)
from cinema_booking.service.booking.driven_adapter.occupancy.booking_service_occupancy_handler_impl import (  # noqa: E501
    BookingServiceOccupancyHandlerImpl,
)
from cinema_booking.service.booking.driven_adapter.occupancy.demo_occupancy_handler_impl import (
    DemoOccupancyHandlerImpl,
)


def build_occupancy_handler(
    *, settings: Settings, api_client: ApiClient, layout: SeatLayout
) -> ISeatOccupancyQueryHandler:
    if settings.OCCUPANCY_SOURCE == OccupancySource.DEMO:
        return DemoOccupancyHandlerImpl(layout=layout, occupancy_rate=settings.DEMO_OCCUPANCY_RATE)
    return BookingServiceOccupancyHandlerImpl(api_client=api_client)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Transport (one pooled client per process)
    http_client = providers.Singleton(
        build_http_client,
        base_url=config_service.provided.API_URL,
        timeout_seconds=config_service.provided.REQUEST_TIMEOUT_SECONDS,
    )
    api_client = providers.Singleton(
        ApiClient,
        http_client=http_client,
        timeout_seconds=config_service.provided.REQUEST_TIMEOUT_SECONDS,
    )

    # Seat map
    seat_layout = providers.Singleton(
        SeatLayout,
        rows=config_service.provided.SEAT_ROWS,
        seats_per_row=config_service.provided.SEATS_PER_ROW,
        vip_row_count=config_service.provided.VIP_ROW_COUNT,
        premium_row_count=config_service.provided.PREMIUM_ROW_COUNT,
        vip_multiplier=config_service.provided.VIP_MULTIPLIER,
        premium_multiplier=config_service.provided.PREMIUM_MULTIPLIER,
    )
    seat_map_generator = providers.Singleton(SeatMapGenerator, layout=seat_layout)

    # External services
    movie_catalog_client = providers.Singleton(MovieCatalogClientImpl, api_client=api_client)
    booking_service_client = providers.Singleton(BookingServiceClientImpl, api_client=api_client)
    occupancy_handler = providers.Singleton(
        build_occupancy_handler,
        settings=config_service,
        api_client=api_client,
        layout=seat_layout,
    )

    # Use cases
    get_movie_showings_use_case = providers.Factory(
        GetMovieShowingsUseCase, movie_catalog_client=movie_catalog_client
    )
    load_seat_map_use_case = providers.Factory(
        LoadSeatMapUseCase,
        occupancy_handler=occupancy_handler,
        seat_map_generator=seat_map_generator,
    )
    checkout_booking_use_case = providers.Factory(
        CheckoutBookingUseCase,
        booking_service_client=booking_service_client,
        checkout_mode=config_service.provided.CHECKOUT_MODE,
    )
    cancel_booking_use_case = providers.Factory(
        CancelBookingUseCase, booking_service_client=booking_service_client
    )
    get_booking_use_case = providers.Factory(
        GetBookingUseCase, booking_service_client=booking_service_client
    )
    list_bookings_use_case = providers.Factory(
        ListBookingsUseCase, booking_service_client=booking_service_client
    )

    # One orchestrator per booking session: call with session=..., movie_id=...
    booking_flow_orchestrator = providers.Factory(
        BookingFlowOrchestrator,
        get_movie_showings_use_case=get_movie_showings_use_case,
        load_seat_map_use_case=load_seat_map_use_case,
        checkout_booking_use_case=checkout_booking_use_case,
        max_seats=config_service.provided.MAX_SEATS_PER_BOOKING,
        payment_method=config_service.provided.DEFAULT_PAYMENT_METHOD,
    )


async def close_container(container: Container) -> None:
    """Release pooled HTTP connections"""
    await container.http_client().aclose()
