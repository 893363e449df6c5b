from dependency_injector import providers
import pytest

from cinema_booking.platform.config.core_setting import CheckoutMode, OccupancySource, Settings
from cinema_booking.platform.config.di import Container, close_container
from cinema_booking.service.booking.domain.value_object.session import Session
from cinema_booking.service.booking.driven_adapter.occupancy.booking_service_occupancy_handler_impl import (  # noqa: E501
    BookingServiceOccupancyHandlerImpl,
)
from cinema_booking.service.booking.driven_adapter.occupancy.demo_occupancy_handler_impl import (
    DemoOccupancyHandlerImpl,
)


def _container(**overrides: object) -> Container:
    container = Container()
    container.config_service.override(providers.Object(Settings(_env_file=None, **overrides)))
    return container


@pytest.mark.unit
class TestContainer:
    def test_occupancy_source_selects_handler(self) -> None:
        assert isinstance(_container().occupancy_handler(), BookingServiceOccupancyHandlerImpl)

        demo = _container(OCCUPANCY_SOURCE=OccupancySource.DEMO, DEMO_OCCUPANCY_RATE=0.5)
        handler = demo.occupancy_handler()
        assert isinstance(handler, DemoOccupancyHandlerImpl)
        assert handler.occupancy_rate == 0.5

    def test_orchestrator_wiring(self, session: Session) -> None:
        container = _container(MAX_SEATS_PER_BOOKING=4, CHECKOUT_MODE=CheckoutMode.TWO_STEP)

        orchestrator = container.booking_flow_orchestrator(session=session, movie_id='m1')

        assert orchestrator.max_seats == 4
        assert orchestrator.checkout_booking_use_case.checkout_mode == CheckoutMode.TWO_STEP
        assert orchestrator.session is session

    def test_layout_from_settings(self) -> None:
        container = _container(SEAT_ROWS='ABCDE', SEATS_PER_ROW=8, VIP_ROW_COUNT=1)

        seat_map = container.seat_map_generator().generate(base_price=100)

        assert len(seat_map) == 40
        assert seat_map.get('A1').price == 150
        assert seat_map.get('B1').price == 125

    def test_shared_transport(self) -> None:
        container = _container(API_URL='http://booking.test/')

        assert container.api_client() is container.api_client()
        assert container.config_service().API_URL == 'http://booking.test'
        assert container.http_client().base_url.host == 'booking.test'

    @pytest.mark.asyncio
    async def test_close_container(self) -> None:
        container = _container()
        http_client = container.http_client()

        await close_container(container)

        assert http_client.is_closed
