from cinema_booking.service.booking.app.interface.i_booking_service_client import (
    IBookingServiceClient,
)
from cinema_booking.service.booking.app.interface.i_movie_catalog_client import (
    IMovieCatalogClient,
)
from cinema_booking.service.booking.app.interface.i_seat_occupancy_query_handler import (
    ISeatOccupancyQueryHandler,
)

__all__ = ['IBookingServiceClient', 'IMovieCatalogClient', 'ISeatOccupancyQueryHandler']
