from pydantic import ValidationError as PydanticValidationError

from cinema_booking.platform.constant.route_constant import MOVIE_GET
from cinema_booking.platform.exception.exceptions import NotFoundError, ServiceRejectionError
from cinema_booking.platform.http.api_client import ApiClient
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_movie_catalog_client import IMovieCatalogClient
from cinema_booking.service.booking.domain.value_object.theatre import Movie
from cinema_booking.service.booking.driven_adapter.schema.movie_schema import MovieSchema


class MovieCatalogClientImpl(IMovieCatalogClient):
    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    @Logger.io
    async def get_movie(self, *, movie_id: str) -> Movie:
        data = await self.api_client.request(
            'GET',
            MOVIE_GET.format(movie_id=movie_id),
            fallback_message='Movie not found',
        )
        if not data:
            raise NotFoundError('Movie not found')
        try:
            return MovieSchema.model_validate(data).to_domain()
        except PydanticValidationError as e:
            raise ServiceRejectionError(
                f'Unexpected movie data: {e.error_count()} error(s)', 502
            ) from e
