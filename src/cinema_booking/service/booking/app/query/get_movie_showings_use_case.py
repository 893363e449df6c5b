from cinema_booking.platform.exception.exceptions import NotFoundError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_movie_catalog_client import IMovieCatalogClient
from cinema_booking.service.booking.domain.value_object.theatre import Movie


class GetMovieShowingsUseCase:
    def __init__(self, *, movie_catalog_client: IMovieCatalogClient) -> None:
        self.movie_catalog_client = movie_catalog_client

    @Logger.io
    async def execute(self, *, movie_id: str) -> Movie:
        if not movie_id:
            raise NotFoundError('Movie not found')
        movie = await self.movie_catalog_client.get_movie(movie_id=movie_id)
        Logger.base.info(f'🎬 [SHOWINGS] {movie.title}: {len(movie.theatres)} theatre(s)')
        return movie
