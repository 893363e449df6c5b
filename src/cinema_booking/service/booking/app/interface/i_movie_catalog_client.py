from abc import ABC, abstractmethod

from cinema_booking.service.booking.domain.value_object.theatre import Movie


class IMovieCatalogClient(ABC):
    @abstractmethod
    async def get_movie(self, *, movie_id: str) -> Movie:
        """
        Fetch a movie with its theatres and showtimes

        Raises:
            NotFoundError: When the movie does not exist
        """
        pass
