from datetime import date

import attrs

from cinema_booking.platform.exception.exceptions import ValidationError


def _positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValidationError(f'{attribute.name} must be positive')


@attrs.define(frozen=True)
class Theatre:
    """A location + date + showtimes bundle offered for a movie (Value Object)"""

    name: str
    location: str
    date: date
    showtimes: tuple[str, ...] = attrs.field(converter=tuple)
    base_price: int = attrs.field(validator=_positive)

    def has_showtime(self, showtime: str) -> bool:
        return showtime in self.showtimes


@attrs.define(frozen=True)
class Showing:
    """A chosen (theatre, showtime) pair"""

    theatre: Theatre
    time: str

    def __attrs_post_init__(self) -> None:
        if not self.theatre.has_showtime(self.time):
            raise ValidationError(
                f'Showtime {self.time} is not offered at {self.theatre.name}'
            )

    @property
    def date(self) -> date:
        return self.theatre.date


@attrs.define(frozen=True)
class Movie:
    id: str
    title: str
    duration: str = ''
    rating: str = ''
    language: str = ''
    poster: str = ''
    theatres: tuple[Theatre, ...] = attrs.field(factory=tuple, converter=tuple)
