from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cinema_booking.service.booking.domain.value_object.calendar_date import parse_calendar_date
from cinema_booking.service.booking.domain.value_object.theatre import Movie, Theatre


class TheatreSchema(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: str
    location: str = ''
    date: date
    showtimes: List[str] = []
    price: int = Field(gt=0)

    @field_validator('date', mode='before')
    @classmethod
    def parse_date(cls, v: str | date) -> date:
        return parse_calendar_date(v)

    def to_domain(self) -> Theatre:
        return Theatre(
            name=self.name,
            location=self.location,
            date=self.date,
            showtimes=self.showtimes,
            base_price=self.price,
        )


class MovieSchema(BaseModel):
    model_config = ConfigDict(
        extra='ignore',
        json_schema_extra={
            'example': {
                '_id': '65a1f0c2e4b0a1b2c3d4e5f6',
                'title': 'Interstellar',
                'duration': '2h 49m',
                'rating': 'PG-13',
                'language': 'English',
                'theatres': [
                    {
                        'name': 'PVR Phoenix',
                        'location': 'Lower Parel',
                        'date': '2025-01-10T00:00:00.000Z',
                        'showtimes': ['10:00 AM', '6:30 PM'],
                        'price': 500,
                    }
                ],
            }
        },
    )

    id: str = Field(alias='_id')
    title: str
    poster: str = ''
    duration: str = ''
    rating: str = ''
    language: str = ''
    theatres: List[TheatreSchema] = []

    def to_domain(self) -> Movie:
        return Movie(
            id=self.id,
            title=self.title,
            poster=self.poster,
            duration=self.duration,
            rating=self.rating,
            language=self.language,
            theatres=[theatre.to_domain() for theatre in self.theatres],
        )
