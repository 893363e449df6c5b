from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cinema_booking.service.booking.domain.entity.booking_draft import BookingDraft
from cinema_booking.service.booking.domain.entity.booking_entity import Booking, MovieSummary
from cinema_booking.service.booking.domain.enum.booking_status import BookingStatus, PaymentStatus
from cinema_booking.service.booking.domain.enum.seat_tier import SeatTier
from cinema_booking.service.booking.domain.value_object.calendar_date import parse_calendar_date
from cinema_booking.service.booking.domain.value_object.seat import BookingSeat


class _WireModel(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)


class BookingSeatSchema(_WireModel):
    seat_number: str = Field(alias='seatNumber')
    type: SeatTier = SeatTier.REGULAR
    price: int

    def to_domain(self) -> BookingSeat:
        return BookingSeat(seat_number=self.seat_number, tier=self.type, price=self.price)


class TheatreRefSchema(_WireModel):
    name: str
    location: str = ''


class ShowtimeSchema(_WireModel):
    date: date
    time: str

    @field_validator('date', mode='before')
    @classmethod
    def parse_date(cls, v: str | date) -> date:
        return parse_calendar_date(v)


class MovieRefSchema(_WireModel):
    id: str = Field(alias='_id')
    title: str = ''
    poster: str = ''
    duration: str = ''
    rating: str = ''
    language: str = ''


class CreateBookingRequest(_WireModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'movieId': '65a1f0c2e4b0a1b2c3d4e5f6',
                'theatre': {'name': 'PVR Phoenix', 'location': 'Lower Parel'},
                'showtime': {'date': '2025-01-10', 'time': '6:30 PM'},
                'seats': [
                    {'seatNumber': 'A1', 'type': 'VIP', 'price': 750},
                    {'seatNumber': 'D1', 'type': 'Premium', 'price': 625},
                ],
                'totalAmount': 1375,
                'paymentMethod': 'Card',
            }
        },
    )

    movie_id: str = Field(alias='movieId')
    theatre: TheatreRefSchema
    showtime: ShowtimeSchema
    seats: List[BookingSeatSchema]
    total_amount: int = Field(alias='totalAmount')
    payment_method: str = Field(alias='paymentMethod')
    payment_status: Optional[PaymentStatus] = Field(default=None, alias='paymentStatus')

    @classmethod
    def from_draft(
        cls, draft: BookingDraft, *, payment_status: PaymentStatus | None = None
    ) -> 'CreateBookingRequest':
        return cls(
            movie_id=draft.movie_id,
            theatre=TheatreRefSchema(name=draft.theatre_name, location=draft.theatre_location),
            showtime=ShowtimeSchema(date=draft.show_date, time=draft.show_time),
            seats=[
                BookingSeatSchema(seat_number=seat.seat_number, type=seat.tier, price=seat.price)
                for seat in draft.seats
            ],
            total_amount=draft.total_amount,
            payment_method=draft.payment_method,
            payment_status=payment_status,
        )

    def to_payload(self) -> dict:
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


class PaymentUpdateRequest(_WireModel):
    payment_status: PaymentStatus = Field(alias='paymentStatus')

    def to_payload(self) -> dict:
        return self.model_dump(mode='json', by_alias=True)


class BookingSchema(_WireModel):
    id: str = Field(alias='_id')
    booking_reference: str = Field(alias='bookingReference')
    movie: MovieRefSchema | str
    theatre: TheatreRefSchema
    showtime: ShowtimeSchema
    seats: List[BookingSeatSchema] = []
    total_amount: int = Field(alias='totalAmount')
    status: BookingStatus = BookingStatus.CONFIRMED
    payment_status: PaymentStatus = Field(default=PaymentStatus.PENDING, alias='paymentStatus')
    payment_method: str = Field(default='Card', alias='paymentMethod')
    booking_date: Optional[datetime] = Field(default=None, alias='bookingDate')

    def to_domain(self) -> Booking:
        # Unpopulated references come back as a bare movie id
        if isinstance(self.movie, str):
            movie = MovieSummary(id=self.movie)
        else:
            movie = MovieSummary(
                id=self.movie.id,
                title=self.movie.title,
                poster=self.movie.poster,
                duration=self.movie.duration,
                rating=self.movie.rating,
                language=self.movie.language,
            )
        return Booking(
            id=self.id,
            booking_reference=self.booking_reference,
            movie=movie,
            theatre_name=self.theatre.name,
            theatre_location=self.theatre.location,
            show_date=self.showtime.date,
            show_time=self.showtime.time,
            seats=[seat.to_domain() for seat in self.seats],
            total_amount=self.total_amount,
            status=self.status,
            payment_status=self.payment_status,
            payment_method=self.payment_method,
            booking_date=self.booking_date,
        )


class OccupiedSeatsSchema(_WireModel):
    seats: List[str] = []
