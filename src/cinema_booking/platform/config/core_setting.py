from enum import StrEnum
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[4]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class OccupancySource(StrEnum):
    BOOKING_SERVICE = 'booking_service'
    DEMO = 'demo'


class CheckoutMode(StrEnum):
    ATOMIC = 'atomic'
    TWO_STEP = 'two_step'


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Booking'
    VERSION: str = '0.1.0'
    DEBUG: bool = False

    # REST backend
    API_URL: str = 'http://localhost:5000'
    REQUEST_TIMEOUT_SECONDS: float = 15.0

    # Seat map layout
    SEAT_ROWS: str = 'ABCDEFGHIJ'
    SEATS_PER_ROW: int = 10
    VIP_ROW_COUNT: int = 3
    PREMIUM_ROW_COUNT: int = 3
    VIP_MULTIPLIER: float = 1.5
    PREMIUM_MULTIPLIER: float = 1.25

    # Booking rules
    MAX_SEATS_PER_BOOKING: int = 10
    DEFAULT_PAYMENT_METHOD: str = 'Card'
    CHECKOUT_MODE: CheckoutMode = CheckoutMode.ATOMIC

    # Occupancy
    OCCUPANCY_SOURCE: OccupancySource = OccupancySource.BOOKING_SERVICE
    DEMO_OCCUPANCY_RATE: float = 0.3  # Probability that a demo seat is already booked

    # Presentation
    CURRENCY_SYMBOL: str = 'Rs'

    @field_validator('API_URL', mode='before')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip('/') if isinstance(v, str) else v

    @field_validator('DEMO_OCCUPANCY_RATE')
    @classmethod
    def check_rate(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError('DEMO_OCCUPANCY_RATE must be between 0 and 1')
        return v

    @field_validator('REQUEST_TIMEOUT_SECONDS', 'MAX_SEATS_PER_BOOKING', 'SEATS_PER_ROW')
    @classmethod
    def check_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError('must be positive')
        return v


settings = Settings()  # type: ignore
