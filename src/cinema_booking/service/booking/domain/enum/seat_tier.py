from enum import StrEnum


class SeatTier(StrEnum):
    REGULAR = 'Regular'
    PREMIUM = 'Premium'
    VIP = 'VIP'
