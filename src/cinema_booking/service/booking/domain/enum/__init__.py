"""Booking Domain Enums"""

from cinema_booking.service.booking.domain.enum.booking_status import BookingStatus, PaymentStatus
from cinema_booking.service.booking.domain.enum.flow_state import FlowState
from cinema_booking.service.booking.domain.enum.seat_tier import SeatTier

__all__ = ['BookingStatus', 'FlowState', 'PaymentStatus', 'SeatTier']
