"""Application layer DTOs"""

from cinema_booking.service.booking.app.dto.flow_result import ErrorKind, FlowResult

__all__ = ['ErrorKind', 'FlowResult']
