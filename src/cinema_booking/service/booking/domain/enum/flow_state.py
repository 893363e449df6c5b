from enum import StrEnum


class FlowState(StrEnum):
    """Steps of the movie booking flow"""

    SELECTING_THEATRE = 'selecting_theatre'
    SELECTING_SEATS = 'selecting_seats'
    SUBMITTING = 'submitting'
    CONFIRMED = 'confirmed'
    FAILED = 'failed'
