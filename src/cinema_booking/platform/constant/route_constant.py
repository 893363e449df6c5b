# REST backend route constants

# Base API
API_BASE = '/api'

# Movie catalog routes
MOVIE_BASE = f'{API_BASE}/movies'
MOVIE_GET = f'{MOVIE_BASE}/{{movie_id}}'

# Booking routes
BOOKING_BASE = f'{API_BASE}/bookings'
BOOKING_CREATE = BOOKING_BASE
BOOKING_LIST = BOOKING_BASE
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_PAYMENT = f'{BOOKING_BASE}/{{booking_id}}/payment'
BOOKING_CANCEL = f'{BOOKING_BASE}/{{booking_id}}/cancel'
BOOKING_OCCUPIED_SEATS = f'{BOOKING_BASE}/occupied-seats'

# Headers
IDEMPOTENCY_KEY_HEADER = 'Idempotency-Key'
