from datetime import date


TEST_TOKEN = 'test-bearer-token'
TEST_USER_ID = 'user_123'
MOVIE_ID = '65a1f0c2e4b0a1b2c3d4e5f6'
BASE_PRICE = 500
SHOW_DATE = date(2099, 1, 10)
SHOWTIMES = ('10:00 AM', '6:30 PM')
