import pytest

from cinema_booking.platform.exception.exceptions import NetworkError
from cinema_booking.platform.logging.loguru_io import Logger, LoguruIO
from cinema_booking.platform.logging.loguru_io_config import MASK, custom_logger
from cinema_booking.platform.logging.loguru_io_utils import (
    MAX_CONTENT_LENGTH,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestMasking:
    @pytest.mark.parametrize('keyword', ['token', 'Authorization', 'PASSWORD'])
    def test_sensitive_keywords_are_masked(self, keyword: str) -> None:
        assert should_mask_keyword(keyword, 'secret') == MASK

    def test_other_keywords_pass_through(self) -> None:
        assert should_mask_keyword('movie_id', 'm1') == 'm1'

    def test_nested_headers_are_masked(self) -> None:
        io = LoguruIO(custom_logger)

        masked = io.mask_sensitive(
            {'headers': {'Authorization': 'Bearer abc', 'Idempotency-Key': 'k1'}, 'seats': ['A1']}
        )

        assert masked == {
            'headers': {'Authorization': MASK, 'Idempotency-Key': 'k1'},
            'seats': ['A1'],
        }

    def test_long_content_is_truncated(self) -> None:
        content = 'x' * (MAX_CONTENT_LENGTH + 20)

        assert truncate_content(content).endswith('...(+20 chars)')
        assert truncate_content('short') == 'short'


@pytest.mark.unit
class TestLoggerIO:
    def test_sync_return_value(self) -> None:
        @Logger.io
        def add(a: int, b: int) -> int:
            return a + b

        assert add(1, 2) == 3

    @pytest.mark.asyncio
    async def test_async_reraises_domain_errors(self) -> None:
        @Logger.io
        async def fetch() -> None:
            raise NetworkError('Network error')

        with pytest.raises(NetworkError, match='Network error'):
            await fetch()

    def test_reraise_disabled_returns_none(self) -> None:
        @Logger.io(reraise=False)
        def explode() -> int:
            raise RuntimeError('boom')

        assert explode() is None
