import pytest

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import MAX_CONTENT_LENGTH
from src.platform.logging.loguru_io_utils import (
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)


pytestmark = pytest.mark.unit


@Logger.io
def _add(a: int, b: int) -> int:
    return a + b


@Logger.io
def _fail_domain() -> None:
    raise DomainError('seat map unavailable')


@Logger.io(reraise=False)
def _fail_quietly() -> None:
    raise RuntimeError('boom')


class TestLoggerIO:
    def test_returns_wrapped_value(self):
        assert _add(2, 3) == 5

    def test_keeps_function_name(self):
        assert _add.__name__ == '_add'

    def test_reraises_and_marks_logged(self):
        with pytest.raises(DomainError) as exc_info:
            _fail_domain()

        assert getattr(exc_info.value, '_has_logged', False) is True

    def test_reraise_disabled_returns_none(self):
        assert _fail_quietly() is None


class TestLoggingUtils:
    def test_mask_sensitive_in_text(self):
        assert mask_sensitive("password='hunter2', user='bob'") == (
            "password='********', user='bob'"
        )

    def test_mask_leaves_plain_values_untouched(self):
        value = {'row': 1}
        assert mask_sensitive(value) is value

    def test_should_mask_keyword(self):
        assert should_mask_keyword('card_number', '4111') == '********'
        assert should_mask_keyword('row', 3) == 3

    def test_truncate_content(self):
        short = 'x' * 10
        long = 'y' * (MAX_CONTENT_LENGTH + 20)

        assert truncate_content(short) is short
        assert truncate_content(long).endswith('...(+20 chars)')
