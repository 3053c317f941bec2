#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from humannum.config import NumberConf, use_locale


# Fixtures -------------------------------------------------------------------------------------------------------------

class FakeFormatter:
    """
    NumberFormatter test double without locale data.

    Decimals are rendered with plain f-string rounding; every call is recorded
    as (mode, value, locale, precision, max_precision).
    """

    def __init__(self):
        self.calls = []

    def format_decimal(self, value, locale, precision=None, max_precision=None):
        self.calls.append(("decimal", value, locale, precision, max_precision))
        digits = max_precision if max_precision is not None else (precision or 0)
        return f"{value:.{digits}f}"

    def format_spellout(self, value, locale):
        self.calls.append(("spellout", value, locale, None, None))
        return f"spell:{value}"

    def format_ordinal(self, value, locale):
        self.calls.append(("ordinal", value, locale, None, None))
        return f"ordinal:{value}"

    def format_percent(self, value, locale, precision=None, max_precision=None):
        self.calls.append(("percent", value, locale, precision, max_precision))
        digits = max_precision if max_precision is not None else (precision or 0)
        return f"{value * 100:.{digits}f}%"

    def format_currency(self, value, currency, locale):
        self.calls.append(("currency", value, locale, currency, None))
        return f"{currency} {value:.2f}"


@pytest.fixture
def fake_formatter() -> FakeFormatter:
    """Fresh recording formatter double."""
    return FakeFormatter()


@pytest.fixture(autouse=True)
def default_locale():
    """Restore the process-wide default locale after each test."""
    use_locale(NumberConf.DEFAULT_LOCALE)
    yield NumberConf.DEFAULT_LOCALE
    use_locale(NumberConf.DEFAULT_LOCALE)
