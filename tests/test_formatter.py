#
# humannum - Formatter Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import decimal
import logging

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from babel import Locale, UnknownLocaleError

# Local ----------------------------------------------------------------------------------------------------------------
from humannum.formatter import BabelFormatter, FormatMode, FormatterUnavailable, NumberFormatter


# Tests ----------------------------------------------------------------------------------------------------------------

@pytest.fixture
def babel_formatter():
    return BabelFormatter()


class TestNumberFormatterProtocol:

    def test_babel_formatter_implements_protocol(self, babel_formatter):
        assert isinstance(babel_formatter, NumberFormatter)

    def test_fake_formatter_implements_protocol(self, fake_formatter):
        assert isinstance(fake_formatter, NumberFormatter)

    def test_incomplete_object_rejected(self):
        class DecimalOnly:
            def format_decimal(self, value, locale, precision=None, max_precision=None):
                return str(value)

        assert not isinstance(DecimalOnly(), NumberFormatter)


class TestBabelFormatterDecimal:

    @pytest.mark.parametrize("value, locale, precision, max_precision, expected", [
        pytest.param(1234.5678, "en", None, None, "1,234.568", id="default-pattern"),
        pytest.param(1234.5, "en", 2, None, "1,234.50", id="exact"),
        pytest.param(1234.5678, "en", None, 2, "1,234.57", id="max"),
        pytest.param(1234.5678, "en", 3, 1, "1,234.6", id="max-wins"),
        pytest.param(1234.5, "de", 2, None, "1.234,50", id="de"),
        pytest.param(10 ** 20, "en", None, None, "100,000,000,000,000,000,000", id="huge"),
        pytest.param(10 ** 28, "en", None, None, f"{10 ** 28:,}", id="28-digit-context-edge"),
        pytest.param(1e30, "en", None, None, f"{10 ** 30:,}", id="float-above-28-digits"),
        pytest.param(10 ** 30, "en", 2, None, f"{10 ** 30:,}.00", id="int-above-28-digits-padded"),
        pytest.param(10 ** 40, "de", None, None, f"{10 ** 40:,}".replace(",", "."), id="de-above-28-digits"),
    ])
    def test_format_decimal(self, babel_formatter, value, locale, precision, max_precision, expected):
        assert babel_formatter.format_decimal(value, locale, precision, max_precision) == expected

    def test_decimal_context_restored(self, babel_formatter):
        prec = decimal.getcontext().prec
        babel_formatter.format_decimal(10 ** 40, "en", 2)
        assert decimal.getcontext().prec == prec

    def test_pattern_not_mutated(self, babel_formatter):
        """Locale pattern keeps its defaults after a precision override."""
        babel_formatter.format_decimal(1.5, "en", 4)
        assert babel_formatter.format_decimal(1.5, "en") == "1.5"


class TestBabelFormatterPercent:

    @pytest.mark.parametrize("value, precision, max_precision, expected", [
        pytest.param(0.75, None, None, "75%", id="default"),
        pytest.param(0.1234, 1, None, "12.3%", id="exact"),
        pytest.param(0.5, 2, None, "50.00%", id="exact-pads"),
        pytest.param(0.5, 2, 1, "50%", id="max-wins"),
    ])
    def test_format_percent(self, babel_formatter, value, precision, max_precision, expected):
        assert babel_formatter.format_percent(value, "en", precision, max_precision) == expected

    @pytest.mark.parametrize("value, precision, expected", [
        pytest.param(1e28, None, f"{10 ** 30:,}%", id="float-scaled-above-28-digits"),
        pytest.param(10 ** 30, 1, f"{10 ** 32:,}.0%", id="int-above-28-digits"),
    ])
    def test_format_percent_large(self, babel_formatter, value, precision, expected):
        assert babel_formatter.format_percent(value, "en", precision) == expected


class TestBabelFormatterCurrency:

    @pytest.mark.parametrize("value, code, expected", [
        pytest.param(1e30, "USD", f"${10 ** 30:,}.00", id="float-above-28-digits"),
        pytest.param(10 ** 30, "JPY", f"¥{10 ** 30:,}", id="no-minor-units"),
        pytest.param(10 ** 28, "EUR", f"€{10 ** 28:,}.00", id="28-digit-context-edge"),
    ])
    def test_format_currency_large(self, babel_formatter, value, code, expected):
        assert babel_formatter.format_currency(value, code, "en") == expected


class TestBabelFormatterWords:

    def test_spellout(self, babel_formatter):
        assert babel_formatter.format_spellout(21, "en") == "twenty-one"

    def test_ordinal(self, babel_formatter):
        assert babel_formatter.format_ordinal(3, "en_US") == "3rd"

    def test_unsupported_language(self, babel_formatter):
        """Babel knows Zulu, num2words does not."""
        with pytest.raises(FormatterUnavailable) as exc_info:
            babel_formatter.format_spellout(3, "zu")
        assert exc_info.value.mode == FormatMode.SPELLOUT
        assert isinstance(exc_info.value.__cause__, NotImplementedError)


class TestBabelFormatterErrors:

    def test_unknown_locale(self, babel_formatter):
        with pytest.raises(FormatterUnavailable) as exc_info:
            babel_formatter.format_decimal(1, "zz")
        err = exc_info.value
        assert err.mode == FormatMode.DECIMAL
        assert err.locale == "zz"
        assert isinstance(err.__cause__, UnknownLocaleError)

    def test_unknown_currency(self, babel_formatter):
        with pytest.raises(FormatterUnavailable, match="ZZZ") as exc_info:
            babel_formatter.format_currency(1, "ZZZ", "en")
        assert exc_info.value.mode == FormatMode.CURRENCY

    def test_decimal_signal_named_in_message(self):
        class FailingPattern:
            frac_prec = (0, 3)

            def apply(self, value, loc):
                raise decimal.InvalidOperation([decimal.InvalidOperation])

        with pytest.raises(FormatterUnavailable, match="InvalidOperation") as exc_info:
            BabelFormatter._apply(FailingPattern(), 1.5, Locale.parse("en"), FormatMode.DECIMAL)
        assert "<class" not in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, decimal.InvalidOperation)

    def test_is_value_error(self, babel_formatter):
        with pytest.raises(ValueError):
            babel_formatter.format_decimal(1, "zz")

    def test_failure_logged(self, babel_formatter, caplog):
        with caplog.at_level(logging.DEBUG, logger="humannum.formatter"):
            with pytest.raises(FormatterUnavailable):
                babel_formatter.format_percent(1, "zz")
        assert "percent formatter failed" in caplog.text
