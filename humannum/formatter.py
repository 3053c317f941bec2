"""
Locale-aware formatting backends.

The summarization engine and the number facade never format digits
themselves: they call a NumberFormatter. BabelFormatter is the default
implementation, backed by Babel's CLDR number patterns for decimal, percent
and currency output, and by num2words for spelled-out and ordinal forms.

Any object implementing the NumberFormatter protocol can be injected instead,
e.g. a test double returning fixed strings.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import decimal
import logging
from copy import copy
from enum import StrEnum, unique
from typing import Protocol, runtime_checkable

# Third-party ----------------------------------------------------------------------------------------------------------
from babel import Locale, UnknownLocaleError
from babel.numbers import UnknownCurrencyError, format_currency, validate_currency
from num2words import num2words

# Local ----------------------------------------------------------------------------------------------------------------
from .validators import validate_currency_code, validate_locale

logger = logging.getLogger(__name__)

# Extra significant digits on top of integer + fraction digits: covers the
# percent scale (x100) and rounding carry
_PREC_MARGIN = 6

# Largest minor-unit count among ISO 4217 currencies
_CURRENCY_MAX_DIGITS = 4


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class FormatMode(StrEnum):
    """Formatting modes a NumberFormatter provides."""
    CURRENCY = "currency"
    DECIMAL = "decimal"
    ORDINAL = "ordinal"
    PERCENT = "percent"
    SPELLOUT = "spellout"


class FormatterUnavailable(ValueError):
    """
    The formatting backend cannot produce a result for a locale/mode/value combination.

    Raised for unknown or malformed locales, unknown currency codes, languages
    without spell-out support, and values a mode cannot represent. The backend
    error is chained as __cause__.

    Attributes:
        mode: The FormatMode that failed.
        locale: The locale identifier requested by the caller.
    """

    def __init__(self, message: str, *, mode: FormatMode | str | None = None, locale: str | None = None):
        super().__init__(message)
        self.mode = mode
        self.locale = locale


@runtime_checkable
class NumberFormatter(Protocol):
    """
    Narrow interface to a locale-aware number formatting service.

    Precision arguments follow one rule everywhere: max_precision caps the
    fraction digits and wins over precision; precision alone fixes them exactly;
    with neither, the locale default pattern applies.
    """

    def format_decimal(
            self,
            value: int | float,
            locale: str,
            precision: int | None = None,
            max_precision: int | None = None,
    ) -> str: ...

    def format_spellout(self, value: int | float, locale: str) -> str: ...

    def format_ordinal(self, value: int | float, locale: str) -> str: ...

    def format_percent(
            self,
            value: int | float,
            locale: str,
            precision: int | None = None,
            max_precision: int | None = None,
    ) -> str: ...

    def format_currency(self, value: int | float, currency: str, locale: str) -> str: ...


class BabelFormatter:
    """
    NumberFormatter backed by Babel (CLDR patterns) and num2words.

    Stateless; a single instance can be shared between threads.

    Examples:
        >>> fmt = BabelFormatter()
        >>> fmt.format_decimal(1234.5678, "en", max_precision=2)
        '1,234.57'
        >>> fmt.format_decimal(1234.5, "de", precision=2)
        '1.234,50'
        >>> fmt.format_spellout(42, "en")
        'forty-two'
        >>> fmt.format_ordinal(22, "en")
        '22nd'
    """

    def format_decimal(self, value, locale, precision=None, max_precision=None) -> str:
        loc = self._parse_locale(locale, FormatMode.DECIMAL)
        pattern = _with_fraction_digits(loc.decimal_formats[None], precision, max_precision)
        return self._apply(pattern, value, loc, FormatMode.DECIMAL)

    def format_spellout(self, value, locale) -> str:
        loc = self._parse_locale(locale, FormatMode.SPELLOUT)
        return self._num2words(value, loc, "cardinal", FormatMode.SPELLOUT)

    def format_ordinal(self, value, locale) -> str:
        loc = self._parse_locale(locale, FormatMode.ORDINAL)
        return self._num2words(value, loc, "ordinal_num", FormatMode.ORDINAL)

    def format_percent(self, value, locale, precision=None, max_precision=None) -> str:
        loc = self._parse_locale(locale, FormatMode.PERCENT)
        pattern = _with_fraction_digits(loc.percent_formats[None], precision, max_precision)
        return self._apply(pattern, value, loc, FormatMode.PERCENT)

    def format_currency(self, value, currency, locale) -> str:
        loc = self._parse_locale(locale, FormatMode.CURRENCY)
        try:
            code = validate_currency_code(currency)
            validate_currency(code, loc)
            with _decimal_context(value, _CURRENCY_MAX_DIGITS):
                return format_currency(value, code, locale=loc)
        except (UnknownCurrencyError, ValueError, ArithmeticError) as e:
            raise _unavailable(
                f"cannot format {value!r} as currency {currency!r}: {_reason(e)}", FormatMode.CURRENCY, str(loc), e
            ) from e

    # Private methods ----------------------------------------------------------

    @staticmethod
    def _parse_locale(locale: str, mode: FormatMode) -> Locale:
        try:
            return Locale.parse(validate_locale(locale))
        except (UnknownLocaleError, ValueError, TypeError) as e:
            raise _unavailable(f"unsupported locale {locale!r}: {e}", mode, locale, e) from e

    @staticmethod
    def _apply(pattern, value, loc: Locale, mode: FormatMode) -> str:
        try:
            with _decimal_context(value, pattern.frac_prec[1]):
                return pattern.apply(value, loc)
        except (ValueError, ArithmeticError) as e:
            raise _unavailable(f"cannot format {value!r} in {mode} mode: {_reason(e)}", mode, str(loc), e) from e

    @staticmethod
    def _num2words(value, loc: Locale, to: str, mode: FormatMode) -> str:
        # num2words falls back from 'en_US' to 'en' on its own
        lang = str(loc)
        try:
            return num2words(value, lang=lang, to=to)
        except (NotImplementedError, TypeError, ValueError, OverflowError) as e:
            reason = str(e) or f"language '{lang}' not supported"
            raise _unavailable(f"cannot format {value!r} in {mode} mode: {reason}", mode, lang, e) from e


# Private Methods ------------------------------------------------------------------------------------------------------


def _with_fraction_digits(pattern, precision: int | None, max_precision: int | None):
    """Copy a Babel NumberPattern with its (min, max) fraction digits overridden."""
    if max_precision is None and precision is None:
        return pattern

    pattern = copy(pattern)
    if max_precision is not None:
        min_frac = min(pattern.frac_prec[0], max_precision)
        pattern.frac_prec = (min_frac, max_precision)
    else:
        pattern.frac_prec = (precision, precision)
    return pattern


def _decimal_context(value, fraction_digits: int):
    """
    Decimal context wide enough to quantize value to fraction_digits.

    Babel rounds through Decimal.quantize under the current context, whose
    default 28 significant digits reject values from about 1e28 upwards.
    """
    context = decimal.getcontext().copy()
    integer_digits = max(decimal.Decimal(value).adjusted() + 1, 1)
    context.prec = max(context.prec, integer_digits + fraction_digits + _PREC_MARGIN)
    return decimal.localcontext(context)


def _reason(error: BaseException) -> str:
    # Decimal signals stringify as a list of signal classes
    if isinstance(error, decimal.DecimalException):
        return type(error).__name__
    return str(error) or type(error).__name__


def _unavailable(message: str, mode: FormatMode, locale: str, cause: BaseException) -> FormatterUnavailable:
    logger.debug("%s formatter failed for locale %r: %r", mode, locale, cause)
    return FormatterUnavailable(message, mode=mode, locale=locale)
