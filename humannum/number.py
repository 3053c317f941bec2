"""
Human-oriented number formatting.

Decimal, spelled-out, ordinal, percentage, currency, file size and
abbreviated ("for humans") representations of numbers, honouring a locale.

Module-level functions use the process-wide default locale (see use_locale)
unless a locale is passed explicitly:

    >>> format(1234.567, 2)
    '1,234.57'
    >>> abbreviate(1_234_567.89, 1)
    '1.2M'
    >>> for_humans(1_000_000)
    '1 million'
    >>> file_size(1024)
    '1 KB'

For explicit, injectable configuration hold a NumberFormat instance:

    >>> german = NumberFormat(locale="de")
    >>> german.format(1234.5, 1)
    '1.234,5'
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field

# Local ----------------------------------------------------------------------------------------------------------------
from .config import NumberConf, get_locale, use_locale, using_locale
from .formatter import BabelFormatter, FormatterUnavailable, NumberFormatter
from .numeric import std_numeric
from .sentinels import UNSET, UnsetType, ifnotunset
from .summarize import summarize
from .units import UnitsConf
from .utils import type_name
from .validators import validate_locale, validate_precision

__all__ = [
    'NumberFormat',
    'FormatterUnavailable',
    'abbreviate',
    'currency',
    'file_size',
    'for_humans',
    'format',
    'get_locale',
    'ordinal',
    'percentage',
    'spell',
    'use_locale',
    'using_locale',
]


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberFormat:
    """
    Number formatting bound to a locale and a formatting backend.

    Attributes:
        locale: Locale identifier, e.g. 'en_US'. None reads the process-wide
            default (use_locale) at the start of each call.
        formatter: Backend doing the locale-aware digit formatting.

    Every method also accepts a per-call locale that overrides both.
    """
    locale: str | None = None
    formatter: NumberFormatter = field(default_factory=BabelFormatter)

    def __post_init__(self):
        if self.locale is not None:
            object.__setattr__(self, 'locale', validate_locale(self.locale))
        if not isinstance(self.formatter, NumberFormatter):
            raise TypeError(f"formatter must implement NumberFormatter, got {type_name(self.formatter)}")

    def merge(self,
              locale: str | None | UnsetType = UNSET,
              formatter: NumberFormatter | UnsetType = UNSET,
              ) -> "NumberFormat":
        """
        Create a new NumberFormat with the given options overridden.

        Options not provided (UNSET) are inherited from this instance;
        locale=None explicitly switches to the process-wide default.
        """
        return NumberFormat(locale=ifnotunset(locale, default=self.locale),
                            formatter=ifnotunset(formatter, default=self.formatter))

    def format(self,
               number,
               precision: int | None = None,
               max_precision: int | None = None,
               locale: str | None = None) -> str:
        """
        Format a number as locale decimal text.

        Args:
            number: Number to format.
            precision: Exact count of fraction digits.
            max_precision: Maximum count of fraction digits; wins over precision.
            locale: Per-call locale override.

        Raises:
            FormatterUnavailable: If the value cannot be formatted for the locale.

        Examples:
            >>> NumberFormat().format(1234.5678)
            '1,234.568'
            >>> NumberFormat().format(1234.5, precision=2)
            '1,234.50'
            >>> NumberFormat().format(1234.4, precision=2, max_precision=0)
            '1,234'
        """
        return self.formatter.format_decimal(
            std_numeric(number),
            self._locale(locale),
            validate_precision(precision),
            validate_precision(max_precision, name="max_precision"),
        )

    def spell(self, number, locale: str | None = None) -> str:
        """Spell out a number in words, e.g. 42 → 'forty-two'."""
        return self.formatter.format_spellout(std_numeric(number), self._locale(locale))

    def ordinal(self, number, locale: str | None = None) -> str:
        """Convert a number to ordinal form, e.g. 22 → '22nd'."""
        return self.formatter.format_ordinal(std_numeric(number), self._locale(locale))

    def percentage(self,
                   number,
                   precision: int = 0,
                   max_precision: int | None = None,
                   locale: str | None = None) -> str:
        """
        Format a number given in percent units: 75 → '75%'.

        The number is divided by 100 before percent formatting, so callers pass
        75 rather than 0.75.
        """
        return self.formatter.format_percent(
            std_numeric(number) / 100,
            self._locale(locale),
            validate_precision(precision),
            validate_precision(max_precision, name="max_precision"),
        )

    def currency(self,
                 number,
                 currency: str = NumberConf.DEFAULT_CURRENCY,
                 locale: str | None = None) -> str:
        """Format a number as an amount of an ISO 4217 currency, e.g. '$5.00'."""
        return self.formatter.format_currency(std_numeric(number), currency, self._locale(locale))

    def file_size(self,
                  bytes,
                  precision: int = 0,
                  max_precision: int | None = None,
                  *,
                  locale: str | None = None) -> str:
        """
        Convert a byte count to its file size equivalent.

        The value steps up one unit per division by 1024 while the quotient stays
        above 0.9, so 1000 bytes already read as '1 KB'. Yottabytes is the
        largest unit; larger counts are shown as multiples of YB.

        Raises:
            OverflowError: If bytes is an int too large to convert to float.
            FormatterUnavailable: If the value cannot be formatted for the locale.

        Examples:
            >>> NumberFormat().file_size(1264, 2)
            '1.23 KB'
            >>> NumberFormat().file_size(1024 ** 9)
            '1,024 YB'
        """
        value = std_numeric(bytes)
        units = UnitsConf.FILE_SIZE

        i = 0
        while value / UnitsConf.FILE_SIZE_BASE > UnitsConf.FILE_SIZE_THRESHOLD and i < len(units) - 1:
            value /= UnitsConf.FILE_SIZE_BASE
            i += 1

        return f"{self.format(value, precision, max_precision, locale=locale)} {units[i]}"

    def abbreviate(self,
                   number,
                   precision: int = 0,
                   max_precision: int | None = None,
                   *,
                   locale: str | None = None) -> str:
        """Convert a number to its compact human-readable form, e.g. '1.2M'."""
        return self.for_humans(number, precision, max_precision, abbreviate=True, locale=locale)

    def for_humans(self,
                   number,
                   precision: int = 0,
                   max_precision: int | None = None,
                   abbreviate: bool = False,
                   *,
                   locale: str | None = None) -> str:
        """
        Convert a number to its human-readable form.

        Args:
            number: Number to convert.
            precision: Exact fraction digits of the scaled number.
            max_precision: Maximum fraction digits; wins over precision.
            abbreviate: Use compact suffixes ('K', 'M', ...) instead of words.
            locale: Per-call locale override.

        Raises:
            ValueError: If number is inf or nan.
            OverflowError: If number is an int too large to convert to float.

        Examples:
            >>> NumberFormat().for_humans(1_230_000, 2)
            '1.23 million'
            >>> NumberFormat().for_humans(1_230_000, 2, abbreviate=True)
            '1.23M'
        """
        units = UnitsConf.ABBREVIATED if abbreviate else UnitsConf.VERBOSE
        return summarize(number, precision, max_precision, units,
                         formatter=self.formatter, locale=self._locale(locale))

    def _locale(self, locale: str | None) -> str:
        """Resolve the effective locale: per-call, then instance, then process default."""
        if locale is not None:
            return locale
        if self.locale is not None:
            return self.locale
        return get_locale()


_default = NumberFormat()


# Methods --------------------------------------------------------------------------------------------------------------


def format(number, precision: int | None = None, max_precision: int | None = None, locale: str | None = None) -> str:
    """Format a number as locale decimal text. See NumberFormat.format."""
    return _default.format(number, precision, max_precision, locale)


def spell(number, locale: str | None = None) -> str:
    """Spell out a number in words. See NumberFormat.spell."""
    return _default.spell(number, locale)


def ordinal(number, locale: str | None = None) -> str:
    """Convert a number to ordinal form. See NumberFormat.ordinal."""
    return _default.ordinal(number, locale)


def percentage(number, precision: int = 0, max_precision: int | None = None, locale: str | None = None) -> str:
    """Format a number given in percent units. See NumberFormat.percentage."""
    return _default.percentage(number, precision, max_precision, locale)


def currency(number, currency: str = NumberConf.DEFAULT_CURRENCY, locale: str | None = None) -> str:
    """Format a number as a currency amount. See NumberFormat.currency."""
    return _default.currency(number, currency, locale)


def file_size(bytes, precision: int = 0, max_precision: int | None = None, *, locale: str | None = None) -> str:
    """Convert a byte count to its file size equivalent. See NumberFormat.file_size."""
    return _default.file_size(bytes, precision, max_precision, locale=locale)


def abbreviate(number, precision: int = 0, max_precision: int | None = None, *, locale: str | None = None) -> str:
    """Convert a number to its compact human-readable form. See NumberFormat.abbreviate."""
    return _default.abbreviate(number, precision, max_precision, locale=locale)


def for_humans(number,
               precision: int = 0,
               max_precision: int | None = None,
               abbreviate: bool = False,
               *,
               locale: str | None = None) -> str:
    """Convert a number to its human-readable form. See NumberFormat.for_humans."""
    return _default.for_humans(number, precision, max_precision, abbreviate, locale=locale)
