"""
Magnitude summarization: scale a number into a unit-suffixed string.

    1_234_567.89 → "1.23M" or "1.23 million"

The number is bucketed by its power of 1000, divided down to that bucket and
formatted by a NumberFormatter; the bucket's suffix comes from a unit table.
Magnitudes at or above 10^15 are expressed as multiples of the top unit, so
the suffixes compound: 10^18 → "1KQ" / "1 thousand quadrillion".
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from collections.abc import Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .formatter import NumberFormatter, BabelFormatter
from .config import get_locale
from .numeric import std_numeric, is_finite
from .units import UnitsConf, last_unit, validate_unit_table
from .validators import validate_precision

_DEFAULT_FORMATTER = BabelFormatter()


# Methods --------------------------------------------------------------------------------------------------------------


def summarize(
        number,
        precision: int | None = 0,
        max_precision: int | None = None,
        units: Mapping[int, str] | None = None,
        *,
        formatter: NumberFormatter | None = None,
        locale: str | None = None,
) -> str:
    """
    Convert a number to its scaled, unit-suffixed human-readable form.

    Args:
        number: Number to summarize: int, float, or anything std_numeric accepts.
        precision: Exact fraction digits of the scaled number.
        max_precision: Upper bound of fraction digits; wins over precision.
        units: Unit table mapping exponent thresholds to suffixes.
            None selects UnitsConf.DEFAULT.
        formatter: Backend formatting the scaled number. Defaults to BabelFormatter.
        locale: Locale for the decimal formatting. None reads the process default
            at call time.

    Returns:
        Formatted scaled number followed by its unit suffix, surrounding
        whitespace stripped. Zero is always "0".

    Raises:
        InvalidUnitTable: If units is empty or malformed.
        TypeError: If number or precisions have unsupported types.
        ValueError: If number is inf or nan.
        OverflowError: If number is an int too large to convert to float (above about 1e308).
        FormatterUnavailable: If the formatter cannot format for the locale.

    Examples:
        >>> summarize(1_234_567.89, 2)
        '1.23M'
        >>> summarize(1_000_000, units=UnitsConf.VERBOSE)
        '1 million'
        >>> summarize(-1500, 1)
        '-1.5K'
        >>> summarize(0.0025, 1)
        '2.5'
        >>> summarize(10**18)
        '1KQ'
    """
    number = std_numeric(number)
    if not is_finite(number):
        raise ValueError(f"cannot summarize non-finite number: {number}")

    units = UnitsConf.DEFAULT if units is None else validate_unit_table(units)
    validate_precision(precision)
    validate_precision(max_precision, name="max_precision")
    formatter = formatter if formatter is not None else _DEFAULT_FORMATTER
    locale = locale if locale is not None else get_locale()

    return _summarize(number, precision, max_precision, units, formatter, locale)


# Private Methods ------------------------------------------------------------------------------------------------------


def _summarize(number, precision, max_precision, units, formatter, locale) -> str:
    if number == 0:
        return "0"

    if number < 0:
        return "-" + _summarize(abs(number), precision, max_precision, units, formatter, locale)

    overflow = 10 ** UnitsConf.OVERFLOW_EXPONENT
    if number >= overflow:
        # The reduced magnitude picks its own unit, the top unit is appended on top
        return _summarize(number / overflow, precision, max_precision, units, formatter, locale) + last_unit(units)

    exponent = math.floor(math.log10(number))
    # Truncated modulo: sub-unit buckets are negative multiples of 3 with no suffix
    bucket = exponent - int(math.fmod(exponent, 3))
    scaled = number / 10 ** bucket if bucket >= 0 else number * 10 ** -bucket

    formatted = formatter.format_decimal(scaled, locale, precision, max_precision)
    return (formatted + units.get(bucket, "")).strip()
