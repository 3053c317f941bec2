#
# humannum Units Tables
#

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Mapping
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import type_name


# @formatter:off

class UnitsConf:
    """
    Unit tables and thresholds used by the summarization engine and file sizes.

    Attributes:
        ABBREVIATED: Compact magnitude suffixes, no leading space - "1.2M".
            Also the default table when a caller passes no units.

        VERBOSE: Spelled-out magnitude suffixes with leading space - "1.2 million".

        FILE_SIZE: Byte units in 1024 steps, from bytes to yottabytes.

        OVERFLOW_EXPONENT: Magnitudes at or above 10^OVERFLOW_EXPONENT are reduced
            by that factor and get the last unit of the table appended.

        FILE_SIZE_BASE: Divisor between consecutive FILE_SIZE units.

        FILE_SIZE_THRESHOLD: A value moves to the next file size unit while
            value / FILE_SIZE_BASE stays above this fraction.

    Examples:
        >>> UnitsConf.ABBREVIATED[6]
        'M'
    """

    ABBREVIATED = frozendict({
        3: "K",     # thousand
        6: "M",     # million
        9: "B",     # billion
        12: "T",    # trillion
        15: "Q",    # quadrillion
    })

    VERBOSE = frozendict({
        3: " thousand",
        6: " million",
        9: " billion",
        12: " trillion",
        15: " quadrillion",
    })

    DEFAULT = ABBREVIATED

    FILE_SIZE = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

    OVERFLOW_EXPONENT = 15

    FILE_SIZE_BASE = 1024
    FILE_SIZE_THRESHOLD = 0.9

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------


class InvalidUnitTable(ValueError):
    """Unit table is empty, malformed or its exponents are not strictly increasing."""


# Methods --------------------------------------------------------------------------------------------------------------


def validate_unit_table(units: Any) -> Mapping[int, str]:
    """
    Validate a unit table for the summarization engine.

    A unit table maps exponent thresholds (3, 6, 9, ...) to display suffixes.
    Exponents must be int and strictly increasing in iteration order, since the
    last entry doubles as the overflow unit.

    Args:
        units: Mapping of exponent to suffix.

    Returns:
        The same mapping if valid.

    Raises:
        InvalidUnitTable: If units is not a mapping, is empty, has non-int exponents,
            non-str suffixes, or exponents out of order.

    Examples:
        >>> validate_unit_table({3: "k", 6: "m"})
        {3: 'k', 6: 'm'}
        >>> validate_unit_table({})
        Traceback (most recent call last):
            ...
        humannum.units.InvalidUnitTable: unit table cannot be empty
    """
    if not isinstance(units, Mapping):
        raise InvalidUnitTable(f"unit table must be a Mapping, got {type_name(units)}")
    if not units:
        raise InvalidUnitTable("unit table cannot be empty")

    previous = None
    for exponent, suffix in units.items():
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise InvalidUnitTable(f"unit exponent must be int, got {type_name(exponent)}: {exponent!r}")
        if not isinstance(suffix, str):
            raise InvalidUnitTable(f"unit suffix must be str, got {type_name(suffix)} at exponent {exponent}")
        if previous is not None and exponent <= previous:
            raise InvalidUnitTable(
                f"unit exponents must be strictly increasing, got {exponent} after {previous}"
            )
        previous = exponent

    return units


def last_unit(units: Mapping[int, str]) -> str:
    """Return the suffix of the last (overflow) entry of a unit table."""
    return list(units.values())[-1]
