"""
humannum Argument Validators

Validation of formatting arguments: locale identifiers, fraction-digit
precision and ISO 4217 currency codes.

These validators check the **shape** of arguments only. Whether a well-formed
locale or currency is actually known is decided by the formatter backend.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import type_name


# Constants ------------------------------------------------------------------------------------------------------------

# language[_Script][_REGION][_variant], '-' or '_' separated
_LOCALE_RE = re.compile(r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]{2,8})*$")

_CURRENCY_RE = re.compile(r"^[A-Za-z]{3}$")


# Methods --------------------------------------------------------------------------------------------------------------


def validate_locale(locale: str) -> str:
    """
    Validate and normalize a locale identifier.

    Accepts ISO 639 language codes optionally followed by script, region and
    variant subtags, separated by '_' or '-'. BCP 47 style dashes are
    normalized to underscores.

    Args:
        locale: The locale identifier. Leading/trailing whitespace is stripped.

    Returns:
        The normalized identifier, e.g. 'en_US' for ' en-US '.

    Raises:
        TypeError: If locale is not a string.
        ValueError: If locale is empty or malformed.

    Examples:
        >>> validate_locale('en')
        'en'
        >>> validate_locale('zh-Hans-CN')
        'zh_Hans_CN'
    """
    if not isinstance(locale, str):
        raise TypeError(f"locale must be str, got {type_name(locale)}")

    locale = locale.strip()

    if not locale:
        raise ValueError("locale cannot be empty or whitespace")

    if not _LOCALE_RE.match(locale):
        raise ValueError(
            f"invalid locale identifier: '{locale}'. Expected language[_Script][_REGION] (e.g., 'en', 'en_US')"
        )

    return locale.replace("-", "_")


def validate_precision(value: int | None, *, name: str = "precision") -> int | None:
    """
    Validate a fraction-digit count; None passes through as "not set".

    Raises:
        TypeError: If value is not int or None (bool is rejected).
        ValueError: If value is negative.
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int | None, got {type_name(value)}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def validate_currency_code(code: str) -> str:
    """
    Validate an ISO 4217 three-letter currency code and return it upper-cased.

    Examples:
        >>> validate_currency_code('eur')
        'EUR'
    """
    if not isinstance(code, str):
        raise TypeError(f"currency code must be str, got {type_name(code)}")

    code = code.strip()
    if not _CURRENCY_RE.match(code):
        raise ValueError(f"invalid currency code: '{code}'. Expected 3-letter ISO 4217 code (e.g., 'USD')")

    return code.upper()
