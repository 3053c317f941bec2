"""
humannum configuration: defaults and the process-wide locale setting.

The default locale is read at the start of every formatting call that does
not pass an explicit locale. It lives for the whole process, is not persisted
and is shared by all threads: writes are serialized and the last writer wins.
Code that needs isolation should pass locale= per call or hold its own
NumberFormat instance instead of relying on this global.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import threading
from contextlib import contextmanager
from typing import Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .validators import validate_locale

logger = logging.getLogger(__name__)


# @formatter:off

class NumberConf:
    """
    Default configuration constants for number formatting.

    Attributes:
        DEFAULT_LOCALE: Locale in effect until use_locale() is called.
        DEFAULT_CURRENCY: ISO 4217 code used by currency() when none is given.
    """
    DEFAULT_LOCALE = "en"
    DEFAULT_CURRENCY = "USD"

# @formatter:on

_locale = NumberConf.DEFAULT_LOCALE
_locale_lock = threading.Lock()


# Methods --------------------------------------------------------------------------------------------------------------


def get_locale() -> str:
    """Return the current process-wide default locale."""
    with _locale_lock:
        return _locale


def use_locale(locale: str) -> None:
    """
    Set the process-wide default locale.

    Affects subsequent formatting calls that do not pass an explicit locale.
    Calls with an explicit locale argument are never affected.

    Args:
        locale: Locale identifier such as 'en', 'de' or 'pt-BR'.

    Raises:
        TypeError: If locale is not a string.
        ValueError: If locale is empty or malformed.

    Examples:
        >>> use_locale("de")
        >>> humannum.number.format(1234.5, 1)
        '1.234,5'
    """
    global _locale

    locale = validate_locale(locale)
    with _locale_lock:
        previous, _locale = _locale, locale
    logger.debug("default locale changed from %r to %r", previous, locale)


@contextmanager
def using_locale(locale: str) -> Iterator[str]:
    """
    Temporarily switch the process-wide default locale.

    The previous default is restored on exit, also when the block raises.

    Examples:
        >>> with using_locale("fr"):
        ...     spell(3)
        'trois'
    """
    previous = get_locale()
    use_locale(locale)
    try:
        yield get_locale()
    finally:
        use_locale(previous)
