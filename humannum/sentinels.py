"""
Sentinel for distinguishing an omitted argument from an explicit None.

In humannum None is meaningful for several options (locale=None means "use
the process default"), so configuration overrides use UNSET for "not given".
Always compare by identity: `if arg is UNSET:`.
"""

from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifnotunset',
]


class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton, falsy, pickles back to the same instance.
    """
    __slots__ = ()
    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


UNSET: Final[UnsetType] = UnsetType()


def ifnotunset(value: Any, *, default: Any) -> Any:
    """
    Return value if it's not UNSET, otherwise return default.

    Examples:
        >>> ifnotunset(UNSET, default="en")
        'en'
        >>> ifnotunset(None, default="en") is None
        True
    """
    return default if value is UNSET else value
