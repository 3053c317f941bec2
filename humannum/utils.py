"""
humannum utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def type_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the type name of an object or a class for error messages.

    Returns the class name whether given an instance or the class itself.
    For example, both `type_name(10)` and `type_name(int)` return 'int'.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, prefix non-builtin names with their module.

    Returns:
        str: The type name.

    Examples:
        >>> type_name(10)
        'int'
        >>> from decimal import Decimal
        >>> type_name(Decimal, fully_qualified=True)
        'decimal.Decimal'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    name = getattr(cls, "__qualname__", None) or str(cls)

    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{name}"
    return name
