"""
Standardize numeric input from Python stdlib and third-party libraries.

Every formatting entry point accepts "a number", which in practice may be a
Python int/float, a Decimal or Fraction, or a NumPy/Pandas scalar. This module
normalizes all of them to plain int or float before any magnitude math.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from decimal import Decimal
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import type_name


def std_numeric(value, *, allow_bool: bool = False) -> int | float:
    """
    Convert a numeric value to standard Python int or float.

    Parameters
    ----------
    value : various
        Numeric value to convert. Supports Python int/float, Decimal,
        Fraction, and third-party types via __index__, .item() or __float__.

    allow_bool : bool, default False
        If True, convert bool to int (True→1, False→0). If False, raise
        TypeError. Default False helps catch bugs since bool is subclass
        of int in Python.

    Returns
    -------
    int
        For Python int (arbitrary precision), types implementing __index__
        (NumPy integers), and integer-valued Decimal/Fraction.

    float
        For everything else, including inf and nan which are passed through
        untouched. Callers decide whether non-finite values are acceptable.

    Raises
    ------
    TypeError
        For None, str, containers and other unsupported types, and for bool
        when allow_bool=False.

    Examples
    --------
    >>> std_numeric(42)
    42
    >>> std_numeric(Decimal('42.0'))
    42
    >>> std_numeric(Fraction(1, 4))
    0.25
    >>> std_numeric("1")
    Traceback (most recent call last):
        ...
    TypeError: unsupported numeric type: str
    """
    if isinstance(value, bool):
        if allow_bool:
            return int(value)
        raise TypeError(
            f"boolean values not supported, got {value}. "
            f"Set allow_bool=True to convert booleans to int (True→1, False→0)"
        )

    # Fast path
    if isinstance(value, (int, float)):
        return value

    if value is None or isinstance(value, (str, bytes)):
        raise TypeError(f"unsupported numeric type: {type_name(value)}")

    # Integer-valued Decimal/Fraction keep arbitrary precision as int
    if isinstance(value, (Decimal, Fraction)):
        if isinstance(value, Decimal) and not value.is_finite():
            return float(value)
        as_int = int(value)
        if value == as_int:
            return as_int
        return float(value)

    # NumPy integer types
    if hasattr(value, "__index__"):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {type_name(value)} to int via __index__: {e}") from e

    # Array/tensor scalars
    item = getattr(value, "item", None)
    if callable(item):
        try:
            result = item()
        except (TypeError, ValueError):
            result = None
        if isinstance(result, (int, float)):
            return std_numeric(result, allow_bool=allow_bool)

    if hasattr(value, "__float__"):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {type_name(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {type_name(value)}. "
        f"Expected int, float, Decimal, Fraction, or types implementing "
        f"__index__, __float__ or .item() (e.g. numpy scalars)"
    )


def is_finite(value: int | float) -> bool:
    """Check a standardized number is not inf or nan; ints are always finite."""
    if isinstance(value, int):
        return True
    return math.isfinite(value)
