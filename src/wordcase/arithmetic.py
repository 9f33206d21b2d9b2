"""Numeric helpers with strict argument validation.
"""

__docformat__ = 'google'

__all__ = [
    'add_numbers'
]

import math
from numbers import Integral, Real

def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)

def _is_nan(value) -> bool:
    # Integers are never NaN and may be too large to convert to float
    return not isinstance(value, Integral) and math.isnan(value)

def add_numbers(a: Real = None, b: Real = None) -> Real:
    """
    Add two numbers.

    Args:
        a: First addend
        b: Second addend

    Returns:
        The sum of a and b

    Raises:
        ValueError: If either argument is missing or None.
        TypeError: If either argument is not a number. Booleans and numeric
            strings are rejected.
        ValueError: If either argument is NaN.

    Example:
        >>> add_numbers(5, 3)
        8
        >>> add_numbers('5', 3)
        Traceback (most recent call last):
        TypeError: Both arguments must be numbers
    """
    if a is None or b is None:
        raise ValueError('Both arguments must be provided and cannot be None')

    if not (_is_number(a) and _is_number(b)):
        raise TypeError('Both arguments must be numbers')

    if _is_nan(a) or _is_nan(b):
        raise ValueError('Arguments cannot be NaN')

    return a + b
