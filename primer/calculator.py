"""Basic arithmetic on floating-point numbers."""

from __future__ import annotations

import math

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "sqrt",
    "add_many",
    "subtract_many",
    "multiply_many",
    "divide_many",
]

_DIVISION_BY_ZERO = "division by zero not allowed"


def add(a: float, b: float) -> float:
    """Return the sum of ``a`` and ``b``."""
    return float(a) + float(b)


def subtract(a: float, b: float) -> float:
    """Return ``b`` subtracted from ``a``."""
    return float(a) - float(b)


def multiply(a: float, b: float) -> float:
    """Return the product of ``a`` and ``b``."""
    return float(a) * float(b)


def divide(a: float, b: float) -> float:
    """Return ``a`` divided by ``b``.

    Raises ZeroDivisionError if ``b`` is zero.
    """
    if b == 0:
        raise ZeroDivisionError(_DIVISION_BY_ZERO)
    return float(a) / float(b)


def sqrt(value: float) -> float:
    """Return the square root of ``value``.

    Raises ValueError for negative input.
    """
    if value < 0:
        raise ValueError(
            f"square root of negative number not allowed: {float(value):f}"
        )
    return math.sqrt(value)


def add_many(*args: float) -> float:
    """Return the sum of all arguments, or 0 if there are none."""
    if not args:
        return 0.0
    first, *rest = args
    result = float(first)
    for n in rest:
        result += n
    return result


def subtract_many(*args: float) -> float:
    """Subtract every later argument from the first; 0 if there are none."""
    if not args:
        return 0.0
    first, *rest = args
    result = float(first)
    for n in rest:
        result -= n
    return result


def multiply_many(*args: float) -> float:
    """Return the product of all arguments, or 0 if there are none."""
    if not args:
        return 0.0
    first, *rest = args
    result = float(first)
    for n in rest:
        result *= n
    return result


def divide_many(*args: float) -> float:
    """Divide the first argument by each later one in turn.

    Returns 0 if there are no arguments. Raises ZeroDivisionError if any
    divisor is zero.
    """
    if not args:
        return 0.0
    first, *rest = args
    result = float(first)
    for n in rest:
        if n == 0:
            raise ZeroDivisionError(_DIVISION_BY_ZERO)
        result /= n
    return result