"""Arithmetic helpers shared across the package."""

from collections.abc import Sequence
from functools import reduce


def evaluate_polynomial(coefficients: Sequence[float], x: float) -> float:
    """Evaluate a polynomial whose coefficients run from highest order to zero order."""
    return horner_fold(list(reversed(coefficients)), x)


def horner_fold(coefficients: Sequence[float], x: float) -> float:
    """Evaluate a polynomial by Horner's method, coefficients from lowest order up."""
    return reduce(lambda acc, a: acc * x + a, reversed(coefficients), 0.0)


def integer_sqrt(n: int) -> int:
    """Integer square root by the Babylonian method."""
    if n < 0:
        raise ValueError("integer_sqrt requires a non-negative integer")
    x, y = n, 1
    while x > y:
        x = (x + y) // 2
        y = n // x
    return x