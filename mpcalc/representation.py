"""Number representations understood by the calculator.

The family is closed and totally ordered: every integer is a rational,
every rational a real and every real a complex number. The rank of a
representation is its position in that chain.
"""

import numbers
from decimal import Decimal
from enum import IntEnum
from fractions import Fraction

import mpmath
import numpy as np

from .errors import UnsupportedArgument


class Representation(IntEnum):
    INTEGER = 0
    RATIONAL = 1
    REAL = 2
    COMPLEX = 3


def representation_of(x) -> Representation:
    """Classify a single argument."""
    if isinstance(x, np.generic):
        x = _from_numpy(x)
    if isinstance(x, bool):
        raise UnsupportedArgument(f"Booleans are not numbers: {x!r}")
    if isinstance(x, numbers.Integral):
        return Representation.INTEGER
    if isinstance(x, numbers.Rational):
        return Representation.RATIONAL
    if isinstance(x, (mpmath.mpf, float, Decimal, numbers.Real)):
        return Representation.REAL
    if isinstance(x, (mpmath.mpc, complex, numbers.Complex)):
        return Representation.COMPLEX
    raise UnsupportedArgument(f"Unsupported argument type {type(x).__name__}: {x!r}")


def coerce_argument(x):
    """Convert an accepted input value to the canonical type of its representation.

    Never narrows: a complex value with zero imaginary part stays complex.
    """
    if isinstance(x, np.generic):
        x = _from_numpy(x)
    rep = representation_of(x)
    if rep is Representation.INTEGER:
        return int(x)
    if rep is Representation.RATIONAL:
        return x if isinstance(x, Fraction) else Fraction(x.numerator, x.denominator)
    if rep is Representation.REAL:
        if isinstance(x, mpmath.mpf):
            return x
        if isinstance(x, Decimal):
            return mpmath.mpf(str(x))
        return mpmath.mpf(x)
    return x if isinstance(x, mpmath.mpc) else mpmath.mpc(x)


def _from_numpy(x):
    if isinstance(x, np.bool_):
        raise UnsupportedArgument(f"Booleans are not numbers: {x!r}")
    if isinstance(x, (np.integer, np.floating, np.complexfloating)):
        return x.item()
    raise UnsupportedArgument(f"Unsupported numpy type {type(x).__name__}")
