import numbers
from fractions import Fraction

import mpmath
import numpy as np


def promote(x):
    """Narrow a computed value to the most specific representation it fits.

    A complex value with zero imaginary part becomes real and a rational with
    unit denominator becomes an integer. Reals stay reals even when integral,
    since an mpf carries only finite precision. Applying promote twice is the
    same as applying it once.
    """
    if isinstance(x, np.generic):
        x = x.item()
    if isinstance(x, complex):
        x = mpmath.mpc(x)
    elif isinstance(x, float):
        x = mpmath.mpf(x)
    if isinstance(x, mpmath.mpc):
        return x.real if x.imag == 0 else x
    if isinstance(x, Fraction):
        return x.numerator if x.denominator == 1 else x
    if isinstance(x, numbers.Integral) and not isinstance(x, (int, bool)):
        return int(x)
    if isinstance(x, numbers.Rational) and not isinstance(x, (int, Fraction)):
        return promote(Fraction(x.numerator, x.denominator))
    return x
