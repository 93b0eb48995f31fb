"""Conversions shared by the capability sets."""

from fractions import Fraction

import mpmath


class Functions:
    """A set of arithmetic primitives for one number representation.

    The resolver picks the implementation with the highest rank among a
    call's arguments, so every implementation must accept arguments of any
    lower-ranked representation.
    """

    representation = None

    @property
    def rank(self) -> int:
        return int(self.representation)

    def __repr__(self):
        return f"{type(self).__name__}()"


def to_mp(x):
    """Convert any supported value to an mpmath number at the working precision."""
    if isinstance(x, (mpmath.mpf, mpmath.mpc)):
        return x
    if isinstance(x, Fraction):
        return mpmath.mpf(x.numerator) / x.denominator
    return mpmath.mpmathify(x)


def to_fraction(x) -> Fraction:
    """Exact rational value of an integer, rational or finite real."""
    if isinstance(x, Fraction):
        return x
    if isinstance(x, int):
        return Fraction(x)
    if isinstance(x, mpmath.mpc):
        if x.imag != 0:
            raise ArithmeticError(f"{x} is not a real number")
        x = x.real
    if isinstance(x, mpmath.mpf):
        if not mpmath.isfinite(x):
            raise ArithmeticError(f"{x} has no exact rational value")
        sign, man, exp, _ = x._mpf_
        q = Fraction(-int(man) if sign else int(man))
        return q * 2 ** exp if exp >= 0 else q / 2 ** -exp
    raise TypeError(f"Cannot convert {type(x).__name__} to a rational")


def as_int(x, what: str = "argument") -> int:
    """Return x as an int, requiring it to be integral."""
    if isinstance(x, int):
        return x
    if isinstance(x, Fraction):
        if x.denominator == 1:
            return x.numerator
    elif isinstance(x, mpmath.mpc):
        if x.imag == 0 and mpmath.isint(x.real):
            return int(x.real)
    elif isinstance(x, mpmath.mpf):
        if mpmath.isint(x):
            return int(x)
    raise ValueError(f"{what} must be an integer, not {x}")


def as_digits(x) -> int:
    """Precision argument: a positive number of decimal digits."""
    digits = as_int(x, "precision")
    if digits <= 0:
        raise ValueError(f"precision must be positive, not {digits}")
    return digits


def real_only(op: str):
    raise ArithmeticError(f"{op} is not defined for complex numbers")
