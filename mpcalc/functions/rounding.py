"""Exact decimal rounding of rational values, rounding halves away from zero."""

from fractions import Fraction


def round_half_up(q: Fraction) -> int:
    n = abs(q)
    r = int(n + Fraction(1, 2))
    return r if q >= 0 else -r


def decimal_exponent(q: Fraction) -> int:
    """Smallest e with |q| < 10**e, for q != 0."""
    q = abs(q)
    e = len(str(q.numerator)) - len(str(q.denominator))
    if q >= _pow10(e):
        e += 1
    elif q < _pow10(e - 1):
        e -= 1
    return e


def round_to_places(q: Fraction, places: int) -> Fraction:
    scale = _pow10(places)
    return round_half_up(q * scale) / scale


def round_to_precision(q: Fraction, digits: int) -> Fraction:
    if digits <= 0:
        raise ValueError(f"precision must be positive, not {digits}")
    if q == 0:
        return q
    return round_to_places(q, digits - decimal_exponent(q))


def round_to_multiple(q: Fraction, m: Fraction) -> Fraction:
    if m == 0:
        raise ZeroDivisionError("Rounding to a multiple of zero")
    return round_half_up(q / m) * m


def _pow10(k: int) -> Fraction:
    return Fraction(10) ** k
