import math
from fractions import Fraction
from typing import Optional

import mpmath

from ..representation import Representation
from . import rounding
from .base import as_digits, as_int, to_fraction
from .real_functions import RealFunctions


def iroot(n: int, k: int) -> int:
    """Floor of the k-th root of a non-negative integer."""
    if n < 2:
        return n
    r = 1 << -(-n.bit_length() // k)
    while True:
        s = ((k - 1) * r + n // r ** (k - 1)) // k
        if s >= r:
            return r
        r = s


def exact_root(q: Fraction, k: int) -> Optional[Fraction]:
    """The real k-th root of q if it is rational, else None."""
    if k <= 0:
        return None
    if q < 0:
        if k % 2 == 0:
            return None
        r = exact_root(-q, k)
        return None if r is None else -r
    num, den = iroot(q.numerator, k), iroot(q.denominator, k)
    if num ** k != q.numerator or den ** k != q.denominator:
        return None
    return Fraction(num, den)


def exact_binomial(n: int, k: int) -> int:
    if k < 0:
        return 0
    if n >= 0:
        return math.comb(n, k)
    # C(n, k) = (-1)^k C(k - n - 1, k)
    return (-1) ** k * math.comb(k - n - 1, k)


def _is_integral(q: Fraction) -> bool:
    return q.denominator == 1


class RationalFunctions(RealFunctions):
    """Exact primitives over rational numbers.

    Anything that cannot be computed exactly falls back to the real
    implementation.
    """

    representation = Representation.RATIONAL

    def exact(self, x) -> Fraction:
        return to_fraction(x)

    def negate(self, x):
        return -self.exact(x)

    def add(self, x, y):
        return self.exact(x) + self.exact(y)

    def subtract(self, x, y):
        return self.exact(x) - self.exact(y)

    def multiply(self, x, y):
        return self.exact(x) * self.exact(y)

    def divide(self, x, y):
        y = self.exact(y)
        if y == 0:
            raise ZeroDivisionError("Division by zero")
        return self.exact(x) / y

    def pow(self, x, y):
        x, y = self.exact(x), self.exact(y)
        if x == 0 and y == 0:
            raise ArithmeticError("Zero to power zero")
        if _is_integral(y):
            return x ** y.numerator
        # negative bases take the principal complex power, as for reals
        r = exact_root(x, y.denominator) if x >= 0 else None
        if r is None:
            return super().pow(x, y)
        return r ** y.numerator

    def mod(self, x, y):
        x, y = self.exact(x), self.exact(y)
        if y == 0:
            raise ZeroDivisionError("Modulo by zero")
        return x % y

    def fmod(self, x, y):
        x, y = self.exact(x), self.exact(y)
        if y == 0:
            raise ZeroDivisionError("Modulo by zero")
        return x - y * math.trunc(x / y)

    def abs(self, x):
        return abs(self.exact(x))

    def floor(self, x):
        return math.floor(self.exact(x))

    def ceil(self, x):
        return math.ceil(self.exact(x))

    def truncate(self, x):
        return math.trunc(self.exact(x))

    def frac(self, x):
        x = self.exact(x)
        return x - math.trunc(x)

    def max(self, x, y):
        return max(self.exact(x), self.exact(y))

    def min(self, x, y):
        return min(self.exact(x), self.exact(y))

    def copy_sign(self, x, y):
        x, y = self.exact(x), self.exact(y)
        return abs(x) if y >= 0 else -abs(x)

    def gcd(self, x, y):
        x, y = self.exact(x), self.exact(y)
        return Fraction(math.gcd(x.numerator, y.numerator), math.lcm(x.denominator, y.denominator))

    def lcm(self, x, y):
        x, y = self.exact(x), self.exact(y)
        return Fraction(math.lcm(x.numerator, y.numerator), math.gcd(x.denominator, y.denominator))

    # exact numbers have no last place

    def ulp(self, x):
        self.exact(x)
        return 0

    def next_up(self, x):
        return self.exact(x)

    def next_down(self, x):
        return self.exact(x)

    def next_after(self, x, y):
        self.exact(y)
        return self.exact(x)

    def round_to_precision(self, x, digits):
        return rounding.round_to_precision(self.exact(x), as_digits(digits))

    def round_to_integer(self, x):
        return rounding.round_half_up(self.exact(x))

    def round_to_places(self, x, places):
        return rounding.round_to_places(self.exact(x), as_int(places, "places"))

    def round_to_multiple(self, x, y):
        return rounding.round_to_multiple(self.exact(x), self.exact(y))

    def scale(self, x, n):
        return self.exact(x) * Fraction(10) ** as_int(n, "scale")

    def root(self, x, n):
        r = exact_root(self.exact(x), as_int(n, "root order"))
        return super().root(x, n) if r is None else r

    def sqrt(self, x):
        return self.root(x, 2)

    def cbrt(self, x):
        return self.root(x, 3)

    def factorial(self, x):
        x = self.exact(x)
        if _is_integral(x) and x >= 0:
            return math.factorial(x.numerator)
        return super().factorial(x)

    def binomial(self, x, y):
        x, y = self.exact(x), self.exact(y)
        if _is_integral(x) and _is_integral(y):
            return exact_binomial(x.numerator, y.numerator)
        return super().binomial(x, y)

    def bernoulli(self, x):
        n = as_int(x)
        if n < 0:
            raise ValueError(f"Bernoulli number index must be non-negative, not {n}")
        p, q = mpmath.bernfrac(n)
        return Fraction(int(p), int(q))
