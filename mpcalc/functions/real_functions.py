import math

import mpmath

from ..representation import Representation
from . import rounding
from .base import as_digits, as_int, to_fraction, to_mp
from .complex_functions import ComplexFunctions


class RealFunctions(ComplexFunctions):
    """Primitives over real numbers; adds everything that needs an ordering."""

    representation = Representation.REAL

    def mod(self, x, y):
        x, y = self.convert(x), self.convert(y)
        if y == 0:
            raise ZeroDivisionError("Modulo by zero")
        return x % y

    def fmod(self, x, y):
        x, y = self.convert(x), self.convert(y)
        if y == 0:
            raise ZeroDivisionError("Modulo by zero")
        r = x % y
        if r != 0 and (r < 0) != (x < 0):
            r -= y
        return r

    def floor(self, x):
        return int(mpmath.floor(self.convert(x)))

    def ceil(self, x):
        return int(mpmath.ceil(self.convert(x)))

    def truncate(self, x):
        return int(self.convert(x))

    def frac(self, x):
        x = self.convert(x)
        return x - int(x)

    def max(self, x, y):
        return max(self.convert(x), self.convert(y))

    def min(self, x, y):
        return min(self.convert(x), self.convert(y))

    def copy_sign(self, x, y):
        x, y = self.convert(x), self.convert(y)
        return abs(x) if y >= 0 else -abs(x)

    def atan2(self, y, x):
        return mpmath.atan2(self.convert(y), self.convert(x))

    def hypot(self, x, y):
        return mpmath.hypot(self.convert(x), self.convert(y))

    def gcd(self, x, y):
        return math.gcd(as_int(x), as_int(y))

    def lcm(self, x, y):
        return math.lcm(as_int(x), as_int(y))

    def root(self, x, n):
        x, n = self.convert(x), as_int(n, "root order")
        # odd roots of negative reals stay real
        if isinstance(x, mpmath.mpf) and x < 0 and n % 2:
            return -mpmath.root(-x, n)
        return super().root(x, n)

    def cbrt(self, x):
        return self.root(x, 3)

    def ulp(self, x):
        x = mpmath.mpf(self.convert(x))
        if x == 0 or not mpmath.isfinite(x):
            return mpmath.mpf(0)
        _, man, exp, bc = x._mpf_
        return mpmath.ldexp(1, exp + bc - mpmath.mp.prec)

    def _step(self, x, up):
        step = self.ulp(x)
        # leaving a power of two towards zero enters the binade below
        if step and x._mpf_[1] == 1 and (x > 0) != up:
            step /= 2
        return step

    def next_up(self, x):
        x = mpmath.mpf(self.convert(x))
        return x + self._step(x, True)

    def next_down(self, x):
        x = mpmath.mpf(self.convert(x))
        return x - self._step(x, False)

    def next_after(self, x, y):
        x, y = self.convert(x), self.convert(y)
        if y > x:
            return self.next_up(x)
        if y < x:
            return self.next_down(x)
        return x

    def round_to_precision(self, x, digits):
        return to_mp(rounding.round_to_precision(to_fraction(self.convert(x)), as_digits(digits)))

    def round_to_integer(self, x):
        return rounding.round_half_up(to_fraction(self.convert(x)))

    def round_to_places(self, x, places):
        return to_mp(rounding.round_to_places(to_fraction(self.convert(x)), as_int(places, "places")))

    def round_to_multiple(self, x, y):
        return to_mp(rounding.round_to_multiple(to_fraction(self.convert(x)), to_fraction(self.convert(y))))

    def scale(self, x, n):
        return self.convert(x) * mpmath.mpf(10) ** as_int(n, "scale")
