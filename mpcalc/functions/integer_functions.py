import math

from ..representation import Representation
from .base import as_int
from .rational_functions import RationalFunctions, exact_binomial


class IntegerFunctions(RationalFunctions):
    representation = Representation.INTEGER

    def gcd(self, x, y):
        return math.gcd(as_int(x), as_int(y))

    def lcm(self, x, y):
        return math.lcm(as_int(x), as_int(y))

    def factorial(self, x):
        n = as_int(x)
        if n < 0:
            raise ArithmeticError(f"Factorial of negative number {n}")
        return math.factorial(n)

    def binomial(self, x, y):
        return exact_binomial(as_int(x), as_int(y))
