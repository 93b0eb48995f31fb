import mpmath

from ..representation import Representation
from .base import Functions, as_digits, as_int, real_only, to_mp


def _constant(value, digits):
    with mpmath.workdps(as_digits(digits)):
        return +value


class ComplexFunctions(Functions):
    """Primitives over complex numbers, and the fallback for every narrower family.

    All arguments are converted to mpmath numbers at the working precision.
    Primitives that need an ordering raise ArithmeticError.
    """

    representation = Representation.COMPLEX

    def convert(self, x):
        return to_mp(x)

    # arithmetic

    def negate(self, x):
        return -self.convert(x)

    def add(self, x, y):
        return self.convert(x) + self.convert(y)

    def subtract(self, x, y):
        return self.convert(x) - self.convert(y)

    def multiply(self, x, y):
        return self.convert(x) * self.convert(y)

    def divide(self, x, y):
        y = self.convert(y)
        if y == 0:
            raise ZeroDivisionError("Division by zero")
        return self.convert(x) / y

    def pow(self, x, y):
        x, y = self.convert(x), self.convert(y)
        if x == 0 and y == 0:
            raise ArithmeticError("Zero to power zero")
        return mpmath.power(x, y)

    def mod(self, x, y):
        real_only("mod")

    def fmod(self, x, y):
        real_only("fmod")

    # complex parts

    def arg(self, x):
        return mpmath.arg(self.convert(x))

    def conj(self, x):
        return mpmath.conj(self.convert(x))

    def imag(self, x):
        return mpmath.im(self.convert(x))

    def real(self, x):
        return mpmath.re(self.convert(x))

    def abs(self, x):
        return mpmath.fabs(self.convert(x))

    # elementary functions

    def sqrt(self, x):
        return mpmath.sqrt(self.convert(x))

    def cbrt(self, x):
        return mpmath.cbrt(self.convert(x))

    def root(self, x, n):
        return mpmath.root(self.convert(x), as_int(n, "root order"))

    def root_branch(self, x, n, k):
        return mpmath.root(self.convert(x), as_int(n, "root order"), as_int(k, "branch"))

    def inverse_root(self, x, n):
        return 1 / self.root(x, n)

    def inverse_root_branch(self, x, n, k):
        return 1 / self.root_branch(x, n, k)

    def exp(self, x):
        return mpmath.exp(self.convert(x))

    def log(self, x):
        x = self.convert(x)
        if x == 0:
            raise ArithmeticError("Logarithm of zero")
        return mpmath.log(x)

    def log_base(self, x, b):
        x, b = self.convert(x), self.convert(b)
        if x == 0 or b == 0 or b == 1:
            raise ArithmeticError(f"Logarithm of {x} to base {b} is undefined")
        return mpmath.log(x, b)

    def sin(self, x):
        return mpmath.sin(self.convert(x))

    def cos(self, x):
        return mpmath.cos(self.convert(x))

    def tan(self, x):
        return mpmath.tan(self.convert(x))

    def asin(self, x):
        return mpmath.asin(self.convert(x))

    def acos(self, x):
        return mpmath.acos(self.convert(x))

    def atan(self, x):
        return mpmath.atan(self.convert(x))

    def sinh(self, x):
        return mpmath.sinh(self.convert(x))

    def cosh(self, x):
        return mpmath.cosh(self.convert(x))

    def tanh(self, x):
        return mpmath.tanh(self.convert(x))

    def asinh(self, x):
        return mpmath.asinh(self.convert(x))

    def acosh(self, x):
        return mpmath.acosh(self.convert(x))

    def atanh(self, x):
        return mpmath.atanh(self.convert(x))

    def to_degrees(self, x):
        return mpmath.degrees(self.convert(x))

    def to_radians(self, x):
        return mpmath.radians(self.convert(x))

    def agm(self, x, y):
        return mpmath.agm(self.convert(x), self.convert(y))

    def w(self, x):
        return mpmath.lambertw(self.convert(x))

    def w_branch(self, x, k):
        return mpmath.lambertw(self.convert(x), as_int(k, "branch"))

    # special functions

    def gamma(self, x):
        return mpmath.gamma(self.convert(x))

    def gamma_incomplete(self, a, x):
        return mpmath.gammainc(self.convert(a), self.convert(x))

    def gamma_generalized(self, a, x0, x1):
        return mpmath.gammainc(self.convert(a), self.convert(x0), self.convert(x1))

    def log_gamma(self, x):
        return mpmath.loggamma(self.convert(x))

    def digamma(self, x):
        return mpmath.digamma(self.convert(x))

    def factorial(self, x):
        return mpmath.factorial(self.convert(x))

    def binomial(self, x, y):
        return mpmath.binomial(self.convert(x), self.convert(y))

    def bernoulli(self, x):
        return mpmath.bernoulli(as_int(x))

    def zeta(self, s):
        return mpmath.zeta(self.convert(s))

    def zeta_hurwitz(self, s, a):
        return mpmath.zeta(self.convert(s), self.convert(a))

    def hypergeometric0f1(self, a, z):
        return mpmath.hyp0f1(self.convert(a), self.convert(z))

    def hypergeometric1f1(self, a, b, z):
        return mpmath.hyp1f1(self.convert(a), self.convert(b), self.convert(z))

    def hypergeometric2f1(self, a, b, c, z):
        return mpmath.hyp2f1(self.convert(a), self.convert(b), self.convert(c), self.convert(z))

    # constants, evaluated to the requested number of digits

    def pi(self, digits):
        return _constant(mpmath.pi, digits)

    def e(self, digits):
        return _constant(mpmath.e, digits)

    def euler(self, digits):
        return _constant(mpmath.euler, digits)

    def catalan(self, digits):
        return _constant(mpmath.catalan, digits)

    def glaisher(self, digits):
        return _constant(mpmath.glaisher, digits)

    def khinchin(self, digits):
        return _constant(mpmath.khinchin, digits)

    def random(self, digits):
        with mpmath.workdps(as_digits(digits)):
            return mpmath.rand()

    def random_gaussian(self, digits):
        # Box-Muller; 1 - rand() lies in (0, 1] so the logarithm is finite
        with mpmath.workdps(as_digits(digits)):
            u = 1 - mpmath.rand()
            v = mpmath.rand()
            return mpmath.sqrt(-2 * mpmath.log(u)) * mpmath.cospi(2 * v)

    def precision(self, x, digits):
        with mpmath.workdps(as_digits(digits)):
            return +to_mp(x)

    # ordered-field primitives

    def floor(self, x):
        real_only("floor")

    def ceil(self, x):
        real_only("ceil")

    def truncate(self, x):
        real_only("truncate")

    def frac(self, x):
        real_only("frac")

    def max(self, x, y):
        real_only("max")

    def min(self, x, y):
        real_only("min")

    def copy_sign(self, x, y):
        real_only("copySign")

    def atan2(self, y, x):
        real_only("atan2")

    def hypot(self, x, y):
        real_only("hypot")

    def gcd(self, x, y):
        real_only("gcd")

    def lcm(self, x, y):
        real_only("lcm")

    def next_after(self, x, y):
        real_only("nextAfter")

    def next_up(self, x):
        real_only("nextUp")

    def next_down(self, x):
        real_only("nextDown")

    def ulp(self, x):
        real_only("ulp")

    def round_to_precision(self, x, digits):
        real_only("roundToPrecision")

    def round_to_integer(self, x):
        real_only("roundToInteger")

    def round_to_places(self, x, places):
        real_only("roundToPlaces")

    def round_to_multiple(self, x, y):
        real_only("roundToMultiple")

    def scale(self, x, n):
        real_only("scale")
