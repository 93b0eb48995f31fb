"""The calculator's function table.

Each entry maps a function name and arity window to a handler that forwards
its arguments to the matching primitive of the resolved implementation.
Names overloaded by arity are one entry whose handler branches on the
argument count.
"""

import warnings

from .registry import register

# (name, arity, primitive, doc) for entries that forward positionally
_FORWARDED = [
    ("negate", 1, "negate", "negate(x): -x"),
    ("add", 2, "add", "add(x,y): x + y"),
    ("subtract", 2, "subtract", "subtract(x,y): x - y"),
    ("multiply", 2, "multiply", "multiply(x,y): x * y"),
    ("divide", 2, "divide", "divide(x,y): x / y"),
    ("mod", 2, "mod", "mod(x,y): remainder with the sign of y"),
    ("pow", 2, "pow", "pow(x,y): x to the power y"),
    ("abs", 1, "abs", "absolute value or modulus"),
    ("acos", 1, "acos", "inverse cosine"),
    ("acosh", 1, "acosh", "inverse hyperbolic cosine"),
    ("asin", 1, "asin", "inverse sine"),
    ("asinh", 1, "asinh", "inverse hyperbolic sine"),
    ("atan", 1, "atan", "inverse tangent"),
    ("atanh", 1, "atanh", "inverse hyperbolic tangent"),
    ("bernoulli", 1, "bernoulli", "bernoulli(n): n-th Bernoulli number"),
    ("binomial", 2, "binomial", "binomial(n,k): binomial coefficient"),
    ("catalan", 1, "catalan", "catalan(p): Catalan's constant to p digits"),
    ("cbrt", 1, "cbrt", "cube root"),
    ("ceil", 1, "ceil", "smallest integer >= x"),
    ("cos", 1, "cos", "cosine"),
    ("cosh", 1, "cosh", "hyperbolic cosine"),
    ("digamma", 1, "digamma", "digamma function"),
    ("e", 1, "e", "e(p): Euler's number to p digits"),
    ("euler", 1, "euler", "euler(p): Euler-Mascheroni constant to p digits"),
    ("exp", 1, "exp", "exponential function"),
    ("factorial", 1, "factorial", "factorial(n): n!"),
    ("floor", 1, "floor", "largest integer <= x"),
    ("frac", 1, "frac", "fractional part, with the sign of x"),
    ("glaisher", 1, "glaisher", "glaisher(p): Glaisher-Kinkelin constant to p digits"),
    ("hypergeometric0F1", 2, "hypergeometric0f1", "hypergeometric0F1(a,z)"),
    ("hypergeometric1F1", 3, "hypergeometric1f1", "hypergeometric1F1(a,b,z)"),
    ("hypergeometric2F1", 4, "hypergeometric2f1", "hypergeometric2F1(a,b,c,z)"),
    ("khinchin", 1, "khinchin", "khinchin(p): Khinchin's constant to p digits"),
    ("logGamma", 1, "log_gamma", "logarithm of the gamma function"),
    ("max", 2, "max", "larger of x and y"),
    ("min", 2, "min", "smaller of x and y"),
    ("nextAfter", 2, "next_after", "nextAfter(x,y): adjacent value of x in the direction of y"),
    ("nextDown", 1, "next_down", "adjacent value of x towards negative infinity"),
    ("nextUp", 1, "next_up", "adjacent value of x towards positive infinity"),
    ("pi", 1, "pi", "pi(p): pi to p digits"),
    ("random", 1, "random", "random(p): uniform random number in [0,1) with p digits"),
    ("randomGaussian", 1, "random_gaussian", "randomGaussian(p): standard normal random number with p digits"),
    ("roundToPrecision", 2, "round_to_precision", "roundToPrecision(x,p): round to p significant digits"),
    ("roundToInteger", 1, "round_to_integer", "round to the nearest integer, halves away from zero"),
    ("roundToPlaces", 2, "round_to_places", "roundToPlaces(x,n): round to n decimal places"),
    ("roundToMultiple", 2, "round_to_multiple", "roundToMultiple(x,y): round to the nearest multiple of y"),
    ("sin", 1, "sin", "sine"),
    ("sinh", 1, "sinh", "hyperbolic sine"),
    ("sqrt", 1, "sqrt", "square root"),
    ("tan", 1, "tan", "tangent"),
    ("tanh", 1, "tanh", "hyperbolic tangent"),
    ("truncate", 1, "truncate", "integer part, rounded towards zero"),
    ("toDegrees", 1, "to_degrees", "radians to degrees"),
    ("toRadians", 1, "to_radians", "degrees to radians"),
    ("ulp", 1, "ulp", "unit in the last place"),
    ("arg", 1, "arg", "argument (phase) of a complex number"),
    ("conj", 1, "conj", "complex conjugate"),
    ("imag", 1, "imag", "imaginary part"),
    ("real", 1, "real", "real part"),
    ("agm", 2, "agm", "arithmetic-geometric mean"),
    ("atan2", 2, "atan2", "atan2(y,x): angle of the point (x,y)"),
    ("copySign", 2, "copy_sign", "copySign(x,y): |x| with the sign of y"),
    ("fmod", 2, "fmod", "fmod(x,y): remainder with the sign of x"),
    ("gcd", 2, "gcd", "greatest common divisor"),
    ("lcm", 2, "lcm", "least common multiple"),
    ("hypot", 2, "hypot", "hypot(x,y): sqrt(x^2 + y^2)"),
    ("scale", 2, "scale", "scale(x,n): x * 10^n"),
]


def _forward(primitive):
    def handler(functions, arguments):
        return getattr(functions, primitive)(*arguments)
    handler.__name__ = primitive
    return handler


for _name, _arity, _primitive, _doc in _FORWARDED:
    register(_name, _arity, doc=_doc)(_forward(_primitive))


@register("gamma", arity=(1, 3), doc="gamma(x); gamma(a,x): upper incomplete; gamma(a,x0,x1): generalized incomplete")
def gamma(functions, arguments):
    if len(arguments) == 1:
        return functions.gamma(arguments[0])
    if len(arguments) == 2:
        return functions.gamma_incomplete(arguments[0], arguments[1])
    return functions.gamma_generalized(arguments[0], arguments[1], arguments[2])


@register("log", arity=(1, 2), doc="log(x): natural logarithm; log(x,b): logarithm to base b")
def log(functions, arguments):
    if len(arguments) == 1:
        return functions.log(arguments[0])
    return functions.log_base(arguments[0], arguments[1])


@register("zeta", arity=(1, 2), doc="zeta(s): Riemann zeta; zeta(s,a): Hurwitz zeta")
def zeta(functions, arguments):
    if len(arguments) == 1:
        return functions.zeta(arguments[0])
    return functions.zeta_hurwitz(arguments[0], arguments[1])


@register("w", arity=(1, 2), doc="w(x): Lambert W, principal branch; w(x,k): branch k")
def w(functions, arguments):
    if len(arguments) == 1:
        return functions.w(arguments[0])
    return functions.w_branch(arguments[0], arguments[1])


@register("root", arity=(2, 3), doc="root(x,n): n-th root; root(x,n,k): k-th branch")
def root(functions, arguments):
    if len(arguments) == 2:
        return functions.root(arguments[0], arguments[1])
    return functions.root_branch(arguments[0], arguments[1], arguments[2])


@register("inverseRoot", arity=(2, 3), doc="inverseRoot(x,n): 1/root(x,n); inverseRoot(x,n,k): k-th branch")
def inverse_root(functions, arguments):
    if len(arguments) == 2:
        return functions.inverse_root(arguments[0], arguments[1])
    return functions.inverse_root_branch(arguments[0], arguments[1], arguments[2])


@register("round", arity=2, doc="deprecated, use roundToPrecision")
def round_(functions, arguments):
    warnings.warn("round is deprecated, use roundToPrecision", DeprecationWarning, stacklevel=2)
    return functions.round_to_precision(arguments[0], arguments[1])


@register("precision", arity=2, key="n", doc="n(x,p): x with p digits of precision")
def precision(functions, arguments):
    return functions.precision(arguments[0], arguments[1])
