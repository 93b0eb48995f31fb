import threading
from fractions import Fraction

import mpmath
import numpy as np
import pytest

from mpcalc.calculator import Calculator
from mpcalc.config import CalculatorSettings
from mpcalc.errors import ArityMismatch, UnknownFunction
from mpcalc.functions.real_functions import RealFunctions
from mpcalc.registry import SIGNATURES


def close(a, b):
    return mpmath.almosteq(a, b, rel_eps=mpmath.mpf(10) ** -12)


def test_add_integers_is_exact(calc):
    out = calc.function("add", [1, 2])
    assert type(out) is int and out == 3


def test_add_reals_uses_real_addition(calc):
    out = calc.function("add", [mpmath.mpf("1.5"), mpmath.mpf("2.25")])
    assert isinstance(out, mpmath.mpf)
    assert out == mpmath.mpf("3.75")


def test_mixed_arguments_promote_to_widest(calc):
    out = calc.function("multiply", [Fraction(1, 2), mpmath.mpc(0, 2)])
    assert isinstance(out, mpmath.mpc)
    assert out == mpmath.mpc(0, 1)


def test_complex_result_with_zero_imaginary_is_promoted(calc):
    out = calc.function("multiply", [mpmath.mpc(0, 1), mpmath.mpc(0, 1)])
    assert isinstance(out, mpmath.mpf)
    assert out == -1


def test_division_of_integers_gives_rational(calc):
    assert calc.function("divide", [1, 3]) == Fraction(1, 3)
    assert calc.function("divide", [6, 3]) == 2


def test_builtin_and_numpy_inputs(calc):
    assert isinstance(calc.function("add", [0.5, np.float64(0.25)]), mpmath.mpf)
    assert calc.function("add", [np.int64(2), 3]) == 5


def test_unknown_function(calc):
    with pytest.raises(UnknownFunction, match="doesNotExist"):
        calc.function("doesNotExist", [])


@pytest.mark.parametrize("sig", [s for s in SIGNATURES if s.min_arguments == s.max_arguments], ids=lambda s: s.key)
def test_fixed_arity_functions_reject_other_counts(calc, sig):
    for n in {0, sig.min_arguments - 1, sig.min_arguments + 1} - {sig.min_arguments}:
        if n < 0:
            continue
        with pytest.raises(ArityMismatch, match=f"Function {sig.name} takes {sig.min_arguments} argument"):
            calc.function(sig.key, [1] * n)


def test_log_dispatches_on_argument_count(calc, monkeypatch):
    calls = []
    monkeypatch.setattr(RealFunctions, "log", lambda self, x: calls.append(("log", x)) or x)
    monkeypatch.setattr(RealFunctions, "log_base", lambda self, x, b: calls.append(("log_base", x, b)) or x)
    x, b = mpmath.mpf(8), mpmath.mpf(2)
    calc.function("log", [x])
    calc.function("log", [x, b])
    assert calls == [("log", x), ("log_base", x, b)]


def test_log_values(calc):
    assert close(calc.function("log", [mpmath.mpf(10)]), mpmath.log(10))
    assert close(calc.function("log", [8, 2]), 3)


def test_gamma_dispatches_on_argument_count(calc, monkeypatch):
    calls = []
    monkeypatch.setattr(RealFunctions, "gamma", lambda self, x: calls.append(1) or x)
    monkeypatch.setattr(RealFunctions, "gamma_incomplete", lambda self, a, x: calls.append(2) or x)
    monkeypatch.setattr(RealFunctions, "gamma_generalized", lambda self, a, x0, x1: calls.append(3) or x0)
    x = mpmath.mpf("0.5")
    calc.function("gamma", [x])
    calc.function("gamma", [x, x])
    calc.function("gamma", [x, x, x])
    assert calls == [1, 2, 3]
    with pytest.raises(ArityMismatch, match="1 to 3 arguments"):
        calc.function("gamma", [x, x, x, x])
    assert calls == [1, 2, 3]


def test_gamma_values(calc):
    assert calc.function("gamma", [5]) == 24
    assert close(calc.function("gamma", [mpmath.mpf("0.5")]), mpmath.sqrt(mpmath.pi))
    # upper incomplete gamma(1, x) = exp(-x)
    assert close(calc.function("gamma", [1, 2]), mpmath.exp(-2))
    # generalized gamma(1, 0, 1) = 1 - exp(-1)
    assert close(calc.function("gamma", [1, 0, 1]), 1 - mpmath.exp(-1))


@pytest.mark.parametrize("name,lo,hi", [
    ("log", 1, 2), ("gamma", 1, 3), ("zeta", 1, 2), ("w", 1, 2), ("root", 2, 3), ("inverseRoot", 2, 3),
])
def test_overloaded_windows(calc, name, lo, hi):
    for n in (lo - 1, hi + 1):
        with pytest.raises(ArityMismatch, match=f"{lo} to {hi} arguments"):
            calc.function(name, [2] * n)


def test_roots(calc):
    assert calc.function("root", [27, 3]) == 3
    assert calc.function("sqrt", [Fraction(9, 4)]) == Fraction(3, 2)
    assert close(calc.function("sqrt", [2]), mpmath.sqrt(2))
    assert calc.function("inverseRoot", [16, 4]) == Fraction(1, 2)
    # second cube root of 8 lies off the real axis
    z = calc.function("root", [8, 3, 1])
    assert isinstance(z, mpmath.mpc)
    assert close(z ** 3, 8)


def test_sqrt_of_negative_is_complex(calc):
    assert close(calc.function("sqrt", [-4]), mpmath.mpc(0, 2))


def test_zeta_and_w(calc):
    assert close(calc.function("zeta", [2]), mpmath.pi ** 2 / 6)
    assert close(calc.function("zeta", [2, 1]), mpmath.pi ** 2 / 6)
    w = calc.function("w", [1])
    assert close(w * mpmath.exp(w), 1)
    assert isinstance(calc.function("w", [1, -1]), mpmath.mpc)


def test_precision_is_called_n(calc):
    out = calc.function("n", [Fraction(1, 3), 5])
    assert isinstance(out, mpmath.mpf)
    assert abs(out - mpmath.mpf(1) / 3) < mpmath.mpf(10) ** -5
    with pytest.raises(UnknownFunction):
        calc.function("precision", [1, 5])


def test_n_evaluates_beyond_the_working_precision(calc):
    out = calc.function("n", [Fraction(1, 3), 100])
    with mpmath.workdps(110):
        assert abs(out - mpmath.mpf(1) / 3) < mpmath.mpf(10) ** -95


def test_cube_root_of_negative_integer_is_real(calc):
    assert calc.function("cbrt", [-8]) == -2
    assert calc.function("cbrt", [mpmath.mpf(-8)]) == -2
    assert calc.function("root", [Fraction(-1, 8), 3]) == Fraction(-1, 2)


def test_calculators_with_different_precisions_on_threads():
    wide = Calculator(CalculatorSettings(precision=50))
    narrow = Calculator(CalculatorSettings(precision=20))
    with mpmath.workdps(50):
        wide_expected = mpmath.sqrt(2)
    with mpmath.workdps(20):
        narrow_expected = mpmath.sqrt(2)
    dps = mpmath.mp.dps
    results = {wide: [], narrow: []}

    def work(c):
        for _ in range(200):
            results[c].append(c.function("sqrt", [2]))

    threads = [threading.Thread(target=work, args=(c,)) for c in (wide, narrow) * 4]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results[wide]) == len(results[narrow]) == 800
    assert all(r == wide_expected for r in results[wide])
    assert all(r == narrow_expected for r in results[narrow])
    assert mpmath.mp.dps == dps


def test_round_is_deprecated(calc):
    with pytest.deprecated_call():
        assert calc.function("round", [Fraction(12345, 1000), 3]) == Fraction(123, 10)


def test_constants_take_precision_in_digits(calc):
    pi50 = calc.function("pi", [50])
    with mpmath.workdps(50):
        assert pi50 == +mpmath.pi
    with pytest.raises(ValueError):
        calc.function("pi", [0])
    with pytest.raises(ValueError):
        calc.function("e", [Fraction(1, 2)])


def test_random_in_unit_interval(calc):
    r = calc.function("random", [20])
    assert 0 <= r < 1
    assert isinstance(calc.function("randomGaussian", [20]), mpmath.mpf)


def test_primitive_errors_propagate_unchanged(calc):
    with pytest.raises(ZeroDivisionError):
        calc.function("divide", [1, 0])
    with pytest.raises(ArithmeticError, match="not defined for complex"):
        calc.function("floor", [mpmath.mpc(1, 1)])


def test_working_precision_from_settings():
    low = Calculator(CalculatorSettings(precision=10))
    high = Calculator(CalculatorSettings(precision=60))
    a = low.function("sqrt", [2])
    b = high.function("sqrt", [2])
    assert a != b
    assert abs(a - b) < mpmath.mpf(10) ** -9


def test_set_function_and_fixed_function(calc):
    calc.set_function("square", calc.fixed_function("square", lambda fns, args: fns.multiply(args[0], args[0]), 1))
    assert calc.function("square", [Fraction(2, 3)]) == Fraction(4, 9)
    with pytest.raises(ArityMismatch, match="takes 1 argument, not 2"):
        calc.function("square", [1, 2])


def test_strict_settings_reach_resolver():
    calc = Calculator(CalculatorSettings(strict_resolution=True))
    assert calc.resolver.strict is True


def test_list_functions(calc):
    out = calc.list_functions()
    names = [f["name"] for f in out]
    assert names == sorted(names)
    assert len(out) == 75
    gamma = next(f for f in out if f["name"] == "gamma")
    assert gamma["arity"] == [1, 2, 3]
    n = next(f for f in out if f["name"] == "n")
    assert n["function"] == "precision"
