import math

import mpmath
import numpy as np
import pytest

from dualnum import Dual, deriv
from dualnum import function as dnf


def central_difference(fun, x, h=1e-6):
    return (fun(x + h) - fun(x - h)) / (2 * h)


@pytest.mark.parametrize(
    "fun, x",
    [
        (dnf.sqrt, 2.0),
        (dnf.cbrt, -3.0),
        (dnf.sin, 0.7),
        (dnf.cos, 0.7),
        (dnf.tan, 0.4),
        (dnf.asin, 0.3),
        (dnf.acos, 0.3),
        (dnf.atan, 1.7),
        (dnf.sinh, 0.9),
        (dnf.cosh, 0.9),
        (dnf.tanh, 0.5),
        (dnf.asinh, 1.3),
        (dnf.acosh, 2.1),
        (dnf.atanh, 0.4),
        (dnf.exp, 1.1),
        (dnf.exp2, 1.1),
        (dnf.expm1, 1e-3),
        (dnf.log, 2.5),
        (dnf.log1p, 0.2),
        (dnf.log10, 2.5),
        (dnf.log2, 2.5),
    ],
)
def test_chain_rule(fun, x):
    y = fun(Dual(x, 1.0))
    assert y.a == pytest.approx(fun(x), rel=1e-15)
    assert y.b == pytest.approx(central_difference(fun, x), rel=1e-6)

    z = fun(Dual(x, 2.5))
    assert z.b == pytest.approx(2.5 * y.b)


def test_known_derivatives():
    assert dnf.sin(Dual(0.0, 1.0)) == Dual(0.0, 1.0)
    assert dnf.exp(Dual(0.0, 1.0)) == Dual(1.0, 1.0)
    assert dnf.log(Dual(1.0, 1.0)) == Dual(0.0, 1.0)
    assert dnf.sqrt(Dual(4.0, 1.0)) == Dual(2.0, 0.25)
    assert dnf.exp2(Dual(1.0, 1.0)).b == pytest.approx(2 * math.log(2))
    assert dnf.log10(Dual(10.0, 1.0)).b == pytest.approx(1 / (10 * math.log(10)))


def test_plain_scalars():
    assert isinstance(dnf.sin(1.0), np.float64)
    assert dnf.sqrt(4) == 2.0
    assert dnf.pow(2, 3) == 8.0


def test_domain():
    assert np.isnan(dnf.asin(Dual(2.0, 1.0)).a)
    assert np.isnan(dnf.sqrt(Dual(-1.0, 1.0)).a)
    assert np.isinf(dnf.log(Dual(0.0, 1.0)).a)


def test_atan2():
    y, x = Dual(0.7, 1.0), Dual(-1.3, 0.5)
    z = dnf.atan2(y, x)
    assert z.a == pytest.approx(math.atan2(0.7, -1.3))
    assert z.b == pytest.approx((-1.3 * 1.0 - 0.7 * 0.5) / (1.3**2 + 0.7**2))

    z = dnf.atan2(0.7, Dual(-1.3, 1.0))
    assert z.b == pytest.approx(-0.7 / (1.3**2 + 0.7**2))


def test_pow():
    assert dnf.pow(Dual(2.0, 1.0), 3) == Dual(8.0, 12.0)
    assert Dual(2.0, 1.0) ** 3 == Dual(8.0, 12.0)

    z = dnf.pow(2.0, Dual(3.0, 1.0))
    assert z.a == pytest.approx(8.0)
    assert z.b == pytest.approx(8.0 * math.log(2.0))
    assert 2.0 ** Dual(3.0, 1.0) == z

    z = dnf.pow(Dual(2.0, 1.0), Dual(3.0, 1.0))
    assert z.b == pytest.approx(12.0 + 8.0 * math.log(2.0))

    z = Dual(2.0, 1.0) ** 0.5
    assert z.b == pytest.approx(0.5 / math.sqrt(2.0))


def test_composition():
    x = Dual(0.8, 1.0)
    y = dnf.exp(dnf.sin(x)) / (1 + x * x)

    def fun(t):
        return math.exp(math.sin(t)) / (1 + t * t)

    assert y.b == pytest.approx(central_difference(fun, 0.8), rel=1e-6)


def test_mpmath():
    x = Dual(mpmath.mpf(1), mpmath.mpf(1))
    y = dnf.sin(x)
    assert isinstance(y.a, mpmath.mpf)
    assert float(y.b) == pytest.approx(math.cos(1.0))

    y = dnf.log2(x + 1)
    assert float(y.b) == pytest.approx(1 / (2 * math.log(2)))

    y = dnf.log(Dual(mpmath.mpf(0), mpmath.mpf(1)))
    assert y.a == -mpmath.inf
    assert y.b == mpmath.inf


def test_deriv():
    df = deriv(lambda x: x**2 + dnf.sqrt(x + 3))
    assert df(1.2) == pytest.approx(2.64398, 1e-5)
    assert deriv(lambda x: 5.0)(1.2) == 0.0
