import mpmath
import numpy as np
import pytest

from dualnum import Dual, Precision
from dualnum import special as dns


def central_difference(fun, x, h=1e-5):
    return (fun(x + h) - fun(x - h)) / (2 * h)


@pytest.mark.parametrize("nu", [0, 1, 2, 3, 1.5])
@pytest.mark.parametrize(
    "fun, x",
    [
        (dns.cyl_bessel_j, 2.5),
        (dns.cyl_neumann, 2.5),
        (dns.cyl_bessel_i, 1.5),
        (dns.cyl_bessel_k, 1.5),
    ],
)
def test_recurrence(fun, x, nu):
    y = fun(nu, Dual(x, 1.0))
    assert y.a == pytest.approx(fun(nu, x), rel=1e-15)
    assert y.b == pytest.approx(central_difference(lambda t: fun(nu, t), x), rel=1e-6)

    z = fun(nu, Dual(x, -2.0))
    assert z.b == pytest.approx(-2.0 * y.b)


def test_order_zero():
    x = 1.5
    j = dns.cyl_bessel_j(0, Dual(x, 1.0))
    assert j.b == pytest.approx(-float(mpmath.besselj(1, x)))

    i = dns.cyl_bessel_i(0, Dual(x, 1.0))
    assert i.b == pytest.approx(float(mpmath.besseli(1, x)))

    k = dns.cyl_bessel_k(0, Dual(x, 1.0))
    assert k.b == pytest.approx(-float(mpmath.besselk(1, x)))


@pytest.mark.parametrize("nu", [0, 1, 2])
def test_hankel(nu):
    x = Dual(2.0, 1.0)
    j = dns.cyl_bessel_j(nu, x)
    y = dns.cyl_neumann(nu, x)

    h1 = dns.cyl_hankel_1(nu, x)
    assert h1.a == pytest.approx(complex(j.a, y.a))
    assert h1.b == pytest.approx(complex(j.b, y.b))

    h2 = dns.cyl_hankel_2(nu, x)
    assert h2.a == pytest.approx(complex(j.a, -y.a))
    assert h2.b == pytest.approx(complex(j.b, -y.b))

    assert dns.cyl_hankel_1(nu, 2.0) == pytest.approx(complex(mpmath.hankel1(nu, 2.0)))


def test_plain_scalar():
    assert dns.cyl_bessel_j(0, 1.0) == pytest.approx(0.7651976865579666)
    assert isinstance(dns.cyl_bessel_j(0, 1.0), np.float64)


def test_precision():
    x = 2.5
    r = dns.cyl_bessel_j(1, Dual(np.float32(x), np.float32(1.0)))
    s = dns.cyl_bessel_j(1, Dual(x, 1.0))
    e = dns.cyl_bessel_j(1, Dual(x, 1.0), Precision.EXTENDED)
    assert isinstance(r.a, np.float32)
    assert isinstance(r.b, np.float32)
    assert isinstance(s.a, np.float64)
    assert isinstance(e.a, np.longdouble)
    assert float(r.a) == pytest.approx(float(s.a), rel=1e-6)
    assert float(e.a) == pytest.approx(float(s.a), rel=1e-15)
    assert float(e.b) == pytest.approx(float(s.b), rel=1e-15)

    u = dns.cyl_bessel_j(1, Dual(x, 1.0), Precision.REDUCED)
    assert isinstance(u.a, np.float32)
    assert isinstance(u.b, np.float32)
    assert float(u.b) == pytest.approx(float(s.b), rel=1e-6)

    t = dns.cyl_bessel_j(1, x, Precision.REDUCED)
    assert isinstance(t, np.float32)
    assert Precision.infer(np.float32(1.0)) is Precision.REDUCED
    assert Precision.infer(1.0) is Precision.STANDARD


@pytest.mark.parametrize(
    "fun",
    [dns.cyl_bessel_j, dns.cyl_neumann, dns.cyl_bessel_i, dns.cyl_bessel_k],
)
@pytest.mark.parametrize("x", [np.nan, np.inf, -np.inf])
def test_non_finite(fun, x):
    y = fun(0, Dual(x, 1.0))
    assert np.isnan(y.a)
    assert np.isnan(y.b)
    assert np.isnan(fun(1, x))

    y = fun(0, Dual(mpmath.mpf(x), mpmath.mpf(1)))
    assert mpmath.isnan(y.a)


def test_propagation():
    x = Dual(1.0, 1.0) / Dual(0.0, 1.0)
    y = dns.cyl_bessel_j(0, x)
    assert np.isnan(y.a)
    assert np.isnan(dns.cyl_hankel_1(0, x).a)


def test_mpmath():
    x = Dual(mpmath.mpf("1.5"), mpmath.mpf(1))
    y = dns.cyl_bessel_i(1, x)
    assert isinstance(y.a, mpmath.mpf)
    expected = (mpmath.besseli(0, 1.5) + mpmath.besseli(2, 1.5)) / 2
    assert float(y.b) == pytest.approx(float(expected))
