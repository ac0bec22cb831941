import logging
import math

import pytest

from dualnum import cyl_bessel_j
from dualnum.optimize import newton


def test_newton():
    r = newton(lambda x: x**2 - 10, 10.0)
    assert r.status == "SUCCESS"
    assert r.iterations < 10
    assert r.root == pytest.approx(3.16227766016838, abs=1e-14)


def test_newton_bessel():
    r = newton(lambda x: cyl_bessel_j(0, x), 2.0, tol=1e-12)
    assert r.status == "SUCCESS"
    assert r.root == pytest.approx(2.404825557695773, abs=1e-12)


def test_newton_failure(caplog):
    with caplog.at_level(logging.WARNING, logger="dualnum"):
        r = newton(lambda x: x**2 + 1, 0.5, max_iter=20)

    assert r.status == "FAILURE"
    assert r.iterations == 20
    assert "maximum number of iterations" in caplog.text

    r = newton(lambda x: x**2 - 1, 0.0)
    assert r.status == "FAILURE"
    assert r.iterations == 1
    assert r.root == 0.0


def test_newton_arguments():
    with pytest.raises(ValueError):
        newton(lambda x: x - 1, 0.0, max_iter=0)

    with pytest.raises(ValueError):
        newton(lambda x: x - 1, 0.0, tol=-1.0)

    with pytest.raises(TypeError):
        newton(lambda x: math.pi, 0.0)
