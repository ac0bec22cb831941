import dataclasses

import mpmath
import numpy as np
import pytest

from dualnum import Dual
from dualnum import adapter


@dataclasses.dataclass
class Jet1:
    value: float
    slope: float


class Jet1Adapter:
    def value(self, obj):
        return obj.value

    def deriv(self, obj):
        return obj.slope


def test_complex():
    assert Dual.convert(complex(2.0, 1.0)) == Dual(2.0, 1.0)
    assert Dual.convert(mpmath.mpc(2, 1)) == Dual(mpmath.mpf(2), mpmath.mpf(1))

    x = Dual.convert(np.complex64(2.0 + 1.0j))
    assert isinstance(x.a, np.float32)
    assert x == Dual(np.float32(2.0), np.float32(1.0))


def test_dual():
    x = Dual(1.0, 2.0)
    assert Dual.convert(x) == x


def test_register():
    with pytest.raises(TypeError):
        Dual.convert(Jet1(1.0, 2.0))

    adapter.register(Jet1, Jet1Adapter())

    try:
        assert Dual.convert(Jet1(1.0, 2.0)) == Dual(1.0, 2.0)
        assert isinstance(adapter.lookup(Jet1), Jet1Adapter)
    finally:
        adapter.unregister(Jet1)

    with pytest.raises(TypeError):
        adapter.lookup(Jet1)


def test_invalid_adapter():
    with pytest.raises(TypeError):
        adapter.register(Jet1, object())  # type: ignore

    with pytest.raises(TypeError):
        Dual.convert("1 + 2e")
