r"""
####################################################
Conversion from foreign types (:mod:`dualnum.adapter`)
####################################################

.. currentmodule:: dualnum.adapter

This module maintains the registry consulted by :meth:`dualnum.Dual.convert`.

An adapter exposes two pure accessors that extract the value component and the
derivative component from an instance of a foreign two-component type. Adapters are
registered explicitly per type; :func:`lookup` walks the method resolution order of the
queried type and returns the first registered adapter.

Built-in adapters map the real part of :class:`complex`,
:class:`numpy.complexfloating` and :class:`mpmath.mpc` to the value component and the
imaginary part to the derivative component. This is a convenience mapping only: complex
numbers satisfy :math:`i^2=-1`, whereas the infinitesimal of a dual number satisfies
:math:`\varepsilon^2=0`, so the arithmetic of the two types differs.

.. autosummary::
    :toctree: generated/

    DualAdapter
    ComplexAdapter
    lookup
    register
    unregister

"""

from typing import Any, Protocol

import mpmath
import numpy as np

from dualnum.logger import dualnum_logger


class DualAdapter[T](Protocol):
    """Protocol for adapters of foreign two-component numeric types."""

    def value(self, obj: T, /) -> Any:
        """Return the component mapped to the value component."""
        ...

    def deriv(self, obj: T, /) -> Any:
        """Return the component mapped to the derivative component."""
        ...


class ComplexAdapter:
    """Adapter mapping ``real`` to the value and ``imag`` to the derivative."""

    __slots__ = ()

    def value(self, obj, /):
        return obj.real

    def deriv(self, obj, /):
        return obj.imag

    def __repr__(self):
        return f"{type(self).__name__}()"


_registry: dict[type, DualAdapter] = {}


def register(cls: type, adapter: DualAdapter) -> None:
    """Register `adapter` for instances of `cls` and its subclasses.

    A previously registered adapter for the same type is replaced.
    """
    if not isinstance(cls, type):
        raise TypeError

    if not all(callable(getattr(adapter, x, None)) for x in ("value", "deriv")):
        raise TypeError("adapter must provide value and deriv")

    _registry[cls] = adapter
    dualnum_logger.debug("registered %r for %s", adapter, cls.__qualname__)


def unregister(cls: type) -> None:
    """Remove the adapter registered for `cls`.

    Raises
    ------
    KeyError
        If no adapter is registered for `cls` itself.
    """
    del _registry[cls]
    dualnum_logger.debug("unregistered adapter for %s", cls.__qualname__)


def lookup(cls: type) -> DualAdapter:
    """Return the adapter applicable to instances of `cls`.

    Raises
    ------
    TypeError
        If neither `cls` nor any of its bases is registered.
    """
    for base in cls.__mro__:
        if (adapter := _registry.get(base)) is not None:
            return adapter

    raise TypeError(f"no adapter registered for {cls.__qualname__}")


register(complex, ComplexAdapter())
register(np.complexfloating, ComplexAdapter())
register(mpmath.mpc, ComplexAdapter())
