"""
################################################
Mathematical functions (:mod:`dualnum.function`)
################################################

.. currentmodule:: dualnum.function

This module provides elementary functions that propagate derivatives.

Every function accepts plain scalars as well as dual numbers. A plain scalar yields a
plain scalar, evaluated by numpy for builtin and numpy scalars and by mpmath for mpmath
numbers. A dual number ``Dual(a, b)`` yields ``Dual(g(a), g'(a) * b)``. Arguments
outside the domain of a function produce NaN, unless a strict context is active (see
:mod:`dualnum.context`).

Constant functions
==================

.. autosummary::
    :toctree: generated/

    ln2
    ln10

Power, exponents, and logarithmic functions
===========================================

.. autosummary::
    :toctree: generated/

    cbrt
    exp
    exp2
    expm1
    log
    log1p
    log10
    log2
    pow
    sqrt

Trigonometric functions
=======================

.. autosummary::
    :toctree: generated/

    acos
    asin
    atan
    atan2
    cos
    sin
    tan

Hyperbolic functions
====================

.. autosummary::
    :toctree: generated/

    acosh
    asinh
    atanh
    cosh
    sinh
    tanh

"""

import numbers
from collections.abc import Callable
from typing import Any, overload

import mpmath
import mpmath.ctx_mp_python
import numpy as np

from dualnum.autodiff import _defderiv, _primitive
from dualnum.context import divide
from dualnum.dual import Dual

_mpnumeric = mpmath.ctx_mp_python.mpnumeric


def _apply(x, ufunc: np.ufunc, mpfun: Callable):
    match x:
        case _mpnumeric():
            return mpfun(x)

        case numbers.Number() | np.number():
            return ufunc(x)

        case _:
            raise TypeError


@overload
def ln2[T: Dual](x: T, /) -> T: ...


@overload
def ln2(x: float | int, /) -> np.float64: ...


@overload
def ln2(x: Any, /) -> Any: ...


@_primitive
def ln2(x, /):
    """Natural logarithm of 2 in the precision of `x`.

    Examples
    --------
    >>> print(format(ln2(1.0), ".6f"))
    0.693147
    """
    match x:
        case _mpnumeric():
            return +mpmath.ln2

        case np.floating() | np.complexfloating():
            return np.log(type(x)(2))

        case float() | int() | complex():
            return np.log(2.0)

        case _:
            raise TypeError


@overload
def ln10[T: Dual](x: T, /) -> T: ...


@overload
def ln10(x: float | int, /) -> np.float64: ...


@overload
def ln10(x: Any, /) -> Any: ...


@_primitive
def ln10(x, /):
    """Natural logarithm of 10 in the precision of `x`.

    Examples
    --------
    >>> print(format(ln10(1.0), ".6f"))
    2.302585
    """
    match x:
        case _mpnumeric():
            return +mpmath.ln10

        case np.floating() | np.complexfloating():
            return np.log(type(x)(10))

        case float() | int() | complex():
            return np.log(10.0)

        case _:
            raise TypeError


@overload
def sqrt[T: Dual](x: T, /) -> T: ...


@overload
def sqrt(x: float | int, /) -> np.float64: ...


@overload
def sqrt(x: Any, /) -> Any: ...


@_primitive
def sqrt(x, /):
    """Square root.

    Examples
    --------
    >>> y = sqrt(Dual(4.0, 1.0))
    >>> print(y)
    2.0 + 0.25e
    """
    return _apply(x, np.sqrt, mpmath.sqrt)


@overload
def cbrt[T: Dual](x: T, /) -> T: ...


@overload
def cbrt(x: float | int, /) -> np.float64: ...


@overload
def cbrt(x: Any, /) -> Any: ...


@_primitive
def cbrt(x, /):
    """Cube root.

    Unlike ``pow(x, 1 / 3)``, negative real arguments give negative real results.
    """
    return _apply(x, np.cbrt, mpmath.cbrt)


@overload
def exp[T: Dual](x: T, /) -> T: ...


@overload
def exp(x: float | int, /) -> np.float64: ...


@overload
def exp(x: Any, /) -> Any: ...


@_primitive
def exp(x, /):
    """Exponential.

    Examples
    --------
    >>> print(format(exp(2), ".6f"))
    7.389056
    """
    return _apply(x, np.exp, mpmath.exp)


@overload
def exp2[T: Dual](x: T, /) -> T: ...


@overload
def exp2(x: float | int, /) -> np.float64: ...


@overload
def exp2(x: Any, /) -> Any: ...


@_primitive
def exp2(x, /):
    """2 raised to the power `x`."""
    return _apply(x, np.exp2, lambda x: mpmath.power(2, x))


@overload
def expm1[T: Dual](x: T, /) -> T: ...


@overload
def expm1(x: float | int, /) -> np.float64: ...


@overload
def expm1(x: Any, /) -> Any: ...


@_primitive
def expm1(x, /):
    """``exp(x) - 1``, accurate for small `x`."""
    return _apply(x, np.expm1, mpmath.expm1)


@overload
def log[T: Dual](x: T, /) -> T: ...


@overload
def log(x: float | int, /) -> np.float64: ...


@overload
def log(x: Any, /) -> Any: ...


@_primitive
def log(x, /):
    """Natural logarithm.

    Examples
    --------
    >>> print(format(log(5), ".6f"))
    1.609438
    """
    return _apply(x, np.log, mpmath.log)


@overload
def log1p[T: Dual](x: T, /) -> T: ...


@overload
def log1p(x: float | int, /) -> np.float64: ...


@overload
def log1p(x: Any, /) -> Any: ...


@_primitive
def log1p(x, /):
    """``log(1 + x)``, accurate for small `x`."""
    return _apply(x, np.log1p, mpmath.log1p)


@overload
def log10[T: Dual](x: T, /) -> T: ...


@overload
def log10(x: float | int, /) -> np.float64: ...


@overload
def log10(x: Any, /) -> Any: ...


@_primitive
def log10(x, /):
    """Common logarithm."""
    return _apply(x, np.log10, mpmath.log10)


@overload
def log2[T: Dual](x: T, /) -> T: ...


@overload
def log2(x: float | int, /) -> np.float64: ...


@overload
def log2(x: Any, /) -> Any: ...


@_primitive
def log2(x, /):
    """Binary logarithm."""
    return _apply(x, np.log2, lambda x: mpmath.log(x, 2))


@overload
def pow[T: Dual](x: T | float | int, y: T, /) -> T: ...


@overload
def pow[T: Dual](x: T, y: float | int, /) -> T: ...


@overload
def pow(x: float | int, y: float | int, /) -> np.float64: ...


@overload
def pow(x: Any, y: Any, /) -> Any: ...


@_primitive
def pow(x, y, /):
    """`x` raised to the power `y`.

    Either argument may be a dual number. If only `x` is dual, the derivative is
    ``y * x.a**(y - 1) * x.b``; if only `y` is dual, it is ``x**y.a * log(x) * y.b``;
    if both are, the two contributions are summed.

    Examples
    --------
    >>> print(pow(Dual(2.0, 1.0), 3))
    8.0 + 12.0e
    >>> print(format(pow(3.25, 1.25), ".6f"))
    4.363693
    """
    match x, y:
        case (_mpnumeric(), _) | (_, _mpnumeric()):
            return mpmath.power(x, y)

        case (numbers.Number() | np.number(), numbers.Number() | np.number()):
            if isinstance(x, int) and isinstance(y, int):
                x = float(x)

            return np.power(x, y)

        case _:
            raise TypeError


@overload
def sin[T: Dual](x: T, /) -> T: ...


@overload
def sin(x: float | int, /) -> np.float64: ...


@overload
def sin(x: Any, /) -> Any: ...


@_primitive
def sin(x, /):
    """Sine."""
    return _apply(x, np.sin, mpmath.sin)


@overload
def cos[T: Dual](x: T, /) -> T: ...


@overload
def cos(x: float | int, /) -> np.float64: ...


@overload
def cos(x: Any, /) -> Any: ...


@_primitive
def cos(x, /):
    """Cosine."""
    return _apply(x, np.cos, mpmath.cos)


@overload
def tan[T: Dual](x: T, /) -> T: ...


@overload
def tan(x: float | int, /) -> np.float64: ...


@overload
def tan(x: Any, /) -> Any: ...


@_primitive
def tan(x, /):
    """Tangent."""
    return _apply(x, np.tan, mpmath.tan)


@overload
def asin[T: Dual](x: T, /) -> T: ...


@overload
def asin(x: float | int, /) -> np.float64: ...


@overload
def asin(x: Any, /) -> Any: ...


@_primitive
def asin(x, /):
    """Inverse sine.

    Real arguments outside :math:`[-1,1]` give NaN.
    """
    return _apply(x, np.arcsin, mpmath.asin)


@overload
def acos[T: Dual](x: T, /) -> T: ...


@overload
def acos(x: float | int, /) -> np.float64: ...


@overload
def acos(x: Any, /) -> Any: ...


@_primitive
def acos(x, /):
    """Inverse cosine.

    Real arguments outside :math:`[-1,1]` give NaN.
    """
    return _apply(x, np.arccos, mpmath.acos)


@overload
def atan[T: Dual](x: T, /) -> T: ...


@overload
def atan(x: float | int, /) -> np.float64: ...


@overload
def atan(x: Any, /) -> Any: ...


@_primitive
def atan(x, /):
    """Inverse tangent."""
    return _apply(x, np.arctan, mpmath.atan)


@overload
def atan2[T: Dual](y: T | float | int, x: T, /) -> T: ...


@overload
def atan2[T: Dual](y: T, x: float | int, /) -> T: ...


@overload
def atan2(y: float | int, x: float | int, /) -> np.float64: ...


@overload
def atan2(y: Any, x: Any, /) -> Any: ...


@_primitive
def atan2(y, x, /):
    """Angle of the point ``(x, y)``, measured from the positive x-axis.

    Examples
    --------
    >>> z = atan2(Dual(1.0, 1.0), Dual(1.0, 0.0))
    >>> print(format(z, ".6f"))
    0.785398 + 0.500000e
    """
    match y, x:
        case (_mpnumeric(), _) | (_, _mpnumeric()):
            return mpmath.atan2(y, x)

        case (numbers.Number() | np.number(), numbers.Number() | np.number()):
            return np.arctan2(y, x)

        case _:
            raise TypeError


@overload
def sinh[T: Dual](x: T, /) -> T: ...


@overload
def sinh(x: float | int, /) -> np.float64: ...


@overload
def sinh(x: Any, /) -> Any: ...


@_primitive
def sinh(x, /):
    """Hyperbolic sine."""
    return _apply(x, np.sinh, mpmath.sinh)


@overload
def cosh[T: Dual](x: T, /) -> T: ...


@overload
def cosh(x: float | int, /) -> np.float64: ...


@overload
def cosh(x: Any, /) -> Any: ...


@_primitive
def cosh(x, /):
    """Hyperbolic cosine."""
    return _apply(x, np.cosh, mpmath.cosh)


@overload
def tanh[T: Dual](x: T, /) -> T: ...


@overload
def tanh(x: float | int, /) -> np.float64: ...


@overload
def tanh(x: Any, /) -> Any: ...


@_primitive
def tanh(x, /):
    """Hyperbolic tangent."""
    return _apply(x, np.tanh, mpmath.tanh)


@overload
def asinh[T: Dual](x: T, /) -> T: ...


@overload
def asinh(x: float | int, /) -> np.float64: ...


@overload
def asinh(x: Any, /) -> Any: ...


@_primitive
def asinh(x, /):
    """Inverse hyperbolic sine."""
    return _apply(x, np.arcsinh, mpmath.asinh)


@overload
def acosh[T: Dual](x: T, /) -> T: ...


@overload
def acosh(x: float | int, /) -> np.float64: ...


@overload
def acosh(x: Any, /) -> Any: ...


@_primitive
def acosh(x, /):
    """Inverse hyperbolic cosine.

    Real arguments less than 1 give NaN.
    """
    return _apply(x, np.arccosh, mpmath.acosh)


@overload
def atanh[T: Dual](x: T, /) -> T: ...


@overload
def atanh(x: float | int, /) -> np.float64: ...


@overload
def atanh(x: Any, /) -> Any: ...


@_primitive
def atanh(x, /):
    """Inverse hyperbolic tangent."""
    return _apply(x, np.arctanh, mpmath.atanh)


_defderiv(ln2, lambda x: x * 0)
_defderiv(ln10, lambda x: x * 0)
_defderiv(sqrt, lambda x: divide(1, 2 * sqrt(x)))
_defderiv(cbrt, lambda x: divide(1, 3 * cbrt(x) ** 2))
_defderiv(exp, exp)
_defderiv(exp2, lambda x: exp2(x) * ln2(x))
_defderiv(expm1, exp)
_defderiv(log, lambda x: divide(1, x))
_defderiv(log1p, lambda x: divide(1, 1 + x))
_defderiv(log10, lambda x: divide(1, x * ln10(x)))
_defderiv(log2, lambda x: divide(1, x * ln2(x)))
_defderiv(pow, lambda x, y: y * pow(x, y - 1), argnum=0)
_defderiv(pow, lambda x, y: pow(x, y) * log(x), argnum=1)
_defderiv(sin, cos)
_defderiv(cos, lambda x: -sin(x))
_defderiv(tan, lambda x: divide(1, cos(x) ** 2))
_defderiv(asin, lambda x: divide(1, sqrt(1 - x * x)))
_defderiv(acos, lambda x: divide(-1, sqrt(1 - x * x)))
_defderiv(atan, lambda x: divide(1, 1 + x * x))
_defderiv(atan2, lambda y, x: divide(x, x * x + y * y), argnum=0)
_defderiv(atan2, lambda y, x: divide(-y, x * x + y * y), argnum=1)
_defderiv(sinh, cosh)
_defderiv(cosh, sinh)
_defderiv(tanh, lambda x: divide(1, cosh(x) ** 2))
_defderiv(asinh, lambda x: divide(1, sqrt(1 + x * x)))
_defderiv(acosh, lambda x: divide(1, sqrt(x * x - 1)))
_defderiv(atanh, lambda x: divide(1, 1 - x * x))
