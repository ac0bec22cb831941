r"""
##############################################
Special functions (:mod:`dualnum.special`)
##############################################

.. currentmodule:: dualnum.special

This module provides cylindrical Bessel functions that propagate derivatives.

No elementary closed form exists for the derivative of a cylinder function, so the
derivative with respect to the argument is obtained from the recurrence relations of
each family. For :math:`Z\in\{J,Y,H^{(1)},H^{(2)}\}`,

.. math::

    Z_0'(x) = -Z_1(x), \qquad Z_\nu'(x) = \frac{Z_{\nu-1}(x) - Z_{\nu+1}(x)}{2},

and for the modified functions :math:`I`,

.. math::

    I_0'(x) = I_1(x), \qquad I_\nu'(x) = \frac{I_{\nu-1}(x) + I_{\nu+1}(x)}{2},

while :math:`K` satisfies the same relations with the opposite sign.

The scalar functions are evaluated by mpmath. For builtin and numpy arguments the
evaluation runs at the number of bits given by :class:`Precision`, and the result is
rounded into the corresponding numpy type. mpmath arguments are evaluated at the
working precision of mpmath and returned as mpmath numbers. Infinite or NaN arguments
give NaN, since mpmath does not evaluate the functions there.

Bessel functions
================

.. autosummary::
    :toctree: generated/

    cyl_bessel_j
    cyl_neumann
    cyl_hankel_1
    cyl_hankel_2

Modified Bessel functions
=========================

.. autosummary::
    :toctree: generated/

    cyl_bessel_i
    cyl_bessel_k

Miscellaneous
=============

.. autosummary::
    :toctree: generated/

    Precision

"""

import enum
from collections.abc import Callable
from typing import Any

import mpmath
import mpmath.ctx_mp_python
import numpy as np

from dualnum.context import DomainError, errstate, getcontext
from dualnum.dual import Dual

_mpnumeric = mpmath.ctx_mp_python.mpnumeric


class Precision(enum.Enum):
    """Precision of the scalar evaluator.

    Attributes
    ----------
    REDUCED
        :class:`numpy.float32`, 24 bits.
    STANDARD
        :class:`numpy.float64`, 53 bits.
    EXTENDED
        :class:`numpy.longdouble`, 64 bits.
    """

    REDUCED = (np.float32, np.complex64, 24)
    STANDARD = (np.float64, np.complex128, 53)
    EXTENDED = (np.longdouble, np.clongdouble, 64)

    def __init__(self, dtype, ctype, bits):
        self.dtype = dtype
        self.ctype = ctype
        self.bits = bits

    def __repr__(self):
        return f"<{self.__class__.__name__}.{self.name}>"

    @classmethod
    def infer(cls, value: Any) -> "Precision":
        """Return the precision matching the numpy type of `value`.

        Builtin numbers and unknown types map to :attr:`STANDARD`.
        """
        for precision in cls:
            if isinstance(value, (precision.dtype, precision.ctype)):
                return precision

        return cls.STANDARD

    def cast(self, value: Any) -> Any:
        """Convert the builtin or numpy scalar `value` to the numpy type."""
        if np.iscomplexobj(value):
            return self.ctype(value)

        return self.dtype(value)

    def tompmath(self, value: Any) -> Any:
        """Convert `value` to an mpmath number at the working precision."""
        match value:
            case _mpnumeric():
                return value

            case np.complexfloating() | complex():
                real, imag = self.tompmath(value.real), self.tompmath(value.imag)
                return mpmath.mpc(real, imag)

            case np.floating() if np.isfinite(value):
                p, q = value.as_integer_ratio()
                return mpmath.mpf(p) / q

            case int() | float():
                return mpmath.mpf(value)

            case _:
                return mpmath.mpf(float(value))

    def frommpmath(self, value: Any) -> Any:
        """Round the mpmath number `value` into the numpy type of the precision."""
        if isinstance(value, mpmath.mpc):
            if value.imag == 0:
                return self.frommpmath(value.real)

            real = self.ctype(self.frommpmath(value.real))
            imag = self.ctype(self.frommpmath(value.imag))
            return real + imag * self.ctype(1j)

        if not mpmath.isfinite(value):
            return self.dtype(float(value))

        return self.dtype(mpmath.nstr(value, self.bits // 3 + 2))


type _Evaluator = Callable[[Any, Any], Any]


def _evaluator(fun: Callable, precision: Precision) -> _Evaluator:
    def result(nu, x):
        if isinstance(x, _mpnumeric):
            if not mpmath.isfinite(x):
                return mpmath.nan

            return fun(nu, x)

        # mpmath cannot evaluate cylinder functions at infinities or NaNs
        if not np.isfinite(x):
            nan = complex(np.nan, np.nan) if np.iscomplexobj(x) else np.nan
            return precision.cast(nan)

        with mpmath.workprec(precision.bits):
            tmp = fun(nu, precision.tompmath(x))

        return precision.frommpmath(tmp)

    return result


def _check(value):
    if getcontext().strict and np.isnan(complex(value)):
        raise DomainError("invalid value encountered in special function")

    return value


def _calculate_with_recurrence(
    nu, x: Dual, bessel: _Evaluator, precision: Precision, *, modified: bool
) -> Dual:
    a, b = x.a, x.b

    if not isinstance(a, _mpnumeric):
        b = precision.cast(b)

    with errstate():
        value = _check(bessel(nu, a))

        if nu == 0:
            slope = bessel(1, a) if modified else -bessel(1, a)
        elif modified:
            slope = (bessel(nu - 1, a) + bessel(nu + 1, a)) / 2
        else:
            slope = (bessel(nu - 1, a) - bessel(nu + 1, a)) / 2

        return Dual(value, _check(slope) * b)


def _resolve(x: Any, precision: Precision | None) -> Precision:
    if precision is not None:
        return precision

    return Precision.infer(x.a if isinstance(x, Dual) else x)


def _evaluate(
    fun: Callable, nu, x, precision: Precision | None, *, modified: bool
) -> Any:
    precision = _resolve(x, precision)
    bessel = _evaluator(fun, precision)

    if not isinstance(x, Dual):
        with errstate():
            return _check(bessel(nu, x))

    return _calculate_with_recurrence(nu, x, bessel, precision, modified=modified)


def cyl_bessel_j(nu, x, precision: Precision | None = None):
    r"""Bessel function of the first kind :math:`J_\nu(x)`.

    Parameters
    ----------
    nu
        Order.
    x : Dual | float | int
        Argument.
    precision : Precision, optional
        Precision of the evaluation (the default is inferred from the type of the
        value component of `x`).

    Returns
    -------
    Dual | scalar
        If `x` is dual, ``Dual(J(nu, x.a), J'(nu, x.a) * x.b)``.

    Examples
    --------
    >>> from dualnum import Dual
    >>> y = cyl_bessel_j(0, Dual(1.0, 1.0))
    >>> print(format(y, ".6f"))
    0.765198 + -0.440051e
    """
    return _evaluate(mpmath.besselj, nu, x, precision, modified=False)


def cyl_neumann(nu, x, precision: Precision | None = None):
    r"""Bessel function of the second kind (Neumann function) :math:`Y_\nu(x)`.

    See Also
    --------
    cyl_bessel_j
    """
    return _evaluate(mpmath.bessely, nu, x, precision, modified=False)


def cyl_bessel_i(nu, x, precision: Precision | None = None):
    r"""Modified Bessel function of the first kind :math:`I_\nu(x)`.

    See Also
    --------
    cyl_bessel_j
    """
    return _evaluate(mpmath.besseli, nu, x, precision, modified=True)


def cyl_bessel_k(nu, x, precision: Precision | None = None):
    r"""Modified Bessel function of the second kind :math:`K_\nu(x)`.

    The derivative is the negation of the one given by the recurrence of :math:`I`,
    i.e. :math:`K_0'=-K_1` and :math:`K_\nu'=-(K_{\nu-1}+K_{\nu+1})/2`.

    See Also
    --------
    cyl_bessel_i
    """
    result = _evaluate(mpmath.besselk, nu, x, precision, modified=True)

    if not isinstance(result, Dual):
        return result

    return Dual(result.a, -result.b)


def cyl_hankel_1(nu, x, precision: Precision | None = None):
    r"""Hankel function of the first kind :math:`H^{(1)}_\nu(x)=J_\nu(x)+iY_\nu(x)`.

    Both the value and the derivative are composed from those of :func:`cyl_bessel_j`
    and :func:`cyl_neumann`.
    """
    j = cyl_bessel_j(nu, x, precision)
    y = cyl_neumann(nu, x, precision)

    if not isinstance(j, Dual):
        return j + y * 1j

    return Dual(j.a + y.a * 1j, j.b + y.b * 1j)


def cyl_hankel_2(nu, x, precision: Precision | None = None):
    r"""Hankel function of the second kind :math:`H^{(2)}_\nu(x)=J_\nu(x)-iY_\nu(x)`.

    See Also
    --------
    cyl_hankel_1
    """
    j = cyl_bessel_j(nu, x, precision)
    y = cyl_neumann(nu, x, precision)

    if not isinstance(j, Dual):
        return j - y * 1j

    return Dual(j.a - y.a * 1j, j.b - y.b * 1j)
