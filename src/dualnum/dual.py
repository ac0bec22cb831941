import numbers
from typing import Any, Self

import mpmath
import mpmath.ctx_mp_python
import numpy as np

from dualnum import adapter
from dualnum.context import divide, guarded
from dualnum.typing import Scalar

_mpnumeric = mpmath.ctx_mp_python.mpnumeric


def _is_acceptable(value: object) -> bool:
    return isinstance(value, numbers.Number | np.number | _mpnumeric)


def _zero_like(value):
    return type(value)(0)


def _one_like(value):
    return type(value)(1)


def _coerce(value):
    match value:
        case bool():
            raise TypeError("bool is not a valid component")

        case int() | float():
            return np.float64(value)

        case complex():
            return np.complex128(value)

        case Dual():
            raise TypeError("nesting Dual is forbidden")

        case _:
            return value


def _promote(scalar, component):
    # a plain scalar operand is coerced like the value component of Dual(scalar, 0)
    if isinstance(component, np.generic):
        return _coerce(scalar)

    return scalar


def _is_complex(value) -> bool:
    return isinstance(value, complex | np.complexfloating | mpmath.mpc)


class Dual[T: Scalar](Scalar):
    r"""Dual number.

    Parameters
    ----------
    a : T, default=0
        Value component.
    b : T, optional
        Derivative component (the default is zero of the type of `a`).

    Attributes
    ----------
    a : T
    b : T

    Notes
    -----
    Instances of this class behave like elements of the ring
    :math:`T[\varepsilon]/(\varepsilon^2)`. The instance ``Dual(a, b)`` represents
    :math:`a+b\varepsilon`, which is the first-order Taylor expansion of a function at a
    point; `a` is the value and `b` is the derivative.

    Components of type :class:`int` or :class:`float` are stored as
    :class:`numpy.float64` (and :class:`complex` as :class:`numpy.complex128`), so
    that division by zero yields infinities or NaNs as IEEE 754 prescribes. Other
    numpy scalars and mpmath numbers are stored as they are. In mixed arithmetic a
    plain scalar ``s`` is promoted exactly as ``Dual(s, 0)`` would be, so a
    :class:`numpy.float32` dual combined with a builtin :class:`float` gives
    :class:`numpy.float64` components.

    Equality and ordering compare ``(a, b)`` lexicographically without tolerance. The
    ordering has no meaning beyond that; it only allows dual numbers to be sorted or
    deduplicated.

    Instances are immutable. There is no implicit conversion to `T`; use
    :func:`value_of` to discard the derivative explicitly.

    Examples
    --------
    >>> x = Dual.variable(1.0)
    >>> y = 4 * x**3 + 3 * x**2 + 2 * x + 1
    >>> print(y)
    10.0 + 20.0e
    """

    __slots__ = ("_a", "_b")
    _a: T
    _b: T

    def __init__(self, a: T | int | float = 0, b: T | int | float | None = None):
        self._a = _coerce(a)
        self._b = _zero_like(self._a) if b is None else _coerce(b)

    @classmethod
    def zero(cls) -> Self:
        """Return the additive identity :math:`0+0\\varepsilon`."""
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Self:
        """Return the multiplicative identity :math:`1+0\\varepsilon`."""
        return cls(1.0, 0.0)

    @classmethod
    def constant(cls, value: T | int | float) -> Self:
        """Return ``Dual(value, 0)``, i.e. a quantity independent of the variable."""
        return cls(value, _zero_like(_coerce(value)))

    @classmethod
    def infinitesimal(cls, value: T | int | float) -> Self:
        """Return ``Dual(0, value)``, i.e. a pure infinitesimal."""
        return cls(_zero_like(_coerce(value)), value)

    @classmethod
    def variable(cls, value: T | int | float) -> Self:
        """Return ``Dual(value, 1)``, the seed for differentiation w.r.t. `value`.

        Examples
        --------
        >>> x = Dual.variable(3.0)
        >>> (x * x).b
        np.float64(6.0)
        """
        return cls(value, _one_like(_coerce(value)))

    @classmethod
    def convert(cls, obj: Any) -> Self:
        """Create a dual number from an instance of a registered foreign type.

        Raises
        ------
        TypeError
            If no adapter is registered for the type of `obj`.

        See Also
        --------
        dualnum.adapter.register

        Examples
        --------
        >>> Dual.convert(complex(2.0, 1.0))
        Dual(np.float64(2.0), np.float64(1.0))
        """
        fun = adapter.lookup(type(obj))
        return cls(fun.value(obj), fun.deriv(obj))

    @property
    def a(self) -> T:
        """Value component."""
        return self._a

    @property
    def b(self) -> T:
        """Derivative component."""
        return self._b

    @guarded
    def inverted(self) -> Self:
        r"""Return the multiplicative inverse :math:`1/a-(b/a^2)\varepsilon`.

        The value component must be nonzero; otherwise the result contains infinities
        or NaNs (or :class:`dualnum.context.DomainError` is raised in a strict
        context).
        """
        imag = divide(-self._b, self._a * self._a)
        return self.__class__(divide(_one_like(self._a), self._a), imag)

    def conjugated(self) -> Self:
        r"""Return the conjugate :math:`a-b\varepsilon`."""
        return self.__class__(self._a, -self._b)

    def incremented(self) -> Self:
        """Return ``Dual(a + 1, b)``; the derivative is left unchanged."""
        return self.__class__(self._a + 1, self._b)

    def decremented(self) -> Self:
        """Return ``Dual(a - 1, b)``; the derivative is left unchanged."""
        return self.__class__(self._a - 1, self._b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._a!r}, {self._b!r})"

    def __str__(self) -> str:
        return f"{self._a} + {self._b}e"

    def __format__(self, format_spec: str) -> str:
        return f"{format(self._a, format_spec)} + {format(self._b, format_spec)}e"

    def __hash__(self) -> int:
        return hash((self._a, self._b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dual):
            return NotImplemented

        return bool(self._a == other._a and self._b == other._b)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Dual):
            return NotImplemented

        return not self.__eq__(other)

    def __lt__(self, rhs: Self) -> bool:
        if not isinstance(rhs, Dual):
            return NotImplemented

        return bool((self._a, self._b) < (rhs._a, rhs._b))

    def __le__(self, rhs: Self) -> bool:
        if not isinstance(rhs, Dual):
            return NotImplemented

        return bool((self._a, self._b) <= (rhs._a, rhs._b))

    def __gt__(self, rhs: Self) -> bool:
        if not isinstance(rhs, Dual):
            return NotImplemented

        return bool((self._a, self._b) > (rhs._a, rhs._b))

    def __ge__(self, rhs: Self) -> bool:
        if not isinstance(rhs, Dual):
            return NotImplemented

        return bool((self._a, self._b) >= (rhs._a, rhs._b))

    @guarded
    def __add__(self, rhs: Self | T | int | float) -> Self:
        if isinstance(rhs, Dual):
            return self.__class__(self._a + rhs._a, self._b + rhs._b)

        if not _is_acceptable(rhs):
            return NotImplemented

        return self.__class__(self._a + _promote(rhs, self._a), self._b)

    @guarded
    def __sub__(self, rhs: Self | T | int | float) -> Self:
        if isinstance(rhs, Dual):
            return self.__class__(self._a - rhs._a, self._b - rhs._b)

        if not _is_acceptable(rhs):
            return NotImplemented

        return self.__class__(self._a - _promote(rhs, self._a), self._b)

    @guarded
    def __mul__(self, rhs: Self | T | int | float) -> Self:
        if isinstance(rhs, Dual):
            # (a + b eps)(c + d eps) = ac + (ad + bc) eps
            imag = self._a * rhs._b + self._b * rhs._a
            return self.__class__(self._a * rhs._a, imag)

        if not _is_acceptable(rhs):
            return NotImplemented

        rhs = _promote(rhs, self._a)
        return self.__class__(self._a * rhs, self._b * rhs)

    @guarded
    def __truediv__(self, rhs: Self | T | int | float) -> Self:
        if isinstance(rhs, Dual):
            # (a + b eps)/(c + d eps) = a/c + (bc - ad)/c^2 eps
            imag = divide(self._b * rhs._a - self._a * rhs._b, rhs._a * rhs._a)
            return self.__class__(divide(self._a, rhs._a), imag)

        if not _is_acceptable(rhs):
            return NotImplemented

        rhs = _promote(rhs, self._a)
        return self.__class__(divide(self._a, rhs), divide(self._b, rhs))

    def __pow__(self, rhs: Self | T | int | float) -> Self:
        if not isinstance(rhs, Dual) and not _is_acceptable(rhs):
            return NotImplemented

        from dualnum import function

        return function.pow(self, rhs)

    @guarded
    def __neg__(self) -> Self:
        return self.__class__(-self._a, -self._b)

    def __pos__(self) -> Self:
        return self.__class__(self._a, self._b)

    @guarded
    def __abs__(self) -> Self:
        """Return ``(|a|, sign(a) * b)``.

        Raises
        ------
        TypeError
            If the value component is complex.
        """
        if _is_complex(self._a):
            raise TypeError("abs of a complex dual number is not defined")

        if self._a < 0:
            return self.__class__(-self._a, -self._b)

        return self.__class__(self._a, self._b)

    @guarded
    def __radd__(self, lhs: T | int | float) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return self.__class__(_promote(lhs, self._a) + self._a, self._b)

    @guarded
    def __rsub__(self, lhs: T | int | float) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return self.__class__(_promote(lhs, self._a) - self._a, -self._b)

    @guarded
    def __rmul__(self, lhs: T | int | float) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        lhs = _promote(lhs, self._a)
        return self.__class__(lhs * self._a, lhs * self._b)

    @guarded
    def __rtruediv__(self, lhs: T | int | float) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        lhs = _promote(lhs, self._a)
        imag = divide(-lhs * self._b, self._a * self._a)
        return self.__class__(divide(lhs, self._a), imag)

    def __rpow__(self, lhs: T | int | float) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        from dualnum import function

        return function.pow(lhs, self)


class _IdentityAdapter:
    __slots__ = ()

    def value(self, obj: Dual, /):
        return obj.a

    def deriv(self, obj: Dual, /):
        return obj.b

    def __repr__(self):
        return f"{type(self).__name__}()"


adapter.register(Dual, _IdentityAdapter())


def value_of[T](x: Dual[T] | T) -> T:
    """Return the value component of `x`, discarding the derivative.

    Plain scalars are returned unchanged.

    Examples
    --------
    >>> value_of(Dual(2.0, 5.0))
    np.float64(2.0)
    >>> value_of(2.0)
    2.0
    """
    if isinstance(x, Dual):
        return x.a

    return x


def inverted[T](x: Dual[T]) -> Dual[T]:
    """Return the multiplicative inverse of `x`.

    See Also
    --------
    Dual.inverted
    """
    if not isinstance(x, Dual):
        raise TypeError

    return x.inverted()


def conjugated[T](x: Dual[T]) -> Dual[T]:
    """Return the conjugate of `x`.

    See Also
    --------
    Dual.conjugated
    """
    if not isinstance(x, Dual):
        raise TypeError

    return x.conjugated()
