"""
###############################################
Evaluation context (:mod:`dualnum.context`)
###############################################

.. currentmodule:: dualnum.context

This module controls how domain violations are reported.

By default, dual numbers follow IEEE 754: division by a zero value component or
evaluating a function outside its domain silently produces an infinity or NaN, which
then propagates through subsequent arithmetic. Inside a strict context, the same
situations raise :class:`DomainError` instead.

Context
=======

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

Exceptions
==========

.. autosummary::
    :toctree: generated/

    DomainError

Arithmetic
==========

.. autosummary::
    :toctree: generated/

    divide

"""

import contextlib
import contextvars
import functools
from collections.abc import Callable, Iterator
from typing import Self

import mpmath
import mpmath.ctx_mp_python
import numpy as np

_mpnumeric = mpmath.ctx_mp_python.mpnumeric


class DomainError(ArithmeticError):
    """Raised in a strict context when an operation leaves the domain of definition.

    Parameters
    ----------
    message : str, default="domain error"
    """

    message: str

    def __init__(self, message="domain error", *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.message = message


class Context:
    """Create a new context.

    Parameters
    ----------
    strict : bool, default=False
        If `strict` is ``True``, division by zero and invalid operations raise
        :class:`DomainError` rather than producing infinities or NaNs.
    """

    __slots__ = ("_strict",)
    _strict: bool

    def __init__(self, strict: bool = False):
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def copy(self) -> Self:
        return self.__class__(self._strict)

    def __repr__(self):
        return f"{type(self).__name__}(strict={self._strict!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("dualnum")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    if not isinstance(ctx, Context):
        raise TypeError

    _var.set(ctx)


@contextlib.contextmanager
def localcontext(ctx: Context | None = None, *, strict: bool | None = None):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Examples
    --------
    >>> from dualnum import Dual
    >>> with localcontext(strict=True):
    ...     Dual(1.0, 1.0) / Dual(0.0, 1.0)
    Traceback (most recent call last):
        ...
    dualnum.context.DomainError: divide by zero encountered in scalar divide
    """
    if ctx is None:
        ctx = getcontext()

    if strict is None:
        strict = ctx._strict

    ctx = Context(strict)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)


@contextlib.contextmanager
def errstate() -> Iterator[None]:
    """Run the body under the floating-point error policy of the current context."""
    if not getcontext().strict:
        with np.errstate(divide="ignore", invalid="ignore"):
            yield

        return

    try:
        with np.errstate(divide="raise", invalid="raise"):
            yield
    except FloatingPointError as exc:
        raise DomainError(str(exc)) from exc
    except ZeroDivisionError as exc:
        raise DomainError(str(exc) or "division by zero") from exc


def guarded[**P, T](fun: Callable[P, T]) -> Callable[P, T]:
    """Decorator running `fun` inside :func:`errstate`."""

    @functools.wraps(fun)
    def wrapper(*args, **kwargs):
        with errstate():
            return fun(*args, **kwargs)

    return wrapper  # type: ignore


def divide(lhs, rhs):
    """Return ``lhs / rhs`` under the policy of the current context.

    numpy scalars follow the policy through :func:`errstate`, but mpmath raises
    :class:`ZeroDivisionError` for a zero divisor. In that case the quotient is an
    infinity with the sign of `lhs`, or NaN if `lhs` is zero or NaN.

    Raises
    ------
    DomainError
        If an mpmath number is divided by zero in a strict context.

    Examples
    --------
    >>> divide(mpmath.mpf(-2), 0)
    mpf('-inf')
    """
    if not isinstance(lhs, _mpnumeric) and not isinstance(rhs, _mpnumeric):
        return lhs / rhs

    if rhs != 0:
        return lhs / rhs

    if getcontext().strict:
        raise DomainError("division by zero")

    return mpmath.inf * mpmath.sign(lhs)
