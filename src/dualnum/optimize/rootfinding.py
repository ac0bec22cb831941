import dataclasses
from collections.abc import Callable
from typing import Literal

import numpy as np

from dualnum.context import errstate
from dualnum.dual import Dual
from dualnum.logger import dualnum_logger


@dataclasses.dataclass(frozen=True, slots=True)
class NewtonResult[T]:
    """Output of :func:`newton`.

    Attributes
    ----------
    status : Literal["FAILURE", "SUCCESS"]
    root
        Last iterate. If `status` is ``"SUCCESS"``, this is the approximate root.
    iterations : int
        Number of evaluations of the function.
    message : str
        Report from the solver. Typically a reason for a failure.
    """

    status: Literal["FAILURE", "SUCCESS"]
    root: T
    iterations: int
    message: str


def newton[T](
    fun: Callable[[Dual[T]], Dual[T]],
    x0: T | float | int,
    tol: float = 1e-15,
    max_iter: int = 100,
) -> NewtonResult[T]:
    r"""Find a root of the univariate scalar-valued function by Newton's method.

    Each step evaluates `fun` once on ``Dual.variable(x)``, which yields both
    :math:`f(x_n)` and :math:`f'(x_n)`, and sets
    :math:`x_{n+1}=x_n-f(x_n)/f'(x_n)`.

    Parameters
    ----------
    fun : Callable
        Function to find a root of.
    x0
        Initial guess.
    tol : float, default=1e-15
        Absolute tolerance. The iteration stops when :math:`|x_{n+1}-x_n|<` `tol`.
    max_iter : int, default=100
        Maximum number of iterations.

    Returns
    -------
    NewtonResult

    Raises
    ------
    TypeError
        If `fun` does not return a dual number.

    Warnings
    --------
    `fun` must be built from arithmetic operations and functions of
    :mod:`dualnum.function` or :mod:`dualnum.special`.

    Examples
    --------
    >>> r = newton(lambda x: x**2 - 10, 10.0)
    >>> r.status
    'SUCCESS'
    >>> print(format(r.root, ".14f"))
    3.16227766016838
    """
    if max_iter <= 0:
        raise ValueError("max_iter must be positive")

    if tol < 0:
        raise ValueError("tol must be nonnegative")

    x = Dual.constant(x0).a

    for i in range(1, max_iter + 1):
        y = fun(Dual.variable(x))

        if not isinstance(y, Dual):
            raise TypeError("fun must return Dual")

        with errstate():
            step = y.a / y.b

        if not np.isfinite(complex(step)):
            message = f"step is not finite at x={x!r}"
            dualnum_logger.warning("newton stopped after %d iterations: %s", i, message)
            return NewtonResult("FAILURE", x, i, message)

        x = x - step
        dualnum_logger.debug("newton iteration %d: x=%r, step=%r", i, x, step)

        if abs(step) < tol:
            return NewtonResult("SUCCESS", x, i, "converged")

    message = f"maximum number of iterations ({max_iter}) reached"
    dualnum_logger.warning("newton stopped: %s", message)
    return NewtonResult("FAILURE", x, max_iter, message)
