import functools
from collections.abc import Callable
from typing import Any

from dualnum.context import errstate
from dualnum.dual import Dual


def deriv[T, **P](fun: Callable[P, T]) -> Callable[P, T]:
    """Return a function that evaluates the derivative of the univariate scalar-valued
    function.

    Parameters
    ----------
    fun : Callable
        Differentiated function.

    Returns
    -------
    Callable
        Derivative of `fun`.

    Warnings
    --------
    `fun` must be built from arithmetic operations and functions of
    :mod:`dualnum.function` or :mod:`dualnum.special`. If `fun` returns a value
    independent of its argument, the derivative is zero.

    Examples
    --------
    >>> from dualnum import function as dnf
    >>> f = lambda x: x**2 + dnf.sqrt(x + 3)
    >>> df = deriv(f)
    >>> print(format(df(1.2), ".6g"))
    2.64398
    """

    def result(x, /, *args, **kwargs):
        tmp: Any = fun(Dual.variable(x), *args, **kwargs)  # type: ignore

        if not isinstance(tmp, Dual):
            return Dual.constant(x).b

        return tmp.b

    return result  # type: ignore


def _defderiv[**P](
    fun: Callable[P, Any], deriv: Callable[P, Any], *, argnum: int = 0
) -> None:
    if "_dualnum_is_primitive" not in fun.__dict__:
        raise ValueError

    fun.__dict__["_dualnum_derivs"][argnum] = deriv


def _primitive[T, **P](fun: Callable[P, T]) -> Callable[P, T]:
    derivs: dict[int, Callable] = {}

    @functools.wraps(fun)
    def wrapper(*args, **kwargs):
        if not any(isinstance(x, Dual) for x in args):
            with errstate():
                return fun(*args, **kwargs)

        args_real = [x.a if isinstance(x, Dual) else x for x in args]

        with errstate():
            value = fun(*args_real, **kwargs)
            imag = None

            # partial derivatives of all dual arguments are summed
            for argnum, arg in enumerate(args):
                if not isinstance(arg, Dual):
                    continue

                tmp = derivs[argnum](*args_real, **kwargs) * arg.b
                imag = tmp if imag is None else imag + tmp

        return Dual(value, imag)

    wrapper.__dict__["_dualnum_is_primitive"] = True
    wrapper.__dict__["_dualnum_derivs"] = derivs
    return wrapper  # type: ignore
