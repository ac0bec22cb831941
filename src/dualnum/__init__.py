from .autodiff import deriv
from .context import DomainError, getcontext, localcontext, setcontext
from .dual import Dual, conjugated, inverted, value_of
from .function import (
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atan2,
    atanh,
    cbrt,
    cos,
    cosh,
    exp,
    exp2,
    expm1,
    log,
    log1p,
    log2,
    log10,
    pow,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)
from .optimize import NewtonResult, newton
from .special import (
    Precision,
    cyl_bessel_i,
    cyl_bessel_j,
    cyl_bessel_k,
    cyl_hankel_1,
    cyl_hankel_2,
    cyl_neumann,
)

__all__ = [
    "deriv",
    "DomainError",
    "getcontext",
    "localcontext",
    "setcontext",
    "Dual",
    "conjugated",
    "inverted",
    "value_of",
    "acos",
    "acosh",
    "asin",
    "asinh",
    "atan",
    "atan2",
    "atanh",
    "cbrt",
    "cos",
    "cosh",
    "exp",
    "exp2",
    "expm1",
    "log",
    "log1p",
    "log2",
    "log10",
    "pow",
    "sin",
    "sinh",
    "sqrt",
    "tan",
    "tanh",
    "NewtonResult",
    "newton",
    "Precision",
    "cyl_bessel_i",
    "cyl_bessel_j",
    "cyl_bessel_k",
    "cyl_hankel_1",
    "cyl_hankel_2",
    "cyl_neumann",
]
