"""Contains the logger of :mod:`dualnum` modules.

``dualnum`` uses the `Logging <https://docs.python.org/3/library/logging.html>`__
standard library and does not configure any handler. Messages are grouped in two
levels:

* ``DEBUG``: progress of iterative solvers and registration of adapters.
* ``WARNING``: a solver gave up before reaching the requested tolerance.

Calling applications can configure ``dualnum.logger.dualnum_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""

import logging

logger_name = "dualnum"
dualnum_logger = logging.getLogger(logger_name)
