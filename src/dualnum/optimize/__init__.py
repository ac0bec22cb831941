"""
######################################
Root finding (:mod:`dualnum.optimize`)
######################################

.. currentmodule:: dualnum.optimize

This module provides root finders driven by dual numbers.

.. autosummary::
    :toctree: generated/

    newton
    NewtonResult

"""

from .rootfinding import NewtonResult, newton

__all__ = ["NewtonResult", "newton"]
