# -*- coding: utf-8 -*-
"""
Knapsack solvers. Both take an ordered item list and a budget and return a Solution.
"""

from .dynamic import solve_dynamic
from .exhaustive import solve_exhaustive, MAX_EXHAUSTIVE_ITEMS

__all__ = ["solve_dynamic", "solve_exhaustive", "MAX_EXHAUSTIVE_ITEMS"]
