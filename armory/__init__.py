# -*- coding: utf-8 -*-
"""
armory: choose the catalog items that maximise total benefit within a gold budget.

Quick use:
    from armory import Item, solve_dynamic
    best = solve_dynamic([Item("helmet", 10, 5.0)], budget=10)
"""

from armory.business_objects import (
    Item,
    SchemaError,
    StateValidationError,
    InvalidArgumentError,
    CapacityExceededError,
)
from armory.planning import Policy, Solution, sum_items
from armory.planning.solvers import solve_dynamic, solve_exhaustive, MAX_EXHAUSTIVE_ITEMS
from armory.planning.orchestrator import solve, compare_solvers, SolverComparison
from armory.planning.tracker import Tracker

__all__ = [
    "Item",
    "SchemaError",
    "StateValidationError",
    "InvalidArgumentError",
    "CapacityExceededError",
    "Policy",
    "Solution",
    "sum_items",
    "solve_dynamic",
    "solve_exhaustive",
    "MAX_EXHAUSTIVE_ITEMS",
    "solve",
    "compare_solvers",
    "SolverComparison",
    "Tracker",
]
