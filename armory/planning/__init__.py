# -*- coding: utf-8 -*-
"""
Planning layer public API.

This module exposes the planning-time data contracts:
  - Solution model (and the sum_items helper)
  - Policy configuration

Solvers, the orchestrator and the tracker are intentionally not exported
here; import them explicitly (or use the top-level `armory` package).
"""

from .policy import Policy
from .solution import Solution, sum_items

__all__ = [
    "Policy",
    "Solution",
    "sum_items",
]
