# -*- coding: utf-8 -*-
"""
Exhaustive 0/1 knapsack solver, used as a correctness oracle on small inputs.

Every mask in [0, 2**n) is a candidate: item j is in the subset iff bit j is
set. A feasible candidate replaces the best only on strict improvement, so
the lowest mask reaching the optimum wins ties. The empty subset (mask 0)
is the default.
"""

from __future__ import annotations
import logging
from typing import List, Sequence, Union

from armory.business_objects.errors import CapacityExceededError
from armory.business_objects.items import Item
from armory.planning.solution import Solution, sum_items
from armory.planning.solvers._checks import check_budget, check_items

logger = logging.getLogger(__name__)

# Masks are limited to 64-bit words.
MAX_EXHAUSTIVE_ITEMS = 64


def subset_for_mask(items: Sequence[Item], mask: int) -> List[Item]:
    """Items whose index bit is set in `mask`, in catalog order."""
    return [it for j, it in enumerate(items) if mask & (1 << j)]


def solve_exhaustive(items: Sequence[Item], budget: Union[int, float]) -> Solution:
    """
    Return the best feasible subset among all 2**n subsets of `items`.

    Raises
    ------
    CapacityExceededError
        If len(items) >= MAX_EXHAUSTIVE_ITEMS.
    InvalidArgumentError
        If budget is negative or an item cost is not a positive int.
    """
    n = len(items)
    if n >= MAX_EXHAUSTIVE_ITEMS:
        raise CapacityExceededError(
            f"exhaustive search supports fewer than {MAX_EXHAUSTIVE_ITEMS} items, got {n}."
        )
    check_budget(budget, integral=False)
    check_items(items)

    best: List[Item] = []
    best_benefit = 0.0
    best_mask = 0

    for mask in range(1 << n):
        candidate = subset_for_mask(items, mask)
        cost, benefit = sum_items(candidate)
        if cost <= budget and benefit > best_benefit:
            best = candidate
            best_benefit = benefit
            best_mask = mask

    logger.debug(
        "exhaustive: n=%d masks=%d best_mask=%d benefit=%s",
        n, 1 << n, best_mask, best_benefit,
    )
    return Solution(items=tuple(best))
