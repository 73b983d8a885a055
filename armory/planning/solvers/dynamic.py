# -*- coding: utf-8 -*-
"""
Exact 0/1 knapsack solver (dynamic programming).

Public entry point:
    solve_dynamic(items, budget) -> Solution

Table layout:
    table[i][j] = best benefit using the first i items with at most j gold.
    Row 0 and column 0 are zero; values are non-decreasing along both axes.

Recurrence (i = 1..n, j = 0..B):
    cost_i > j : table[i][j] = table[i-1][j]
    otherwise  : table[i][j] = max(table[i-1][j], table[i-1][j - cost_i] + benefit_i)

Ties go to exclusion: item i is taken only when including it is strictly
better. The decision is stored in a parallel `take` table, so the back-trace
reads recorded decisions instead of comparing float cells.

Time and space are O(n * B).
"""

from __future__ import annotations
import logging
from typing import List, Sequence, Tuple

from armory.business_objects.items import Item
from armory.planning.solution import Solution
from armory.planning.solvers._checks import check_budget, check_items

logger = logging.getLogger(__name__)

Table = List[List[float]]
TakeTable = List[List[bool]]


def build_table(items: Sequence[Item], budget: int) -> Tuple[Table, TakeTable]:
    """
    Fill the (n+1) x (budget+1) benefit table and its take/skip decisions.

    Returns
    -------
    (table, take)
        take[i][j] is True iff item i-1 (0-based) is included at cell (i, j).
    """
    n = len(items)
    table: Table = [[0.0] * (budget + 1) for _ in range(n + 1)]
    take: TakeTable = [[False] * (budget + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        it = items[i - 1]
        above = table[i - 1]
        row = table[i]
        take_row = take[i]
        for j in range(budget + 1):
            if it.cost > j:
                row[j] = above[j]
                continue
            include = above[j - it.cost] + it.benefit
            if include > above[j]:
                row[j] = include
                take_row[j] = True
            else:
                row[j] = above[j]

    return table, take


def backtrace(items: Sequence[Item], take: TakeTable, budget: int) -> List[Item]:
    """
    Walk the decisions from (n, budget) back to row 0 and collect the taken items.

    The result is in catalog order.
    """
    chosen: List[Item] = []
    j = budget
    for i in range(len(items), 0, -1):
        if take[i][j]:
            it = items[i - 1]
            chosen.append(it)
            j -= it.cost
    chosen.reverse()
    return chosen


def optimal_benefit(items: Sequence[Item], budget: int) -> float:
    """Best achievable benefit within budget (value only, no reconstruction)."""
    check_budget(budget, integral=True)
    check_items(items)
    table, _ = build_table(items, budget)
    return table[len(items)][budget]


def solve_dynamic(items: Sequence[Item], budget: int) -> Solution:
    """
    Compute one optimal subset of `items` within an integral `budget`.

    Raises
    ------
    InvalidArgumentError
        If budget is negative or not an int, or an item cost is not a positive int.
    """
    check_budget(budget, integral=True)
    check_items(items)

    table, take = build_table(items, budget)
    chosen = backtrace(items, take, budget)

    logger.debug(
        "dynamic: n=%d budget=%d optimum=%s chosen=%d",
        len(items), budget, table[len(items)][budget], len(chosen),
    )
    return Solution(items=tuple(chosen))
