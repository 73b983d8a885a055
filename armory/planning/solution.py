# -*- coding: utf-8 -*-
"""
Solution model for knapsack planning results.

A Solution is the shape produced by both solvers and consumed by the
tracker/reporting layers. Totals are derived from the selected items,
never stored.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from armory.business_objects.items import Item


def sum_items(items: Iterable[Item]) -> Tuple[int, float]:
    """Return (total_cost, total_benefit) of the given items."""
    total_cost = 0
    total_benefit = 0.0
    for it in items:
        total_cost += it.cost
        total_benefit += it.benefit
    return total_cost, total_benefit


@dataclass(frozen=True)
class Solution:
    """
    Selected subset of a catalog.

    Attributes
    ----------
    items : tuple[Item, ...]
        References into the solver's input list, in catalog order.
    """
    items: Tuple[Item, ...] = ()

    @property
    def total_cost(self) -> int:
        return sum_items(self.items)[0]

    @property
    def total_benefit(self) -> float:
        return sum_items(self.items)[1]

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)
