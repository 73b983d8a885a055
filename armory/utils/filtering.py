# -*- coding: utf-8 -*-
"""
Catalog filter: trim an item list to a benefit range and a bounded size.

Mostly used to keep the exhaustive solver's input small.
"""

from __future__ import annotations
from typing import List, Sequence

from armory.business_objects.errors import InvalidArgumentError
from armory.business_objects.items import Item


def filter_items(
    source: Sequence[Item],
    min_benefit: float,
    max_benefit: float,
    total_size: int,
) -> List[Item]:
    """
    Return the first `total_size` items with positive benefit in (min_benefit, max_benefit].

    Order is preserved and items are shared, not copied.
    """
    if total_size < 0:
        raise InvalidArgumentError(f"total_size must be >= 0, got {total_size}.")

    kept: List[Item] = []
    for it in source:
        if len(kept) >= total_size:
            break
        if it.benefit > 0 and min_benefit < it.benefit <= max_benefit:
            kept.append(it)
    return kept
