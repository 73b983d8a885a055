#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cross-check the dynamic solver against exhaustive search on growing catalog prefixes.

For each size n in SIZES, the catalog is filtered to its first n items with
benefit in (MIN_BENEFIT, MAX_BENEFIT], both solvers run with BUDGET, and the
optimum and timings are printed.

Usage:
  python scripts/compare_solvers.py
"""

from __future__ import annotations
import logging
from typing import List

# ====== CONFIGURATION ======
CATALOG_PATH = "data/catalog.txt"
BUDGET = 100

MIN_BENEFIT = 0.0
MAX_BENEFIT = 1000.0
SIZES = [1, 2, 4, 6, 8, 10]

LOG_LEVEL = "WARNING"
# ===========================

from armory.business_objects.items import Item
from armory.planning.orchestrator import compare_solvers
from armory.utils.filtering import filter_items
from armory.utils.read_catalog import read_catalog_text


def main() -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL))

    catalog: List[Item] = read_catalog_text(CATALOG_PATH)

    print(f"\n=== Dynamic vs exhaustive (budget {BUDGET} gold) ===")
    print(f"{'n':>4} {'dynamic':>10} {'exhaustive':>11} {'dyn s':>10} {'exh s':>10}  agree")
    for n in SIZES:
        items = filter_items(catalog, MIN_BENEFIT, MAX_BENEFIT, n)
        cmp = compare_solvers(items, BUDGET)
        print(
            f"{len(items):>4} {cmp.dynamic.total_benefit:>10.2f} {cmp.exhaustive.total_benefit:>11.2f} "
            f"{cmp.dynamic_seconds:>10.6f} {cmp.exhaustive_seconds:>10.6f}  {cmp.agrees}"
        )


if __name__ == "__main__":
    main()
