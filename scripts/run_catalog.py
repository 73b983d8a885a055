#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load a caret-delimited catalog, solve it with one solver, and export CSV artifacts.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_catalog.py
"""

from __future__ import annotations
import logging
import os
from typing import List

# ====== CONFIGURATION ======
CATALOG_PATH = "data/catalog.txt"
OUT_DIR = "reports/catalog"

# "dynamic" or "exhaustive"
METHOD = "dynamic"
BUDGET = 100

# Catalog filter (None = no bound)
MIN_BENEFIT = None
MAX_BENEFIT = None
MAX_ITEMS = None

LOG_LEVEL = "INFO"
# ============================

from armory.business_objects.items import Item
from armory.planning import Policy, Solution
from armory.planning.orchestrator import solve
from armory.planning.tracker import Tracker
from armory.utils.read_catalog import read_catalog_text
from armory.utils.report import print_solution


def main() -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL))

    items: List[Item] = read_catalog_text(CATALOG_PATH)

    policy = Policy(
        method=METHOD,
        budget=BUDGET,
        min_benefit=MIN_BENEFIT,
        max_benefit=MAX_BENEFIT,
        max_items=MAX_ITEMS,
    )
    tracker = Tracker(out_dir=OUT_DIR)

    solution: Solution = solve(items, policy, tracker=tracker)

    print(f"\n=== {METHOD} solve: {len(items)} items, budget {BUDGET} gold ===")
    print_solution(solution)

    print(f"\nArtifacts written to: {os.path.abspath(OUT_DIR)}")
    print("  selection.csv, summary.csv")


if __name__ == "__main__":
    main()
