# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for a solve.

Files produced (when Tracker is used):
  - selection.csv  (chosen items in catalog order; written by write_selection_csv)
  - summary.csv    (method, budget and totals; written by write_summary_csv)

Callers decide when to invoke these writers; the orchestrator calls both
after a solve when a tracker is passed in.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass
from typing import Union

from armory.planning.solution import Solution


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def write_selection_csv(self, solution: Solution, filename: str = "selection.csv") -> str:
        """
        Persist the selected items to CSV.

        Columns:
          order_index, description, cost, benefit
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "description", "cost", "benefit"])
            for idx, it in enumerate(solution.items):
                w.writerow([idx, it.description, it.cost, float(it.benefit)])
        return path

    def write_summary_csv(
        self,
        solution: Solution,
        budget: Union[int, float],
        method: str,
        filename: str = "summary.csv",
    ) -> str:
        """
        Persist run-level totals as a single CSV row.

        Columns:
          method, budget, item_count, total_cost, total_benefit
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["method", "budget", "item_count", "total_cost", "total_benefit"])
            w.writerow([method, budget, len(solution), solution.total_cost, solution.total_benefit])
        return path
