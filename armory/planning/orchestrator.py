# -*- coding: utf-8 -*-
"""
Solve orchestrator.

Thin wrapper that connects Policy -> (optional) catalog filter -> solver,
and optionally writes CSV artifacts via planning.Tracker.

- Filters the catalog only when Policy sets a filter knob
- Dispatches on Policy.method through the SOLVERS registry
- compare_solvers() runs both solvers on the same input and times them
"""

from __future__ import annotations
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Union

from armory.business_objects.items import Item
from armory.planning.policy import Policy
from armory.planning.solution import Solution
from armory.planning.solvers import solve_dynamic, solve_exhaustive
from armory.planning.tracker import Tracker
from armory.utils.filtering import filter_items

logger = logging.getLogger(__name__)

SolverFn = Callable[[Sequence[Item], Union[int, float]], Solution]

SOLVERS: Dict[str, SolverFn] = {
    "dynamic": solve_dynamic,
    "exhaustive": solve_exhaustive,
}


def _apply_filter(items: Sequence[Item], policy: Policy) -> Sequence[Item]:
    if not policy.filters:
        return items
    return filter_items(
        items,
        min_benefit=policy.min_benefit if policy.min_benefit is not None else -math.inf,
        max_benefit=policy.max_benefit if policy.max_benefit is not None else math.inf,
        total_size=policy.max_items if policy.max_items is not None else len(items),
    )


def solve(
    items: Sequence[Item],
    policy: Policy,
    tracker: Optional[Tracker] = None,
) -> Solution:
    """
    Run the solver named by `policy.method` on (optionally filtered) `items`.

    Parameters
    ----------
    items : Sequence[Item]
        Catalog, in load order.
    policy : Policy
        Method, budget and filter knobs.
    tracker : Tracker | None
        If provided, writes selection.csv and summary.csv into tracker.out_dir.

    Returns
    -------
    Solution
        The selected subset.
    """
    candidates = _apply_filter(items, policy)
    if len(candidates) != len(items):
        logger.info("filter kept %d of %d items", len(candidates), len(items))

    solution = SOLVERS[policy.method](candidates, policy.budget)
    logger.info(
        "%s solve: items=%d budget=%s chosen=%d cost=%d benefit=%s",
        policy.method, len(candidates), policy.budget,
        len(solution), solution.total_cost, solution.total_benefit,
    )

    if tracker is not None:
        tracker.write_selection_csv(solution)
        tracker.write_summary_csv(solution, budget=policy.budget, method=policy.method)

    return solution


@dataclass(frozen=True)
class SolverComparison:
    """Both solvers' answers for one input, with wall-clock timings."""
    dynamic: Solution
    exhaustive: Solution
    dynamic_seconds: float
    exhaustive_seconds: float

    @property
    def agrees(self) -> bool:
        return math.isclose(
            self.dynamic.total_benefit, self.exhaustive.total_benefit,
            rel_tol=1e-9, abs_tol=1e-9,
        )


def compare_solvers(items: Sequence[Item], budget: int) -> SolverComparison:
    """Run both solvers on the same input and report whether their optima agree."""
    start = time.perf_counter()
    dyn = solve_dynamic(items, budget)
    dyn_elapsed = time.perf_counter() - start

    start = time.perf_counter()
    exh = solve_exhaustive(items, budget)
    exh_elapsed = time.perf_counter() - start

    result = SolverComparison(dyn, exh, dyn_elapsed, exh_elapsed)
    if not result.agrees:
        logger.warning(
            "solvers disagree: dynamic=%s exhaustive=%s",
            dyn.total_benefit, exh.total_benefit,
        )
    return result
