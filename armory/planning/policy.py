# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for a knapsack run.

Solver:
  - method: {"dynamic", "exhaustive"}
  - budget: gold available; int for "dynamic", int or float for "exhaustive"

Catalog filter (applied only when at least one knob is set):
  - min_benefit: exclusive lower bound on item benefit
  - max_benefit: inclusive upper bound on item benefit
  - max_items:   keep only the first N matching items
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from armory.business_objects.errors import InvalidArgumentError

METHODS = ("dynamic", "exhaustive")


@dataclass(frozen=True)
class Policy:
    """
    Run knobs (pure data holder).

    Attributes
    ----------
    method : str
        Solver name: "dynamic" | "exhaustive".
    budget : int | float
        Maximum total cost of the selection.
    min_benefit : float | None
        Exclusive lower bound used by the catalog filter.
    max_benefit : float | None
        Inclusive upper bound used by the catalog filter.
    max_items : int | None
        Size cap used by the catalog filter.
    """
    method: str = "dynamic"
    budget: Union[int, float] = 0

    # Catalog filter
    min_benefit: Optional[float] = None
    max_benefit: Optional[float] = None
    max_items: Optional[int] = None

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.method not in METHODS:
            raise InvalidArgumentError(
                f"Unknown solver method '{self.method}'; expected one of {METHODS}."
            )

    @property
    def filters(self) -> bool:
        """True when any catalog filter knob is set."""
        return (
            self.min_benefit is not None
            or self.max_benefit is not None
            or self.max_items is not None
        )
