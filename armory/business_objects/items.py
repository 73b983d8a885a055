# -*- coding: utf-8 -*-
"""
Item model for the armory catalog.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class Item:
    """
    A purchasable catalog item; can be selected at most once.

    Attributes
    ----------
    description : str
        Human-readable label, e.g. "new enchanted helmet". Must be non-empty.
    cost : int
        Positive cost in gold.
    benefit : float
        Nonnegative objective contribution if selected.
    """
    description: str
    cost: int
    benefit: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.description:
            raise StateValidationError("Item.description must be non-empty.")
        if isinstance(self.cost, bool) or not isinstance(self.cost, int):
            raise StateValidationError(f"Item[{self.description}] cost must be an integer.")
        if self.cost <= 0:
            raise StateValidationError(f"Item[{self.description}] cost must be > 0.")
        if not math.isfinite(self.benefit) or self.benefit < 0:
            raise StateValidationError(f"Item[{self.description}] benefit must be finite and >= 0.")
