# -*- coding: utf-8 -*-
"""
Precondition checks shared by the solvers.

Items validate themselves on construction; the solvers re-check the fields
they rely on so a bad input fails before any table or mask is built.
"""

from __future__ import annotations
import math
from numbers import Real
from typing import Sequence

from armory.business_objects.errors import InvalidArgumentError
from armory.business_objects.items import Item


def check_budget(budget: object, integral: bool) -> None:
    if isinstance(budget, bool):
        raise InvalidArgumentError("budget must be a number, not a bool.")
    if integral and not isinstance(budget, int):
        raise InvalidArgumentError(f"budget must be an integer, got {budget!r}.")
    if not isinstance(budget, Real):
        raise InvalidArgumentError(f"budget must be a number, got {budget!r}.")
    if not budget >= 0:  # NaN fails this too
        raise InvalidArgumentError(f"budget must be >= 0, got {budget}.")


def check_items(items: Sequence[Item]) -> None:
    for idx, it in enumerate(items):
        if isinstance(it.cost, bool) or not isinstance(it.cost, int) or it.cost <= 0:
            raise InvalidArgumentError(
                f"items[{idx}] ({it.description!r}) cost must be a positive integer, got {it.cost!r}."
            )
        if not math.isfinite(it.benefit) or it.benefit < 0:
            raise InvalidArgumentError(
                f"items[{idx}] ({it.description!r}) benefit must be finite and >= 0, got {it.benefit!r}."
            )
