# -*- coding: utf-8 -*-
"""
Plain-text rendering of solutions and DP tables.
"""

from __future__ import annotations
from typing import Sequence

from armory.planning.solution import Solution

MAX_TABLE_DIM = 250


def format_solution(solution: Solution) -> str:
    lines = ["*** Item Vector ***"]
    if solution.is_empty:
        lines.append("[empty item list]")
        return "\n".join(lines)

    for it in solution:
        lines.append(f"{it.description} ==> Cost of {it.cost} gold; Benefit = {it.benefit:g}")
    lines.append(f"> Grand total cost: {solution.total_cost} gold")
    lines.append(f"> Grand total benefit: {solution.total_benefit:g}")
    return "\n".join(lines)


def format_table(table: Sequence[Sequence[float]]) -> str:
    """Render a 2-D table; refuses (prints "[too large]") past MAX_TABLE_DIM rows or columns."""
    lines = ["*** 2D Cache ***"]
    if not table:
        lines.append("[empty]")
    elif len(table) > MAX_TABLE_DIM or len(table[0]) > MAX_TABLE_DIM:
        lines.append("[too large]")
    else:
        for row in table:
            lines.append("".join(f"{value:>5g}" for value in row))
    return "\n".join(lines)


def print_solution(solution: Solution) -> None:
    print(format_solution(solution))


def print_table(table: Sequence[Sequence[float]]) -> None:
    print(format_table(table))
