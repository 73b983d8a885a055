# -*- coding: utf-8 -*-
import csv
import logging

import pytest

from armory.business_objects import InvalidArgumentError, Item
from armory.planning import Policy
from armory.planning.orchestrator import SOLVERS, solve
from armory.planning.tracker import Tracker


def test_policy_rejects_unknown_method():
    with pytest.raises(InvalidArgumentError):
        Policy(method="greedy", budget=5)


def test_policy_filters_flag():
    assert not Policy(budget=5).filters
    assert Policy(budget=5, max_items=3).filters


@pytest.mark.parametrize("method", sorted(SOLVERS))
def test_solve_dispatches(classic_items, method):
    sol = solve(classic_items, Policy(method=method, budget=5))
    assert sol.total_benefit == pytest.approx(7.0)


def test_solve_applies_filter(classic_items, caplog):
    policy = Policy(method="exhaustive", budget=100, min_benefit=3.0, max_benefit=5.0)
    with caplog.at_level(logging.INFO, logger="armory.planning.orchestrator"):
        sol = solve(classic_items, policy)
    assert [it.description for it in sol] == ["b", "c"]
    assert "filter kept 2 of 4 items" in caplog.text


def test_solve_max_items_only(classic_items):
    sol = solve(classic_items, Policy(budget=100, max_items=2))
    assert [it.description for it in sol] == ["a", "b"]


def test_solve_writes_artifacts(classic_items, tmp_path):
    tracker = Tracker(out_dir=str(tmp_path / "out"))
    solve(classic_items, Policy(budget=5), tracker=tracker)

    with open(tmp_path / "out" / "selection.csv", newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["description"] for r in rows] == ["a", "b"]
    assert rows[1]["cost"] == "3"

    with open(tmp_path / "out" / "summary.csv", newline="", encoding="utf-8") as f:
        summary = list(csv.DictReader(f))
    assert summary == [{
        "method": "dynamic",
        "budget": "5",
        "item_count": "2",
        "total_cost": "5",
        "total_benefit": "7.0",
    }]
