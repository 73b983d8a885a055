# -*- coding: utf-8 -*-
from types import SimpleNamespace

import pytest

from armory.business_objects import Item, InvalidArgumentError
from armory.planning.solvers.dynamic import (
    backtrace,
    build_table,
    optimal_benefit,
    solve_dynamic,
)


def test_classic_instance(classic_items):
    sol = solve_dynamic(classic_items, 5)
    assert sol.total_benefit == pytest.approx(7.0)
    assert [it.cost for it in sol] == [2, 3]
    assert sol.items[0] is classic_items[0]


def test_empty_input():
    sol = solve_dynamic([], 10)
    assert sol.is_empty
    assert sol.total_benefit == 0


def test_zero_budget(classic_items):
    assert solve_dynamic(classic_items, 0).is_empty


def test_single_item_affordable():
    it = Item("helmet", 10, 5.0)
    sol = solve_dynamic([it], 10)
    assert sol.items == (it,)
    assert sol.total_benefit == 5.0


def test_single_item_unaffordable():
    sol = solve_dynamic([Item("helmet", 10, 5.0)], 9)
    assert sol.is_empty
    assert sol.total_benefit == 0


def test_table_borders_and_monotonic(classic_items):
    budget = 9
    table, take = build_table(classic_items, budget)
    assert len(table) == len(classic_items) + 1
    assert all(len(row) == budget + 1 for row in table)
    assert all(v == 0 for v in table[0])
    assert all(row[0] == 0 for row in table)
    for i in range(len(table)):
        for j in range(budget + 1):
            if i > 0:
                assert table[i][j] >= table[i - 1][j]
            if j > 0:
                assert table[i][j] >= table[i][j - 1]
    assert not any(take[0])


def test_take_table_matches_value_changes(classic_items):
    table, take = build_table(classic_items, 9)
    for i in range(1, len(table)):
        for j in range(10):
            assert take[i][j] == (table[i][j] != table[i - 1][j])


def test_backtrace_returns_catalog_order(classic_items):
    _, take = build_table(classic_items, 9)
    chosen = backtrace(classic_items, take, 9)
    assert [it.description for it in chosen] == ["a", "b", "c"]


def test_optimal_benefit(classic_items):
    assert optimal_benefit(classic_items, 5) == pytest.approx(7.0)
    assert optimal_benefit(classic_items, 14) == pytest.approx(18.0)


def test_tie_prefers_earlier_item():
    first = Item("first", 4, 5.0)
    second = Item("second", 4, 5.0)
    sol = solve_dynamic([first, second], 4)
    assert sol.items == (first,)


def test_zero_benefit_item_is_not_taken():
    free = Item("feather", 1, 0.0)
    sol = solve_dynamic([free], 5)
    assert sol.is_empty


def test_identical_items_are_distinct_positions():
    a = Item("ring", 3, 2.0)
    b = Item("ring", 3, 2.0)
    sol = solve_dynamic([a, b], 6)
    assert len(sol) == 2
    assert sol.total_benefit == 4.0


def test_real_valued_benefits_reconstruct_exactly():
    items = [Item(f"i{k}", c, b) for k, (c, b) in enumerate(
        [(3, 0.1), (4, 0.2), (2, 0.3), (5, 0.7), (1, 0.05)]
    )]
    sol = solve_dynamic(items, 9)
    assert sol.total_cost <= 9
    assert sol.total_benefit == pytest.approx(optimal_benefit(items, 9))


@pytest.mark.parametrize("budget", [-1, 2.5, True, "10"])
def test_invalid_budget(classic_items, budget):
    with pytest.raises(InvalidArgumentError):
        solve_dynamic(classic_items, budget)


@pytest.mark.parametrize("cost", [0, -3, 1.5])
def test_invalid_cost_rechecked(cost):
    bogus = SimpleNamespace(description="bogus", cost=cost, benefit=1.0)
    with pytest.raises(InvalidArgumentError):
        solve_dynamic([bogus], 5)  # type: ignore[list-item]
