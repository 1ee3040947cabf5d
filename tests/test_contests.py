import pytest

from dsakit.contests import days_to_reach_roster, min_assembly_cost


@pytest.mark.parametrize("target", [0, 3, 4])
def test_roster_reached_on_first_day(target):
    assert days_to_reach_roster(4, [(0, 1), (1, 2)], target) == 1


def test_roster_complete_graph_stays_full():
    edges = [(a, b) for a in range(4) for b in range(a + 1, 4)]
    assert days_to_reach_roster(4, edges, 4) == 1


def test_roster_unreachable_target_raises():
    with pytest.raises(ValueError):
        days_to_reach_roster(4, [(0, 1)], 5)


def test_roster_unknown_employee_raises():
    with pytest.raises(ValueError):
        days_to_reach_roster(3, [(0, 3)], 2)


def test_assembly_picks_cheapest_split():
    pieces = [("ab", 3), ("a", 1), ("b", 1)]
    assert min_assembly_cost(pieces, "ab") == 2


def test_assembly_single_piece():
    assert min_assembly_cost([("abc", 7)], "abc") == 7


def test_assembly_empty_target_costs_nothing():
    assert min_assembly_cost([("x", 4)], "") == 0


def test_assembly_impossible_returns_none():
    assert min_assembly_cost([("ab", 1)], "abc") is None
    assert min_assembly_cost([], "a") is None


def test_assembly_extra_piece_never_costs_more():
    base = [("ab", 5), ("c", 2), ("a", 3), ("bc", 4)]
    target = "abcabc"
    without = min_assembly_cost(base, target)
    with_extra = min_assembly_cost(base + [("abc", 1)], target)
    assert without is not None
    assert with_extra <= without


def test_assembly_reuses_pieces():
    once = min_assembly_cost([("xy", 6)], "xy")
    twice = min_assembly_cost([("xy", 6)], "xyxy")
    assert twice == 2 * once