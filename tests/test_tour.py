import dataclasses

import pytest

from tsp_solver import AntColonyOptimizer, GreedySolver, MatrixFactory, Result, Tour, tour_cost


def test_result_is_frozen():
    res = Result(Tour((0, 1, 0)), 7)
    with pytest.raises(dataclasses.FrozenInstanceError):
        res.total_cost = 1
    assert res.route == (0, 1, 0)


def test_tour_from_list():
    t = Tour([0, 2, 1, 0])
    assert t.cities == (0, 2, 1, 0)
    assert t.start == 0
    assert len(t) == 4
    assert list(t.edges()) == [(0, 2), (2, 1), (1, 0)]


@pytest.mark.parametrize("cities, n, ok", [
    ((0, 1, 2, 0), 3, True),
    ((0, 1, 1, 0), 3, False),
    ((0, 1, 2), 3, False),
    ((0, 1, 2, 1), 3, False),
    ((0, 0), 1, True),
])
def test_is_hamiltonian(cities, n, ok):
    assert Tour(cities).is_hamiltonian(n) is ok


def test_tour_cost(classic4):
    assert tour_cost(classic4, (0, 1, 2, 3, 0)) == 95
    assert tour_cost(classic4, (0,)) == 0


def test_cost_round_trip():
    m = MatrixFactory.random_complete(9, symmetric=False, seed=21)
    for res in (GreedySolver().solve(m), AntColonyOptimizer(m, 5, 10, seed=21).solve()):
        assert tour_cost(m, res.tour.cities) == res.total_cost
