import pytest

from tsp_solver import CostMatrix, MatrixFactory


def test_accessors(classic4):
    assert classic4.size == 4
    assert len(classic4) == 4
    assert classic4.distance(1, 3) == 25
    assert classic4.distance(3, 1) == 25
    assert list(classic4.rows())[2] == (15, 35, 0, 30)


@pytest.mark.parametrize("i, j", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_out_of_bounds(classic4, i, j):
    with pytest.raises(IndexError):
        classic4.distance(i, j)


def test_copy_on_construction():
    rows = [[0, 1], [1, 0]]
    m = CostMatrix(rows)
    rows[0][1] = 99
    assert m.distance(0, 1) == 1


def test_no_validation_by_default():
    m = CostMatrix([[5, -1], [2, 0]])
    assert m.distance(0, 0) == 5
    assert m.distance(0, 1) == -1


@pytest.mark.parametrize("rows", [
    [],
    [[0, 1], [1]],
    [[0, -1], [1, 0]],
    [[1, 1], [1, 0]],
])
def test_validate_rejects(rows):
    with pytest.raises(ValueError):
        CostMatrix(rows, validate=True)


def test_validate_symmetry():
    m = CostMatrix([[0, 1], [2, 0]], validate=True)
    assert not m.is_symmetric()
    with pytest.raises(ValueError):
        m.validate(symmetric=True)


def test_random_complete():
    m = MatrixFactory.random_complete(7, low=3, high=9, seed=4)
    m.validate(symmetric=True)
    assert all(3 <= m.distance(i, j) <= 9 for i in range(7) for j in range(7) if i != j)
    assert m == MatrixFactory.random_complete(7, low=3, high=9, seed=4)


def test_random_complete_asymmetric():
    m = MatrixFactory.random_complete(12, symmetric=False, seed=0)
    m.validate()
    assert not m.is_symmetric()


@pytest.mark.parametrize("kwargs", [{"n": 0}, {"n": 3, "low": 5, "high": 1}, {"n": 3, "low": -1}])
def test_random_complete_rejects(kwargs):
    with pytest.raises(ValueError):
        MatrixFactory.random_complete(**kwargs)


def test_validate_symmetric_matrix():
    m = CostMatrix([[0, 3, 4], [3, 0, 5], [4, 5, 0]])
    assert m.is_symmetric()
    m.validate(symmetric=True)
    with pytest.raises(ValueError, match="not symmetric"):
        CostMatrix([[0, 3, 4], [3, 0, 5], [4, 6, 0]]).validate(symmetric=True)
