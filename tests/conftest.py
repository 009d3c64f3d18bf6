import pytest

from tsp_solver import CostMatrix

CLASSIC_4 = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]


class FixedRandom:
    '''RNG stub that always draws the same value'''

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


@pytest.fixture
def classic4():
    return CostMatrix(CLASSIC_4)


@pytest.fixture
def fixed_random():
    return FixedRandom
