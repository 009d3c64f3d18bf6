from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from numbers import Real

from .matrix import CostMatrix


@dataclass(slots=True, frozen=True)
class Tour:
    '''
    Closed route over all cities

    Attributes:
        cities: visiting order of length n+1, first and last entries are the start city
    '''
    cities: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "cities", tuple(self.cities))

    @property
    def start(self) -> int:
        return self.cities[0]

    def edges(self) -> Iterator[tuple[int, int]]:
        return zip(self.cities, self.cities[1:], strict=False)

    def is_hamiltonian(self, n: int) -> bool:
        '''True when the route is closed and visits each of the n cities exactly once'''
        c = self.cities
        return len(c) == n + 1 and c[0] == c[-1] and sorted(c[:-1]) == list(range(n))

    def __iter__(self) -> Iterator[int]:
        return iter(self.cities)

    def __len__(self) -> int:
        return len(self.cities)


@dataclass(slots=True, frozen=True)
class Result:
    '''
    Tour produced by a solver together with its cost

    Attributes:
        tour: closed route
        total_cost: sum of the edge costs along the route
    '''
    tour: Tour
    total_cost: Real

    @property
    def route(self) -> tuple[int, ...]:
        return self.tour.cities


def tour_cost(matrix: CostMatrix, cities: Sequence[int]) -> Real:
    '''Sum of matrix costs over consecutive pairs of cities'''
    total = 0
    for a, b in zip(cities, cities[1:], strict=False):
        total += matrix.distance(a, b)
    return total
