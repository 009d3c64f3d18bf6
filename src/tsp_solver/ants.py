from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .matrix import CostMatrix
from .tour import Result, Tour, tour_cost

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def random(self) -> float: ...


IterationCallback = Callable[[int, Sequence[Result], Result], None]


class SelectionExhaustedError(RuntimeError):
    '''No unvisited city was left to choose while a tour was still being built'''


@dataclass(slots=True)
class ACOParams:
    '''
    Parameters of the ant colony

    Attributes:
        alpha: weight of the pheromone trail
        beta: weight of the heuristic (inverse distance)
        evaporation_rate: share of pheromone lost every iteration (0 <= rate < 1)
    '''
    alpha: float = 1.0
    beta: float = 2.0
    evaporation_rate: float = 0.5


class AntColonyOptimizer:
    '''
    Ant colony optimization for the travelling salesman problem

    Every ant starts from city 0. The pheromone matrix starts at 1.0 on every
    entry and lives as long as the optimizer, so calling solve() twice keeps
    learning from the previous run.

    Attributes:
        matrix: cost matrix
        n_ants: number of ants per iteration
        n_iterations: number of iterations (no early stop)
        params: ACOParams
        rng: random source, only its random() method is used
        on_iteration: optional callback(iteration, results, best) run after each iteration
    '''
    start = 0

    def __init__(self, matrix: CostMatrix, n_ants: int, n_iterations: int,
                 params: ACOParams | None = None, *, rng: RandomSource | None = None,
                 seed: int | None = None, on_iteration: IterationCallback | None = None) -> None:
        if n_ants < 1:
            raise ValueError("n_ants >= 1")
        if n_iterations < 1:
            raise ValueError("n_iterations >= 1")
        self.params = params or ACOParams()
        if not 0.0 <= self.params.evaporation_rate < 1.0:
            raise ValueError("evaporation_rate must be in [0, 1)")
        self.matrix = matrix
        self.n_ants = n_ants
        self.n_iterations = n_iterations
        self.rng = rng if rng is not None else random.Random(seed)
        self.on_iteration = on_iteration
        n = matrix.size
        self._tau = [[1.0 for _ in range(n)] for _ in range(n)]

    @property
    def pheromones(self) -> tuple[tuple[float, ...], ...]:
        return tuple(tuple(row) for row in self._tau)

    def solve(self) -> Result:
        '''Best tour over all ants and iterations'''
        best: Result | None = None
        logger.debug("aco start: n=%d ants=%d iterations=%d %s",
                     self.matrix.size, self.n_ants, self.n_iterations, self.params)

        for it in range(1, self.n_iterations + 1):
            results = [self._construct_tour() for _ in range(self.n_ants)]

            self._evaporate()
            self._deposit(results)

            for res in results:
                if best is None or res.total_cost < best.total_cost:
                    best = res

            logger.debug("iteration %d: best cost=%s", it, best.total_cost)
            if self.on_iteration is not None:
                self.on_iteration(it, results, best)

        return best

    def _construct_tour(self) -> Result:
        '''One ant builds a closed tour from the start city'''
        n = self.matrix.size
        visited = [False] * n
        visited[self.start] = True
        route = [self.start]
        cur = self.start

        for _ in range(n - 1):
            nxt = self._choose_next(cur, visited)
            visited[nxt] = True
            route.append(nxt)
            cur = nxt

        route.append(self.start)
        return Result(Tour(tuple(route)), tour_cost(self.matrix, route))

    def _weight(self, i: int, j: int) -> float:
        '''Desirability of the edge i->j; inf when it is out of float range'''
        d = self.matrix.distance(i, j)
        eta = 1.0 / d if d != 0 else math.inf
        try:
            return (self._tau[i][j] ** self.params.alpha) * (eta ** self.params.beta)
        except OverflowError:
            return math.inf

    def _choose_next(self, i: int, visited: Sequence[bool]) -> int:
        '''
        Roulette-wheel choice of the next city from city i

        The candidates are walked in ascending index order; the first one
        whose cumulative probability strictly exceeds the drawn value wins,
        so a draw landing exactly on a boundary goes to the next city. When
        rounding (or an infinite weight) keeps the cumulative sum from ever
        exceeding it, the lowest-indexed unvisited city is taken instead.
        '''
        candidates = [c for c, seen in enumerate(visited) if not seen]
        if not candidates:
            raise SelectionExhaustedError(f"no unvisited city left from city {i}")

        weights = [self._weight(i, c) for c in candidates]
        total = sum(weights)

        r = self.rng.random()
        cumulative = 0.0
        for c, w in zip(candidates, weights, strict=True):
            cumulative += w / total if total != 0 else math.nan
            if cumulative > r:
                return c

        logger.debug("selection fallback at city %d (r=%s, total weight=%s)", i, r, total)
        return candidates[0]

    def _evaporate(self) -> None:
        '''Evaporation on every entry'''
        keep = 1.0 - self.params.evaporation_rate
        for row in self._tau:
            for j in range(len(row)):
                row[j] *= keep

    def _deposit(self, results: Sequence[Result]) -> None:
        '''Each ant adds 1/cost on both directions of every edge it used'''
        for res in results:
            cost = res.total_cost
            if not (math.isfinite(cost) and cost > 0):
                continue
            amount = 1.0 / cost
            for a, b in res.tour.edges():
                self._tau[a][b] += amount
                if a != b:
                    self._tau[b][a] += amount
