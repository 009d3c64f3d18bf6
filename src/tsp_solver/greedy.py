from __future__ import annotations

import logging

from .matrix import CostMatrix
from .tour import Result, Tour

logger = logging.getLogger(__name__)


class GreedySolver:
    '''
    Nearest-neighbour heuristic

    Starts at city 0 and always moves to the closest unvisited city,
    then returns to city 0. Deterministic for a given matrix.
    '''

    start = 0

    def solve(self, matrix: CostMatrix) -> Result:
        n = matrix.size
        visited = [False] * n
        route = [self.start]
        visited[self.start] = True
        total = 0
        cur = self.start

        for _ in range(n - 1):
            nxt = self._nearest_unvisited(matrix, cur, visited)
            visited[nxt] = True
            route.append(nxt)
            total += matrix.distance(cur, nxt)
            cur = nxt

        route.append(self.start)
        total += matrix.distance(cur, self.start)
        logger.debug("greedy tour %s, cost=%s", route, total)
        return Result(Tour(tuple(route)), total)

    @staticmethod
    def _nearest_unvisited(matrix: CostMatrix, cur: int, visited: list[bool]) -> int:
        '''Lowest-cost unvisited city from cur; the lowest index wins ties'''
        nearest = -1
        best = None
        for city, seen in enumerate(visited):
            if seen:
                continue
            d = matrix.distance(cur, city)
            if best is None or d < best:
                best = d
                nearest = city
        return nearest
