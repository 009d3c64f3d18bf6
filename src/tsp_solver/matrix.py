from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from numbers import Real


class CostMatrix:
    '''
    Square matrix of travel costs between cities 0..n-1

    Stores `w[i][j]`, the cost of moving i->j. Asymmetry is allowed.
    Preconditions (not checked unless validate=True): the matrix is square
    and non-empty, all entries are non-negative and the diagonal is 0.
    The rows are copied on construction, so later changes to the caller's
    lists do not affect the matrix.
    '''

    __slots__ = ("_w", "_n")

    def __init__(self, weights: Sequence[Sequence[Real]], *, validate: bool = False) -> None:
        self._w: tuple[tuple[Real, ...], ...] = tuple(tuple(row) for row in weights)
        self._n: int = len(self._w)
        if validate:
            self.validate()

    @property
    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def distance(self, i: int, j: int) -> Real:
        '''Cost of the edge i->j; IndexError outside [0, size)'''
        if not (0 <= i < self._n and 0 <= j < self._n):
            raise IndexError(f"city index out of range: ({i}, {j}) for size {self._n}")
        return self._w[i][j]

    def rows(self) -> Iterator[tuple[Real, ...]]:
        return iter(self._w)

    def validate(self, *, symmetric: bool = False) -> None:
        '''Checks the documented preconditions, raising ValueError on the first violation'''
        n = self._n
        if n == 0 or any(len(row) != n for row in self._w):
            raise ValueError("cost matrix must be square and non-empty")
        for i in range(n):
            for j in range(n):
                x = self._w[i][j]
                if x < 0:
                    raise ValueError(f"negative cost at ({i}, {j}): {x}")
                if i == j and x != 0:
                    raise ValueError(f"non-zero diagonal at ({i}, {i}): {x}")
        if symmetric and not self.is_symmetric():
            raise ValueError("cost matrix is not symmetric")

    def is_symmetric(self) -> bool:
        return all(self._w[i][j] == self._w[j][i] for i in range(self._n) for j in range(i + 1, self._n))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostMatrix):
            return NotImplemented
        return self._w == other._w

    def __hash__(self) -> int:
        return hash(self._w)

    def __repr__(self) -> str:
        return f"CostMatrix(size={self._n})"


class MatrixFactory:
    '''Builds cost matrices for demos and experiments'''

    @staticmethod
    def random_complete(n: int, *, symmetric: bool = True, low: int = 1, high: int = 100, seed: int | None = None) -> CostMatrix:  # noqa: E501
        '''Complete matrix of size n with integer costs in [low, high] and a zero diagonal'''
        if n < 1:
            raise ValueError("n >= 1")
        if low < 0 or high < low:
            raise ValueError("expected 0 <= low <= high")
        rng = random.Random(seed)
        w = [[0 for _ in range(n)] for _ in range(n)]
        for i in range(n):
            for j in range(n):
                if i != j:
                    w[i][j] = rng.randint(low, high)
        if symmetric:
            for i in range(n):
                for j in range(i + 1, n):
                    w[j][i] = w[i][j]
        return CostMatrix(w)
