"""Approximate solvers for the travelling salesman problem.

The package provides:
- tsp_solver.matrix: CostMatrix and MatrixFactory
- tsp_solver.tour: Tour, Result and tour_cost
- tsp_solver.greedy: GreedySolver (nearest neighbour)
- tsp_solver.ants: AntColonyOptimizer, ACOParams
- tsp_solver.cli: console rendering and the tsp-solver command
"""
from .ants import ACOParams, AntColonyOptimizer, SelectionExhaustedError
from .greedy import GreedySolver
from .matrix import CostMatrix, MatrixFactory
from .tour import Result, Tour, tour_cost

__all__ = [
    "CostMatrix",
    "MatrixFactory",
    "Tour",
    "Result",
    "tour_cost",
    "GreedySolver",
    "AntColonyOptimizer",
    "ACOParams",
    "SelectionExhaustedError",
]
