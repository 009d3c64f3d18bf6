from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from numbers import Real

from .ants import ACOParams, AntColonyOptimizer
from .greedy import GreedySolver
from .matrix import CostMatrix, MatrixFactory
from .tour import Result

# 4 cities, pairwise costs 10, 15, 20, 25, 30, 35
DEMO_MATRIX = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]


def city_label(idx: int) -> str:
    '''A..Z for the first 26 cities, v26, v27... after that'''
    return chr(ord("A") + idx) if 0 <= idx < 26 else f"v{idx}"


def format_cost(cost: Real) -> str:
    return str(int(cost)) if float(cost).is_integer() else f"{cost:.4f}"


def format_route(route: Sequence[int]) -> str:
    return " -> ".join(city_label(c) for c in route)


def format_matrix(matrix: CostMatrix) -> str:
    '''Matrix as aligned text with a header of city labels'''
    cells = [[format_cost(x) for x in row] for row in matrix.rows()]
    width = max([len(city_label(matrix.size - 1))] + [len(c) for row in cells for c in row])
    lines = [" " * width + " " + " ".join(city_label(j).rjust(width) for j in range(matrix.size))]
    for i, row in enumerate(cells):
        lines.append(city_label(i).rjust(width) + " " + " ".join(c.rjust(width) for c in row))
    return "\n".join(lines)


def print_result(title: str, res: Result) -> None:
    print(f"{title}:")
    print("  Route:", format_route(res.route))
    print("  Total cost:", format_cost(res.total_cost))


def build_argparser() -> argparse.ArgumentParser:
    '''Command line argument parser'''
    p = argparse.ArgumentParser(
        prog="tsp-solver",
        description="Greedy nearest-neighbour and ant colony (ACO) heuristics for the TSP.",
    )
    src = p.add_argument_group("Cost matrix")
    src.add_argument("--random", action="store_true", help="Generate a random complete matrix instead of the 4-city demo")
    src.add_argument("--n", type=int, default=10, help="Number of cities (with --random)")
    src.add_argument("--low", type=int, default=1, help="Minimum cost")
    src.add_argument("--high", type=int, default=100, help="Maximum cost")
    src.add_argument("--asymmetric", action="store_true", help="Do not mirror costs (i->j may differ from j->i)")
    src.add_argument("--seed", type=int, default=None, help="Seed for the matrix and the colony")

    sol = p.add_argument_group("Solver")
    sol.add_argument("--solver", choices=("greedy", "aco", "both"), default="both")

    aco = p.add_argument_group("ACO parameters")
    aco.add_argument("--alpha", type=float, default=1.0, help="Pheromone weight")
    aco.add_argument("--beta", type=float, default=2.0, help="Weight of the 1/d heuristic")
    aco.add_argument("--rho", type=float, default=0.5, help="Evaporation rate (0..1)")
    aco.add_argument("--ants", type=int, default=10, help="Number of ants")
    aco.add_argument("--iters", type=int, default=50, help="Number of iterations")

    out = p.add_argument_group("Output")
    out.add_argument("--show-matrix", action="store_true", help="Print the cost matrix")
    out.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    return p


def main(argv: list[str] | None = None) -> int:
    '''Entry point of tsp-solver'''
    parser = build_argparser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.random:
        try:
            matrix = MatrixFactory.random_complete(args.n, symmetric=not args.asymmetric,
                                                   low=args.low, high=args.high, seed=args.seed)
        except ValueError as e:
            parser.error(str(e))
    else:
        matrix = CostMatrix(DEMO_MATRIX)

    if args.show_matrix:
        print("Cost matrix:")
        print(format_matrix(matrix))
        print()

    if args.solver in ("greedy", "both"):
        print_result("Greedy", GreedySolver().solve(matrix))

    if args.solver in ("aco", "both"):
        params = ACOParams(alpha=args.alpha, beta=args.beta, evaporation_rate=args.rho)
        try:
            colony = AntColonyOptimizer(matrix, args.ants, args.iters, params, seed=args.seed)
        except ValueError as e:
            parser.error(str(e))
        print_result("Ant colony", colony.solve())

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
