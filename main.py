from solver import TSPSolver
from two_opt import TwoOptSolver
from utils.io import LoadError, TSPLoader
from utils.output import format_solution, write_tour_file

import argparse
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Nearest neighbor + candidate 2-opt for Euclidean TSP")
    parser.add_argument("instance", type=str, help="TSPLIB problem file")
    parser.add_argument("time", type=float, nargs="?", default=None,
                        help="time budget of the 2-opt phase in seconds")
    parser.add_argument("--k", type=int, default=TSPSolver.DEFAULT_MAX_NEIGHBORS,
                        help="number of candidate neighbors per city")
    parser.add_argument("--max-passes", type=int, default=None,
                        help="maximum number of 2-opt passes")
    parser.add_argument("--tolerance", type=float, default=TwoOptSolver.DEFAULT_TOLERANCE,
                        help="minimum gain of an accepted move")
    parser.add_argument("--prune", action="store_true",
                        help="stop scanning candidates once they are farther than the current successor")
    parser.add_argument("--ids", action="store_true",
                        help="print TSPLIB node ids instead of 0-based indices")
    parser.add_argument("--tour-out", type=str, default=None,
                        help="write the tour in TSPLIB TOUR format")
    parser.add_argument("--history-out", type=str, default=None,
                        help="write the per-pass history as csv")
    parser.add_argument("--plot", type=str, default=None,
                        help="save a picture of the tour and of the convergence")
    parser.add_argument("--render", type=str, default=None,
                        help="render the tour with graphviz")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.k < 0:
        parser.error("--k must be non-negative")
    if args.tolerance < 0:
        parser.error("--tolerance must be non-negative")
    if args.max_passes is not None and args.max_passes < 0:
        parser.error("--max-passes must be non-negative")
    if args.time is not None and args.time < 0:
        parser.error("time must be non-negative")

    try:
        problem = TSPLoader.load_from_file(args.instance)
        solver = TSPSolver(problem,
                           max_neighbors=args.k,
                           tolerance=args.tolerance,
                           neighbor_pruning=args.prune,
                           verbose=args.verbose)
        solution = solver.solve(time_limit=args.time, max_passes=args.max_passes)
    except (LoadError, MemoryError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_solution(solution, ids=problem.ids if args.ids else None))

    if args.tour_out:
        write_tour_file(solution, problem, args.tour_out)
    if args.history_out:
        solution.history.to_csv(args.history_out, index=False)
    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from plot.plot import plot_history, plot_tour

        fig, (ax_tour, ax_history) = plt.subplots(1, 2, figsize=(12, 5))
        plot_tour(problem.coords, solution.order, ax=ax_tour,
                  title=f"{problem.name or args.instance}: {solution.length:.0f}")
        plot_history(solution.history, ax=ax_history)
        fig.savefig(args.plot)
        plt.close(fig)
    if args.render:
        solution.display(problem.coords, path=args.render)

    return 0


if __name__ == "__main__":
    sys.exit(main())
