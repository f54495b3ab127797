from typing import List, Optional
import argparse
import logging
import time

from .config import Config
from .errors import McmfError
from .graph_manager import GraphManager
from .solution import Solution

logger = logging.getLogger(__name__)

# Network solved when no edge list is given
DEMO_EDGES = [
    ('a', 'b', 10, 200),
    ('b', 'c', 20, 0),
    ('c', 'e', 15, 0),
    ('a', 'd', 2, 100),
    ('d', 'e', 3, 0),
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='pymcmf',
        description='Compute a min-cost maximum flow and decompose it into paths.'
    )
    parser.add_argument('source', nargs='?', default='a', help='Source vertex label')
    parser.add_argument('sink', nargs='?', default='e', help='Sink vertex label')
    parser.add_argument('--edges', help='CSV edge list with from,to,capacity[,cost] columns '
                                        '(default: built-in demo network)')
    parser.add_argument('--solver', choices=['ortools', 'networkx'], default=None,
                        help='Flow solver backend (default: PYMCMF_SOLVER or ortools)')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (default: PYMCMF_LOG_LEVEL or INFO)')
    return parser.parse_args(argv)


def format_solution(solution: Solution) -> str:
    lines = [
        f"Max flow: {solution.max_flow}",
        f"Total cost: {solution.total_cost:g}",
        "",
        "Paths:",
    ]
    for path in solution.paths:
        lines.append(f"{path} ({path.flow})")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = Config.from_env()

    # Configure logging
    logging.basicConfig(
        level=(args.log_level or config.log_level).upper(),
        format='[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        solver_type = args.solver or config.solver_type
        if args.edges:
            manager = GraphManager.from_csv(args.edges, solver_type)
        else:
            manager = GraphManager(solver_type)
            manager.add_edges(DEMO_EDGES)
        logger.info(f"Graph information:\n{manager.get_graph_info()}")

        start_time = time.time()
        solution = manager.solve(args.source, args.sink)
        logger.info(f"Execution time: {time.time() - start_time:.4f} seconds")
    except McmfError as e:
        logger.error(f"Error: {str(e)}")
        return 1

    print(format_solution(solution))
    return 0


if __name__ == "__main__":
    exit(main())
