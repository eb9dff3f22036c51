"""Command line entry point: solve a generated or CSV-loaded instance."""

import argparse
import logging
import time
from typing import List, Optional

from .config import Config
from .data_loader import generate_knapsack_problem, load_problem_csv
from .logger import configure_logging
from .report import build_report, format_report
from .solver import GeneticConfig, KnapsackSolver

logger = logging.getLogger(__name__)


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knapsack-ga",
        description="Solve a 0/1 knapsack instance with a genetic algorithm.",
    )
    parser.add_argument("--items-csv", help="CSV file with value,weight columns (default: generate)")
    parser.add_argument("--size", type=int, default=config.PROBLEM_SIZE, help="Generated item count")
    parser.add_argument("--problem-seed", type=int, default=config.PROBLEM_SEED, help="Generator seed")
    parser.add_argument("--capacity", type=int, default=config.CAPACITY)
    parser.add_argument("--population", type=int, default=config.POPULATION_SIZE)
    parser.add_argument("--iterations", type=int, default=config.ITERATION_COUNT)
    parser.add_argument("--seed", type=int, default=config.SOLVER_SEED, help="Solver seed (default: entropy)")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    parser.add_argument("--log-file", default=config.LOG_FILE)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    config = Config()
    args = build_parser(config).parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    
    if args.items_csv:
        problem = load_problem_csv(args.items_csv, args.capacity)
    else:
        problem = generate_knapsack_problem(args.size, args.problem_seed, args.capacity)
    
    ga_config = GeneticConfig(
        capacity=problem.capacity,
        population_size=args.population,
        iteration_count=args.iterations,
        seed=args.seed,
        log_interval=config.LOG_INTERVAL,
    )
    solver = KnapsackSolver(problem.items, ga_config)
    
    start = time.perf_counter()
    best = solver.solve()
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"Solved {problem.size} items in {elapsed_ms:.1f}ms")
    
    print(format_report(build_report(problem, best.to_list())))
    return 0
