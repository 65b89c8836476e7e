"""
One-button runner for the Toast simulator.

Usage:
    python run.py

    # Reproducible run:
    python run.py --seed 42

    # From a run config JSON:
    python run.py --config toast_config.json

Prints a single line: '<wins> of <attempts> attempts won'.
"""

import argparse
import logging

from toast_sim.config import SimulationConfig, load_config_from_json
from toast_sim.pipeline import run_simulation

# Defaults — edit these to change the fixed run
DEFAULT_N_GAMES = 10000
DEFAULT_SEED = None


def main():
    parser = argparse.ArgumentParser(
        description="One-button Toast deck-clearing simulation"
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED,
        help="Random seed (default: fresh entropy)"
    )
    parser.add_argument(
        "--config", default=None,
        help="Run config JSON (overrides the fixed game count)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log progress to stderr"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.config:
        config = load_config_from_json(args.config)
    else:
        config = SimulationConfig(n_games=DEFAULT_N_GAMES, collect_records=False)
    config = config.with_overrides(seed=args.seed)

    results = run_simulation(config)
    print(results['result'].summary_line())


if __name__ == '__main__':
    main()
