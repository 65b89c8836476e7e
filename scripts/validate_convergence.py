"""
Win-rate convergence validation diagnostic.

Checks that seeded runs replay exactly, then compares independent
unseeded samples against a large reference run with a binomial test.

Usage:
    python -m scripts.validate_convergence \
        --n-games 10000 --reference-games 1000000 --samples 5 --seed 42
"""

import argparse
import sys
from pathlib import Path
from scipy import stats

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from toast_sim.simulation.engine import simulate_games
from toast_sim.metrics.win_rate import estimate_from_result


def check_determinism(n_games: int, seed: int) -> bool:
    """Two runs with the same seed must produce identical records."""
    first = simulate_games(n_games, seed=seed)
    second = simulate_games(n_games, seed=seed)

    same = (
        first.wins == second.wins
        and (first.toasts_won == second.toasts_won).all()
        and (first.rolls_used == second.rolls_used).all()
    )
    print(f"  Seed {seed}: {first.summary_line()} / {second.summary_line()}")
    return bool(same)


def check_convergence(
    n_games: int,
    n_samples: int,
    reference_rate: float,
    alpha: float
) -> list:
    """Binomial-test each unseeded sample against the reference rate."""
    failures = []
    for i in range(n_samples):
        sample = simulate_games(n_games, collect_records=False)
        test = stats.binomtest(sample.wins, sample.trials, reference_rate)
        status = "ok" if test.pvalue >= alpha else "FAIL"
        print(
            f"  Sample {i + 1}: {sample.summary_line()} "
            f"(rate {sample.win_rate:.4%}, p={test.pvalue:.3f}) {status}"
        )
        if test.pvalue < alpha:
            failures.append(i + 1)
    return failures


def main():
    parser = argparse.ArgumentParser(description="Validate win-rate convergence")
    parser.add_argument("--n-games", type=int, default=10000, help="Games per sample")
    parser.add_argument(
        "--reference-games", type=int, default=1_000_000,
        help="Games in the reference run"
    )
    parser.add_argument("--samples", type=int, default=5, help="Unseeded samples to test")
    parser.add_argument("--seed", type=int, default=42, help="Seed for the determinism check")
    parser.add_argument(
        "--alpha", type=float, default=0.01,
        help="Significance level per sample (default: 0.01)"
    )
    args = parser.parse_args()

    print("=" * 60)
    print("DETERMINISM")
    print("=" * 60)
    deterministic = check_determinism(args.n_games, args.seed)
    print(f"  Replays identical: {deterministic}")

    print("\n" + "=" * 60)
    print("REFERENCE RUN")
    print("=" * 60)
    reference = simulate_games(args.reference_games, collect_records=False)
    ref_estimate = estimate_from_result(reference)
    print(f"  {reference.summary_line()}")
    print(
        f"  Rate {ref_estimate.rate:.4%} "
        f"(95% CI {ref_estimate.ci_low:.4%} - {ref_estimate.ci_high:.4%})"
    )

    print("\n" + "=" * 60)
    print("CONVERGENCE")
    print("=" * 60)
    failures = check_convergence(
        args.n_games, args.samples, ref_estimate.rate, args.alpha
    )

    if not deterministic or failures:
        print(f"\nFAILED: deterministic={deterministic}, failing samples={failures}")
        sys.exit(1)

    print("\nAll checks passed.")


if __name__ == '__main__':
    main()
