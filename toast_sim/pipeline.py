"""
Full pipeline orchestration for a simulation run.

Wires config, simulator, win-rate metrics and diagnostics together.
"""

from typing import Dict, Optional
import logging
import time

from .config import SimulationConfig
from .simulation.engine import simulate_games
from .metrics.win_rate import estimate_from_result, DEFAULT_CONFIDENCE
from .diagnostics import compute_diagnostics

logger = logging.getLogger(__name__)


def run_simulation(
    config: Optional[SimulationConfig] = None,
    confidence: float = DEFAULT_CONFIDENCE
) -> Dict:
    """
    Run a full simulation.

    Steps:
    1. Simulate config.n_games independent games
    2. Estimate the win rate with a confidence interval
    3. Summarize per-game records

    Args:
        config: Run parameters (defaults to SimulationConfig())
        confidence: Confidence level for the win-rate interval

    Returns:
        Dict with 'result', 'estimate', 'diagnostics' and 'metadata'
    """
    if config is None:
        config = SimulationConfig()

    logger.info(
        f"Simulating {config.n_games} games "
        f"(deck of {config.deck_size}, seed={config.seed})"
    )

    start = time.perf_counter()
    result = simulate_games(
        n_games=config.n_games,
        seed=config.seed,
        copies_per_value=config.copies_per_value,
        collect_records=config.collect_records,
    )
    elapsed = time.perf_counter() - start

    estimate = estimate_from_result(result, confidence)
    diagnostics = compute_diagnostics(result)

    logger.info(
        f"{result.summary_line()} in {elapsed:.1f}s "
        f"(rate {estimate.rate:.4%}, CI {estimate.ci_low:.4%} - {estimate.ci_high:.4%})"
    )
    if result.incomplete:
        logger.warning(f"{result.incomplete} games ended with too few cards to toast")

    return {
        'result': result,
        'estimate': estimate,
        'diagnostics': diagnostics,
        'metadata': {
            'config': config.to_dict(),
            'confidence': confidence,
            'elapsed_seconds': elapsed,
        },
    }


def results_to_json(results: Dict) -> Dict:
    """Serializable view of run_simulation() output."""
    return {
        'summary': results['result'].summary_line(),
        'result': results['result'].to_dict(),
        'estimate': results['estimate'].to_dict(),
        'diagnostics': results['diagnostics'],
        'metadata': results['metadata'],
    }
