"""
Per-game diagnostics for a simulation run.

How far games got before failing, what the won toasts scored and how
many rolls were spent.
"""

from typing import Dict, List

import numpy as np

from .types import SimulationResult
from .metrics.win_rate import WinRateEstimate


def toasts_won_distribution(result: SimulationResult) -> List[int]:
    """
    Histogram of toasts won per game.

    Index k holds the number of games that won exactly k toasts.
    """
    if not result.has_records:
        return []
    return np.bincount(result.toasts_won.astype(np.int64)).tolist()


def compute_diagnostics(result: SimulationResult) -> Dict:
    """
    Summarize per-game records.

    Args:
        result: Simulation result with records collected

    Returns:
        Dict of outcome counts plus record summaries when available
    """
    diag = {
        'trials': result.trials,
        'wins': result.wins,
        'losses': result.losses,
        'incomplete': result.incomplete,
    }

    if not result.has_records:
        return diag

    won = result.won
    diag.update({
        'toasts_won_distribution': toasts_won_distribution(result),
        'mean_toasts_won': float(result.toasts_won.mean()),
        'mean_rolls_used': float(result.rolls_used.mean()),
        'mean_score': float(result.scores.mean()),
        'mean_score_won_games': float(result.scores[won].mean()) if won.any() else 0.0,
        'first_toast_win_rate': float((result.toasts_won > 0).mean()),
    })
    return diag


def format_diagnostics(diag: Dict, estimate: WinRateEstimate = None) -> str:
    """Render diagnostics as a plain text block."""
    lines = []

    if estimate is not None:
        lines.append(
            f"Win rate: {estimate.rate:.4%} "
            f"(SE {estimate.std_error:.4%}, "
            f"{estimate.confidence:.0%} CI {estimate.ci_low:.4%} - {estimate.ci_high:.4%})"
        )

    lines.append(
        f"Outcomes: {diag['wins']} won, {diag['losses']} lost, "
        f"{diag['incomplete']} incomplete"
    )

    if 'toasts_won_distribution' in diag:
        lines.append(f"Mean toasts won: {diag['mean_toasts_won']:.2f}")
        lines.append(f"Mean rolls used: {diag['mean_rolls_used']:.2f}")
        lines.append(f"First toast cleared: {diag['first_toast_win_rate']:.2%}")
        if diag['wins'] > 0:
            lines.append(f"Mean score (won games): {diag['mean_score_won_games']:.2f}")
        lines.append("Toasts won per game:")
        total = max(diag['trials'], 1)
        for k, count in enumerate(diag['toasts_won_distribution']):
            lines.append(f"  {k:2d}: {count:7d} ({count / total:.2%})")

    return "\n".join(lines)
