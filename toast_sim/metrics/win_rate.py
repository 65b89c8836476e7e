"""
Win-rate estimation for simulated games.

Point estimate, binomial standard error and a Wilson score interval,
which stays inside [0, 1] even when wins are rare.
"""

from dataclasses import dataclass
from typing import Dict

import numpy as np
from scipy import stats

from ..types import SimulationResult

DEFAULT_CONFIDENCE = 0.95


@dataclass
class WinRateEstimate:
    """
    Estimated probability of clearing a full deck.

    Attributes:
        wins: Games won
        trials: Games played
        rate: wins / trials
        std_error: Binomial standard error of the rate
        ci_low: Lower bound of the Wilson interval
        ci_high: Upper bound of the Wilson interval
        confidence: Interval confidence level
    """
    wins: int
    trials: int
    rate: float
    std_error: float
    ci_low: float
    ci_high: float
    confidence: float

    def contains(self, p: float) -> bool:
        return self.ci_low <= p <= self.ci_high

    def to_dict(self) -> Dict:
        """Convert to serializable dict."""
        return {
            'wins': self.wins,
            'trials': self.trials,
            'rate': self.rate,
            'std_error': self.std_error,
            'ci_low': self.ci_low,
            'ci_high': self.ci_high,
            'confidence': self.confidence,
        }


def estimate_win_rate(
    wins: int,
    trials: int,
    confidence: float = DEFAULT_CONFIDENCE
) -> WinRateEstimate:
    """
    Estimate the win probability from a win count.

    Args:
        wins: Number of games won
        trials: Number of games played
        confidence: Two-sided confidence level for the interval

    Returns:
        WinRateEstimate (zero trials gives rate 0 and interval [0, 1])
    """
    if not 0 < confidence < 1:
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")
    if trials < 0 or wins < 0 or wins > trials:
        raise ValueError(f"Invalid counts: {wins} wins of {trials} trials")

    if trials == 0:
        return WinRateEstimate(
            wins=0, trials=0, rate=0.0, std_error=0.0,
            ci_low=0.0, ci_high=1.0, confidence=confidence
        )

    p = wins / trials
    std_error = float(np.sqrt(p * (1 - p) / trials))

    z = float(stats.norm.ppf(0.5 + confidence / 2))
    z2 = z * z
    denom = 1 + z2 / trials
    center = (p + z2 / (2 * trials)) / denom
    half_width = z * np.sqrt(p * (1 - p) / trials + z2 / (4 * trials * trials)) / denom

    return WinRateEstimate(
        wins=wins,
        trials=trials,
        rate=p,
        std_error=std_error,
        ci_low=float(max(0.0, center - half_width)),
        ci_high=float(min(1.0, center + half_width)),
        confidence=confidence,
    )


def estimate_from_result(
    result: SimulationResult,
    confidence: float = DEFAULT_CONFIDENCE
) -> WinRateEstimate:
    """Win-rate estimate for a finished simulation."""
    return estimate_win_rate(result.wins, result.trials, confidence)
