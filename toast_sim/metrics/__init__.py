"""Win-rate metrics for simulated games."""

from .win_rate import WinRateEstimate, estimate_win_rate, estimate_from_result

__all__ = ['WinRateEstimate', 'estimate_win_rate', 'estimate_from_result']
