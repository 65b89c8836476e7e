"""Monte Carlo simulation engine."""

from .dice import Die, SequenceDie
from .engine import Attempt, run_attempt, play_game, simulate_games

__all__ = ["Die", "SequenceDie", "Attempt", "run_attempt", "play_game", "simulate_games"]
