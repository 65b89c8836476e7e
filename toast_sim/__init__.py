"""
Toast solitaire simulator.

Monte Carlo estimate of the chance of clearing a 24-card deck
three cards at a time with two dice.
"""

from .types import Card, AttemptPhase, AttemptResult, GameOutcome, GameRecord, SimulationResult
from .cards import Deck, Toast
from .simulation import Die, SequenceDie, Attempt, run_attempt, play_game, simulate_games
from .config import SimulationConfig, RUN_PRESETS
from .pipeline import run_simulation

__version__ = "0.1.0"

__all__ = [
    # Types
    "Card",
    "AttemptPhase",
    "AttemptResult",
    "GameOutcome",
    "GameRecord",
    "SimulationResult",
    # Cards
    "Deck",
    "Toast",
    # Simulation
    "Die",
    "SequenceDie",
    "Attempt",
    "run_attempt",
    "play_game",
    "simulate_games",
    # Config / pipeline
    "SimulationConfig",
    "RUN_PRESETS",
    "run_simulation",
]
