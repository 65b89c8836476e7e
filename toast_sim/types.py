"""
Core data structures for the Toast solitaire simulator.

Cards, attempt results, game records and aggregate simulation results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional
import numpy as np


# Face values printed on the cards (and on the die)
MIN_FACE = 1
MAX_FACE = 6
FACE_VALUES = tuple(range(MIN_FACE, MAX_FACE + 1))

# Standard deck: four of each face value
STANDARD_COPIES_PER_VALUE = 4

# Cards drawn per toast
TOAST_SIZE = 3


@dataclass(frozen=True)
class Card:
    """A single card showing one face value (1-6)."""
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, np.integer)):
            raise ValueError(f"Card value must be an int, got {self.value!r}")
        if not MIN_FACE <= self.value <= MAX_FACE:
            raise ValueError(
                f"Card value must be between {MIN_FACE} and {MAX_FACE}, got {self.value}"
            )


class AttemptPhase(Enum):
    """Phase of a single toast attempt."""
    DRAWN = "drawn"      # Toast pulled, no dice rolled yet
    ROLLING = "rolling"  # At least one roll made, toast not yet cleared
    WON = "won"
    LOST = "lost"


class GameOutcome(Enum):
    """How a full-deck game ended."""
    WON = "won"                # Deck exhausted through unbroken wins
    LOST = "lost"              # An attempt ran out of rolls
    INCOMPLETE = "incomplete"  # Too few cards left for another toast


@dataclass
class AttemptResult:
    """
    Result of one toast attempt.

    Attributes:
        won: True if every card in the toast was cleared
        score: Toast value-sum at draw time if won, otherwise None
        rolls_budget: Rolls granted at draw time (the toast's value-sum)
        rolls_used: Roll cycles actually performed
        cards_cleared: Cards removed from the toast
    """
    won: bool
    score: Optional[int]
    rolls_budget: int
    rolls_used: int
    cards_cleared: int

    @property
    def phase(self) -> AttemptPhase:
        return AttemptPhase.WON if self.won else AttemptPhase.LOST


@dataclass
class GameRecord:
    """
    Summary of one full-deck game.

    Attributes:
        outcome: Terminal outcome of the game
        toasts_won: Number of attempts won before the game ended
        score: Sum of the scores of all won toasts
        rolls_used: Roll cycles performed across every attempt
        cards_remaining: Cards still in the deck when the game ended
    """
    outcome: GameOutcome
    toasts_won: int
    score: int
    rolls_used: int
    cards_remaining: int

    @property
    def won(self) -> bool:
        return self.outcome is GameOutcome.WON


@dataclass
class SimulationResult:
    """
    Aggregate result of many independent games.

    Per-game arrays are empty when records were not collected.
    """
    wins: int
    trials: int
    losses: int
    incomplete: int
    won: np.ndarray           # [trials] bool
    toasts_won: np.ndarray    # [trials] int16
    scores: np.ndarray        # [trials] int32
    rolls_used: np.ndarray    # [trials] int32
    seed: Optional[int] = None

    @property
    def win_rate(self) -> float:
        return self.wins / self.trials if self.trials > 0 else 0.0

    @property
    def has_records(self) -> bool:
        return len(self.toasts_won) == self.trials and self.trials > 0

    def summary_line(self) -> str:
        """Headline output: '<wins> of <attempts> attempts won'."""
        return f"{self.wins} of {self.trials} attempts won"

    def to_dict(self) -> Dict:
        """Convert to serializable dict (record arrays omitted)."""
        return {
            'wins': self.wins,
            'trials': self.trials,
            'losses': self.losses,
            'incomplete': self.incomplete,
            'win_rate': self.win_rate,
            'seed': self.seed,
        }
