"""
Monte Carlo engine for the Toast solitaire game.

Attempt: one toast played against a fixed roll budget.
Game: attempts repeated against one shuffled deck.
Simulator: many independent games sharing one seeded generator.
"""

from typing import Optional
import logging

import numpy as np

from ..types import (
    AttemptPhase, AttemptResult, GameOutcome, GameRecord, SimulationResult,
    STANDARD_COPIES_PER_VALUE,
)
from ..cards import Deck, Toast
from .dice import Die

logger = logging.getLogger(__name__)

# Progress log interval (games)
PROGRESS_EVERY = 10000


class Attempt:
    """
    State machine for a single toast.

    DRAWN -> ROLLING -> WON | LOST. The roll budget and the winning score
    are both fixed at the toast's value-sum when it is drawn.
    """

    def __init__(self, toast: Toast, die: Die):
        self.toast = toast
        self.die = die
        self.score = toast.sum()
        self.rolls_budget = self.score
        self.rolls_remaining = self.rolls_budget
        self.cards_at_draw = len(toast)
        self.phase = AttemptPhase.DRAWN

    @property
    def rolls_used(self) -> int:
        return self.rolls_budget - self.rolls_remaining

    @property
    def is_finished(self) -> bool:
        return self.phase in (AttemptPhase.WON, AttemptPhase.LOST)

    def step(self) -> AttemptPhase:
        """
        Run one roll cycle: spend a roll, throw two dice, try the front card.

        Returns:
            Phase after the cycle

        Raises:
            RuntimeError: If the attempt already finished
        """
        if self.is_finished:
            raise RuntimeError(f"Attempt already finished ({self.phase.value})")

        if self.toast.is_empty():
            self.phase = AttemptPhase.WON
            return self.phase

        self.phase = AttemptPhase.ROLLING
        self.rolls_remaining -= 1
        self.toast.try_clear_first(self.die.roll(), self.die.roll())

        if self.toast.is_empty():
            self.phase = AttemptPhase.WON
        elif self.rolls_remaining <= 0:
            self.phase = AttemptPhase.LOST
        return self.phase

    def run(self) -> AttemptResult:
        """Roll until the toast clears or the budget runs out."""
        while not self.is_finished:
            self.step()
        return self.result()

    def result(self) -> AttemptResult:
        if not self.is_finished:
            raise RuntimeError("Attempt has not finished")
        won = self.phase is AttemptPhase.WON
        return AttemptResult(
            won=won,
            score=self.score if won else None,
            rolls_budget=self.rolls_budget,
            rolls_used=self.rolls_used,
            cards_cleared=self.cards_at_draw - len(self.toast),
        )


def run_attempt(deck: Deck, die: Die) -> AttemptResult:
    """Draw a toast from the deck and play it out."""
    return Attempt(deck.toast(), die).run()


def play_game(deck: Deck, die: Die) -> GameRecord:
    """
    Play attempts against one deck until it is exhausted or an attempt fails.

    A deck left with 1-2 cards after a win cannot be toasted again; the game
    ends INCOMPLETE rather than drawing.

    Args:
        deck: Deck to play through (consumed)
        die: Die used for every roll

    Returns:
        GameRecord for the finished game
    """
    toasts_won = 0
    score = 0
    rolls_used = 0

    while not deck.is_empty():
        if not deck.can_toast():
            logger.debug(f"Game incomplete with {len(deck)} cards left")
            return GameRecord(
                outcome=GameOutcome.INCOMPLETE,
                toasts_won=toasts_won,
                score=score,
                rolls_used=rolls_used,
                cards_remaining=len(deck),
            )

        result = run_attempt(deck, die)
        rolls_used += result.rolls_used

        if not result.won:
            return GameRecord(
                outcome=GameOutcome.LOST,
                toasts_won=toasts_won,
                score=score,
                rolls_used=rolls_used,
                cards_remaining=len(deck),
            )

        toasts_won += 1
        score += result.score

    return GameRecord(
        outcome=GameOutcome.WON,
        toasts_won=toasts_won,
        score=score,
        rolls_used=rolls_used,
        cards_remaining=0,
    )


def simulate_games(
    n_games: int,
    seed: Optional[int] = None,
    copies_per_value: int = STANDARD_COPIES_PER_VALUE,
    collect_records: bool = True,
    rng: Optional[np.random.Generator] = None
) -> SimulationResult:
    """
    Run independent full-deck games and count the wins.

    Every game gets a freshly shuffled deck. Deck shuffles and dice share a
    single generator, so a fixed seed reproduces the whole run.

    Args:
        n_games: Number of games to play
        seed: Random seed for reproducibility (ignored if rng is given)
        copies_per_value: Copies of each face value per deck
        collect_records: Keep per-game arrays for diagnostics
        rng: Optional pre-built generator

    Returns:
        SimulationResult with win/loss/incomplete counts
    """
    if n_games < 0:
        raise ValueError(f"n_games must be non-negative, got {n_games}")

    if rng is None:
        rng = np.random.default_rng(seed)
    else:
        # Caller-supplied stream: no seed to record
        seed = None
    die = Die(rng)

    n_records = n_games if collect_records else 0
    won = np.zeros(n_records, dtype=bool)
    toasts_won = np.zeros(n_records, dtype=np.int16)
    scores = np.zeros(n_records, dtype=np.int32)
    rolls_used = np.zeros(n_records, dtype=np.int32)

    wins = 0
    losses = 0
    incomplete = 0

    for game in range(n_games):
        record = play_game(Deck.new(rng, copies_per_value), die)

        if record.outcome is GameOutcome.WON:
            wins += 1
        elif record.outcome is GameOutcome.LOST:
            losses += 1
        else:
            incomplete += 1

        if collect_records:
            won[game] = record.won
            toasts_won[game] = record.toasts_won
            scores[game] = record.score
            rolls_used[game] = record.rolls_used

        if (game + 1) % PROGRESS_EVERY == 0:
            logger.info(f"Simulated {game + 1}/{n_games} games ({wins} wins)")

    return SimulationResult(
        wins=wins,
        trials=n_games,
        losses=losses,
        incomplete=incomplete,
        won=won,
        toasts_won=toasts_won,
        scores=scores,
        rolls_used=rolls_used,
        seed=seed,
    )
