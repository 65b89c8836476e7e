"""
Deck representation and toast drawing.

A standard deck holds four copies of each face value 1-6 (24 cards),
shuffled with an injected numpy Generator. Cards are drawn from the end
of the sequence.
"""

from collections import Counter
from typing import Dict, Iterable, List

import numpy as np

from ..types import Card, FACE_VALUES, STANDARD_COPIES_PER_VALUE, TOAST_SIZE
from .toast import Toast


class Deck:
    """
    Ordered, shrinking sequence of cards.

    The last card in `cards` is the next one drawn.
    """

    def __init__(self, cards: List[Card]):
        self.cards = list(cards)

    @classmethod
    def new(
        cls,
        rng: np.random.Generator,
        copies_per_value: int = STANDARD_COPIES_PER_VALUE
    ) -> 'Deck':
        """
        Build a shuffled deck.

        Args:
            rng: Random generator used for the permutation
            copies_per_value: Copies of each face value (4 = standard 24-card deck)

        Returns:
            Deck in uniformly random order
        """
        if copies_per_value <= 0:
            raise ValueError(
                f"copies_per_value must be positive, got {copies_per_value}"
            )

        ordered = [
            Card(value)
            for value in FACE_VALUES
            for _ in range(copies_per_value)
        ]
        order = rng.permutation(len(ordered))
        return cls([ordered[i] for i in order])

    @classmethod
    def from_values(cls, values: Iterable[int]) -> 'Deck':
        """Build an unshuffled deck; the last value is drawn first."""
        return cls([Card(v) for v in values])

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(n={len(self.cards)}, total={self.total_value()})"

    def values(self) -> List[int]:
        return [card.value for card in self.cards]

    def total_value(self) -> int:
        return sum(card.value for card in self.cards)

    def average_value(self) -> float:
        if not self.cards:
            raise ValueError("Cannot average an empty deck")
        return self.total_value() / len(self.cards)

    def value_counts(self) -> Dict[int, int]:
        """Count of remaining cards per face value (zero counts included)."""
        counts = Counter(card.value for card in self.cards)
        return {value: counts.get(value, 0) for value in FACE_VALUES}

    def is_empty(self) -> bool:
        return not self.cards

    def can_toast(self) -> bool:
        return len(self.cards) >= TOAST_SIZE

    def toast(self) -> Toast:
        """
        Pull the next three cards off the end of the deck.

        The last card becomes the toast's front card.

        Raises:
            ValueError: If fewer than three cards remain
        """
        if not self.can_toast():
            raise ValueError(
                f"Cannot toast from a deck with {len(self.cards)} cards "
                f"(need {TOAST_SIZE})"
            )

        drawn = [self.cards.pop() for _ in range(TOAST_SIZE)]
        return Toast(drawn)
