"""
The toast: a three-card hand cleared front-first by dice.
"""

from typing import List

from ..types import Card


class Toast:
    """
    Cards drawn from the deck for a single attempt.

    Order matters: only the front card can be cleared, whatever the
    other cards show.
    """

    def __init__(self, cards: List[Card]):
        self.cards = list(cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Toast({self.values()})"

    def values(self) -> List[int]:
        return [card.value for card in self.cards]

    def sum(self) -> int:
        """Sum of the remaining card values."""
        return sum(card.value for card in self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def front(self) -> Card:
        if not self.cards:
            raise ValueError("Cannot read the front of an empty toast")
        return self.cards[0]

    def try_clear_first(self, r0: int, r1: int) -> bool:
        """
        Clear the front card if either die matches it.

        A roll matching a card further back is wasted.

        Args:
            r0: First die result
            r1: Second die result

        Returns:
            True if the front card was removed
        """
        front = self.front().value
        if r0 == front or r1 == front:
            self.cards.pop(0)
            return True
        return False
