"""Deck and toast card containers."""

from .deck import Deck
from .toast import Toast

__all__ = ["Deck", "Toast"]
