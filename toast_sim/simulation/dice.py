"""
Six-sided dice driven by an injected random source.

Rolls are drawn from a numpy Generator in blocks and served one at a
time, so seeded runs replay exactly. SequenceDie replays fixed values
for scripted scenarios.
"""

from typing import Optional, Sequence

import numpy as np

from ..types import MIN_FACE, MAX_FACE

# Rolls fetched from the generator per refill
ROLL_BLOCK_SIZE = 4096


class Die:
    """
    Uniform six-sided die.

    Each call to roll() is independent of every earlier call. The die
    owns no global state; pass the same Generator to share a stream.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        block_size: int = ROLL_BLOCK_SIZE
    ):
        if block_size <= 0:
            raise ValueError(f"block_size must be positive, got {block_size}")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.block_size = block_size
        self._block = np.empty(0, dtype=np.int8)
        self._pos = 0

    def _refill(self) -> None:
        self._block = self.rng.integers(
            MIN_FACE, MAX_FACE + 1, size=self.block_size, dtype=np.int8
        )
        self._pos = 0

    def roll(self) -> int:
        """Return a face value in [1, 6]."""
        if self._pos >= len(self._block):
            self._refill()
        value = int(self._block[self._pos])
        self._pos += 1
        return value


class SequenceDie(Die):
    """
    Replays die values from a pre-recorded sequence.

    Raises IndexError when the sequence is exhausted.
    """

    def __init__(self, sequence: Sequence[int]):
        for value in sequence:
            if not MIN_FACE <= value <= MAX_FACE:
                raise ValueError(f"Die value must be 1-6, got {value}")
        self.sequence = list(sequence)
        # The whole sequence is the one and only block; there is no generator
        self.rng = None
        self.block_size = len(self.sequence)
        self._block = np.asarray(self.sequence, dtype=np.int8)
        self._pos = 0

    def _refill(self) -> None:
        raise IndexError(f"Die sequence exhausted after {self._pos} rolls")

    @property
    def index(self) -> int:
        """Number of values already replayed."""
        return self._pos

    @property
    def remaining(self) -> int:
        """Number of values left to replay."""
        return len(self.sequence) - self._pos
