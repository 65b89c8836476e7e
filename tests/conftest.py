import numpy as np
import pytest

from toast_sim.cards import Deck


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so card orders and rolls replay between runs."""
    return np.random.default_rng(1234)


@pytest.fixture
def standard_deck(rng: np.random.Generator) -> Deck:
    """Freshly shuffled 24-card deck."""
    return Deck.new(rng)
