import pytest

from dominionsim.model.catalog import CARDS


def deck_from_top(*ids):
    """Build a deck whose first id is drawn first under the identity shuffle."""
    return [CARDS[i] for i in reversed(ids)]


@pytest.fixture
def identity_rng():
    # j == i at every Fisher-Yates step, so the pile keeps its order
    return lambda: 0.9999999


@pytest.fixture
def stacked():
    return deck_from_top
