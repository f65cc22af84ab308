"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from pokerodds.game.cards import parse_cards


@pytest.fixture
def cards():
    """Parse a card string like 'As Kh 2c' into a list of Cards."""
    return parse_cards


@pytest.fixture
def rng():
    """Seeded numpy generator for reproducible sampling."""
    return np.random.default_rng(12345)


@pytest.fixture
def turn_spot(cards):
    """Nut flush draw plus open royal draw on the turn: As Ks / Qs Js 2d 7c."""
    return cards("AsKs"), cards("QsJs2d7c")


@pytest.fixture
def flop_spot(cards):
    """Hole cards and a three-card flop: Ah Kd / Qc 7s 2h."""
    return cards("AhKd"), cards("Qc7s2h")
