"""Tests for terminal display."""

import io

import pytest
from rich.console import Console

from pokerodds.game.cards import parse_cards
from pokerodds.game.evaluator import HandCategory
from pokerodds.game.odds import OddsConfig, ProbabilityDistribution, compute_distribution
from pokerodds.viz.display import OddsDisplay, probability_style, format_ev


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=100, color_system=None)


class TestProbabilityStyle:
    @pytest.mark.parametrize("p, color", [
        (0.0, "red"),
        (0.05, "red"),
        (0.10, "orange3"),
        (0.2, "orange3"),
        (0.3, "yellow"),
        (0.4, "green"),
        (1.0, "green"),
        (1.5, "green"),
        (-0.1, "red"),
    ])
    def test_bands(self, p, color):
        assert probability_style(p) == color


class TestFormatEv:
    def test_positive(self):
        assert format_ev(40.0) == "$40.00"

    def test_negative(self):
        assert format_ev(-12.5) == "-$12.50"


class TestOddsDisplay:
    def test_table_has_every_category(self, console):
        dist = ProbabilityDistribution.degenerate(HandCategory.FLUSH)
        table = OddsDisplay(console).build_table(dist)
        assert table.row_count == 10
        assert len(table.columns) == 2

    def test_sampled_table_shows_error(self, console):
        dist = compute_distribution(["As", "Ks"], [], OddsConfig(num_iterations=200, seed=4))
        table = OddsDisplay(console).build_table(dist)
        assert len(table.columns) == 3

    def test_show(self, console):
        dist = ProbabilityDistribution.degenerate(HandCategory.ROYAL_FLUSH)
        OddsDisplay(console).show(
            dist, 100.0,
            hole=parse_cards("AsKs"),
            board=parse_cards("QsJsTs2d3c"),
        )
        output = console.file.getvalue()
        assert "Royal Flush" in output
        assert "100.00%" in output
        assert "$100.00" in output
        assert "Qs Js Ts 2d 3c" in output
