"""Odds table and EV display."""

from typing import Optional, Sequence

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from pokerodds.game.cards import Card
from pokerodds.game.evaluator import HandCategory
from pokerodds.game.odds import ProbabilityDistribution

# Upper bound of each band -> text color, checked in order
PROBABILITY_BANDS = [
    (0.10, "red"),
    (0.25, "orange3"),
    (0.40, "yellow"),
]
TOP_BAND = "green"


def probability_style(probability: float) -> str:
    """Color name for a probability: red when unlikely through green when likely."""
    p = max(0.0, min(1.0, probability))
    for upper, color in PROBABILITY_BANDS:
        if p < upper:
            return color
    return TOP_BAND


def format_ev(ev: float) -> str:
    """Format EV as dollars, e.g. '$40.00' or '-$12.50'."""
    sign = "-" if ev < 0 else ""
    return f"{sign}${abs(ev):.2f}"


class OddsDisplay:
    """Render a category distribution and EV with rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def build_table(
        self,
        distribution: ProbabilityDistribution,
        title: str = "Hand Probabilities",
    ) -> Table:
        """Table of categories, strongest first, with percentages."""
        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("Hand", style="white")
        table.add_column("Probability", justify="right")
        if not distribution.exact:
            table.add_column("± SE", justify="right", style="dim")

        for category in reversed(HandCategory):
            p = distribution[category]
            cell = Text(f"{p * 100:.2f}%", style=Style(color=probability_style(p)))
            row = [category.label, cell]
            if not distribution.exact:
                row.append(f"{distribution.standard_error(category) * 100:.2f}%")
            table.add_row(*row)

        return table

    def show(
        self,
        distribution: ProbabilityDistribution,
        ev: float,
        hole: Sequence[Card] = (),
        board: Sequence[Card] = (),
    ) -> None:
        """Print cards, the probability table and the EV."""
        if hole:
            self.console.print(f"[bold]Hole:[/] {' '.join(str(c) for c in hole)}")
        if board:
            self.console.print(f"[bold]Board:[/] {' '.join(str(c) for c in board)}")

        method = "exact" if distribution.exact else f"{distribution.samples} samples"
        self.console.print(f"[dim]Method: {method}[/]")
        self.console.print(self.build_table(distribution))

        color = "green" if ev >= 0 else "red"
        self.console.print(f"[bold]Expected Value:[/] [{color}]{format_ev(ev)}[/]")
