#!/usr/bin/env python3
"""Show hand-category odds and call EV for a hand and partial board."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pokerodds.game.cards import parse_cards
from pokerodds.game.odds import (
    OddsConfig,
    DEFAULT_COST,
    DEFAULT_ITERATIONS,
    compute_distribution,
    compute_expected_value,
)
from pokerodds.session import parse_pot_size
from pokerodds.viz import OddsDisplay


def main():
    parser = argparse.ArgumentParser(
        description="Hand-category probabilities and call EV"
    )
    parser.add_argument(
        "-c", "--hole",
        required=True,
        help="Hole cards (e.g., 'AsKs' or 'As Ks')",
    )
    parser.add_argument(
        "-b", "--board",
        default="",
        help="Revealed community cards, 0-5 (e.g., 'QsJs2d')",
    )
    parser.add_argument(
        "-p", "--pot",
        default="100",
        help="Pot size (default: 100; invalid input counts as 0)",
    )
    parser.add_argument(
        "--cost",
        type=float,
        default=DEFAULT_COST,
        help=f"Price of the call (default: {DEFAULT_COST})",
    )
    parser.add_argument(
        "-i", "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Monte Carlo iterations (default: {DEFAULT_ITERATIONS})",
    )
    parser.add_argument(
        "--exact-threshold",
        type=int,
        default=2,
        help="Enumerate exactly when at most this many cards are missing (default: 2)",
    )
    parser.add_argument(
        "-s", "--seed",
        type=int,
        help="Random seed for reproducible sampling",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    console = Console()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console)],
        )

    try:
        hole = parse_cards(args.hole)
        board = parse_cards(args.board)
        config = OddsConfig(
            num_iterations=args.iterations,
            exact_threshold=args.exact_threshold,
            cost=args.cost,
            seed=args.seed,
        )
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return 1

    pot = parse_pot_size(args.pot)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Computing probabilities...")
        try:
            distribution = compute_distribution(hole, board, config=config)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            return 1

    ev = compute_expected_value(distribution, pot, config.cost)

    OddsDisplay(console).show(distribution, ev, hole=hole, board=board)
    console.print(f"[dim]Pot: {pot:.2f}  Call: {config.cost:.2f}[/]")

    return 0


if __name__ == "__main__":
    sys.exit(main())
