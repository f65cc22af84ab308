"""Card model, hand evaluation and odds calculation."""

from .cards import (
    Card,
    Rank,
    Suit,
    DuplicateCardError,
    full_deck,
    remaining_deck,
    parse_cards,
)
from .evaluator import HandCategory, HandTooSmallError, evaluate, straight_high
from .combinations import enumerate_completions, count_completions
from .odds import (
    OddsConfig,
    CategoryCounts,
    ProbabilityDistribution,
    ComputationCancelled,
    exact_distribution,
    sample_distribution,
    compute_distribution,
    compute_expected_value,
    expected_value,
)

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "DuplicateCardError",
    "full_deck",
    "remaining_deck",
    "parse_cards",
    "HandCategory",
    "HandTooSmallError",
    "evaluate",
    "straight_high",
    "enumerate_completions",
    "count_completions",
    "OddsConfig",
    "CategoryCounts",
    "ProbabilityDistribution",
    "ComputationCancelled",
    "exact_distribution",
    "sample_distribution",
    "compute_distribution",
    "compute_expected_value",
    "expected_value",
]
