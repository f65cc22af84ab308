"""
Hand-category odds and call EV.

Given two hole cards and up to five community cards, computes the
probability of ending with each hand category once the board is complete:

- board complete: a single evaluation, all mass on one category
- one or two cards missing: exact enumeration of every completion
- three or more missing: Monte Carlo sampling of random completions

The distribution then feeds a simple EV for a fixed-price call.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional, Sequence, Union

import numpy as np

from .cards import Card, CardLike, check_distinct, parse_cards, remaining_deck
from .combinations import enumerate_completions
from .evaluator import HandCategory, HandTooSmallError, evaluate, MIN_CARDS

logger = logging.getLogger(__name__)

BOARD_SIZE = 5
DEFAULT_ITERATIONS = 10000
DEFAULT_COST = 20.0

CancelCheck = Callable[[], bool]


class ComputationCancelled(Exception):
    """Raised when a caller's cancel check asks a computation to stop."""


@dataclass
class OddsConfig:
    """Configuration for odds calculation."""
    num_iterations: int = DEFAULT_ITERATIONS  # Monte Carlo trials
    exact_threshold: int = 2                  # Max missing cards solved exactly
    cost: float = DEFAULT_COST                # Price of the hypothetical call
    seed: Optional[int] = None                # Seed when no rng is passed in

    def __post_init__(self):
        if self.num_iterations < 1:
            raise ValueError(f"num_iterations must be positive, got {self.num_iterations}")
        if not 0 <= self.exact_threshold <= BOARD_SIZE:
            raise ValueError(
                f"exact_threshold must be between 0 and {BOARD_SIZE}, "
                f"got {self.exact_threshold}"
            )


@dataclass
class CategoryCounts:
    """Per-category tallies of evaluated completions."""
    counts: list[int] = field(default_factory=lambda: [0] * len(HandCategory))

    def add(self, category: HandCategory) -> None:
        self.counts[category] += 1

    def __getitem__(self, category: HandCategory) -> int:
        return self.counts[category]

    @property
    def total(self) -> int:
        return sum(self.counts)


@dataclass(frozen=True)
class ProbabilityDistribution:
    """
    Probability of each hand category, indexed by HandCategory.

    All ten categories are always present. `samples` is the number of
    completions the probabilities were computed from and `exact` tells
    whether they cover the whole sample space or a random sample of it.
    """
    probabilities: tuple[float, ...]
    samples: int = 1
    exact: bool = True

    def __post_init__(self):
        if len(self.probabilities) != len(HandCategory):
            raise ValueError(
                f"Expected {len(HandCategory)} probabilities, got {len(self.probabilities)}"
            )

    @classmethod
    def from_counts(cls, counts: CategoryCounts, exact: bool = True) -> "ProbabilityDistribution":
        total = counts.total
        if total == 0:
            raise ValueError("Cannot build a distribution from zero samples")
        return cls(
            probabilities=tuple(c / total for c in counts.counts),
            samples=total,
            exact=exact,
        )

    @classmethod
    def degenerate(cls, category: HandCategory) -> "ProbabilityDistribution":
        """All probability on a single, already decided category."""
        return cls(
            probabilities=tuple(
                1.0 if c == category else 0.0 for c in HandCategory
            ),
            samples=1,
            exact=True,
        )

    def probability(self, category: HandCategory) -> float:
        return self.probabilities[category]

    def __getitem__(self, category: HandCategory) -> float:
        return self.probabilities[category]

    def __iter__(self) -> Iterator[HandCategory]:
        return iter(HandCategory)

    def __len__(self) -> int:
        return len(self.probabilities)

    def items(self) -> Iterator[tuple[HandCategory, float]]:
        return zip(HandCategory, self.probabilities)

    @property
    def total(self) -> float:
        return math.fsum(self.probabilities)

    def is_normalized(self, tolerance: float = 1e-6) -> bool:
        return abs(self.total - 1.0) <= tolerance

    def better_than_high_card(self) -> float:
        """Probability of making a pair or better."""
        return math.fsum(self.probabilities[HandCategory.PAIR:])

    def most_likely(self) -> HandCategory:
        return HandCategory(int(np.argmax(self.probabilities)))

    def standard_error(self, category: HandCategory) -> float:
        """Sampling standard error sqrt(p(1-p)/N); 0 for exact results."""
        if self.exact:
            return 0.0
        p = self.probabilities[category]
        return math.sqrt(p * (1.0 - p) / self.samples)

    def as_dict(self) -> dict[str, float]:
        """Category display name -> probability, weakest first."""
        return {c.label: p for c, p in self.items()}


def _known_cards(
    hole: Union[str, Iterable[CardLike]],
    community: Union[str, Iterable[Optional[CardLike]]],
) -> tuple[list[Card], list[Card]]:
    """Parse hole cards and set community slots, rejecting bad input."""
    hole_cards = parse_cards(hole)
    if len(hole_cards) != 2:
        raise ValueError(f"Hole cards must be exactly 2 cards, got {len(hole_cards)}")

    slots = parse_cards(community) if isinstance(community, str) else list(community)
    board = parse_cards([c for c in slots if c is not None])
    if len(board) > BOARD_SIZE:
        raise ValueError(
            f"At most {BOARD_SIZE} community cards allowed, got {len(board)}"
        )

    check_distinct(hole_cards + board)
    return hole_cards, board


def _check_missing(known: Sequence[Card], missing: int) -> None:
    if missing < 1:
        raise ValueError(f"missing must be at least 1, got {missing}")
    if len(known) + missing < MIN_CARDS:
        raise HandTooSmallError(
            f"{len(known)} known + {missing} drawn cards is fewer than {MIN_CARDS}"
        )


def exact_counts(
    hole: Sequence[Card],
    community: Sequence[Card],
    missing: int,
    should_cancel: Optional[CancelCheck] = None,
) -> CategoryCounts:
    """
    Evaluate every way to draw `missing` cards and tally the categories.

    The tally total always equals C(remaining deck size, missing).
    """
    known = list(hole) + list(community)
    _check_missing(known, missing)
    deck = remaining_deck(known)

    counts = CategoryCounts()
    for combo in enumerate_completions(deck, missing):
        if should_cancel is not None and should_cancel():
            raise ComputationCancelled("Exact enumeration cancelled")
        counts.add(evaluate(known + list(combo)))
    return counts


def exact_distribution(
    hole: Sequence[Card],
    community: Sequence[Card],
    missing: int,
    should_cancel: Optional[CancelCheck] = None,
) -> ProbabilityDistribution:
    """
    Exact category distribution over all completions of the board.

    Args:
        hole: The two hole cards
        community: Community cards already revealed
        missing: Number of community cards still to come
        should_cancel: Optional callback polled between completions

    Returns:
        Distribution covering the whole sample space (deterministic)
    """
    counts = exact_counts(hole, community, missing, should_cancel)
    logger.debug("Enumerated %d completions of %d missing cards", counts.total, missing)
    return ProbabilityDistribution.from_counts(counts, exact=True)


def sample_distribution(
    hole: Sequence[Card],
    community: Sequence[Card],
    missing: int,
    iterations: int = DEFAULT_ITERATIONS,
    rng: Optional[np.random.Generator] = None,
    should_cancel: Optional[CancelCheck] = None,
) -> ProbabilityDistribution:
    """
    Monte Carlo estimate of the category distribution.

    Each trial draws `missing` distinct cards uniformly from the remaining
    deck. The same seeded generator and iteration count always reproduce
    the same result.

    Args:
        hole: The two hole cards
        community: Community cards already revealed
        missing: Number of community cards still to come
        iterations: Number of random completions
        rng: numpy random Generator (fresh unseeded one if omitted)
        should_cancel: Optional callback polled between trials

    Returns:
        Estimated distribution with `exact=False`
    """
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    known = list(hole) + list(community)
    _check_missing(known, missing)
    deck = remaining_deck(known)
    if rng is None:
        rng = np.random.default_rng()

    counts = CategoryCounts()
    for _ in range(iterations):
        if should_cancel is not None and should_cancel():
            raise ComputationCancelled("Monte Carlo sampling cancelled")
        drawn = rng.choice(len(deck), size=missing, replace=False)
        counts.add(evaluate(known + [deck[i] for i in drawn]))

    logger.debug("Sampled %d completions of %d missing cards", iterations, missing)
    return ProbabilityDistribution.from_counts(counts, exact=False)


def compute_distribution(
    hole: Union[str, Iterable[CardLike]],
    community: Union[str, Iterable[Optional[CardLike]]] = (),
    config: Optional[OddsConfig] = None,
    rng: Optional[np.random.Generator] = None,
    should_cancel: Optional[CancelCheck] = None,
) -> ProbabilityDistribution:
    """
    Category distribution for a hand given a partially revealed board.

    Args:
        hole: Two hole cards (Cards or strings like 'As')
        community: Up to five community slots; None marks an unset slot
        config: Odds configuration (defaults if omitted)
        rng: Random generator for the sampling path (seeded from
            config.seed if omitted)
        should_cancel: Optional callback polled between trials

    Raises:
        DuplicateCardError: a card appears twice among hole + community
        ValueError: wrong number of hole cards or community slots
    """
    config = config or OddsConfig()
    hole_cards, board = _known_cards(hole, community)
    missing = BOARD_SIZE - len(board)

    if missing <= 0:
        known = hole_cards + board
        if len(known) < MIN_CARDS:
            raise HandTooSmallError(f"Need at least {MIN_CARDS} known cards, got {len(known)}")
        logger.debug("Board complete, evaluating %s", " ".join(map(str, known)))
        return ProbabilityDistribution.degenerate(evaluate(known))

    if missing <= config.exact_threshold:
        logger.debug("%d cards missing, using exact enumeration", missing)
        return exact_distribution(hole_cards, board, missing, should_cancel)

    logger.debug(
        "%d cards missing, sampling %d completions", missing, config.num_iterations
    )
    if rng is None:
        rng = np.random.default_rng(config.seed)
    return sample_distribution(
        hole_cards, board, missing,
        iterations=config.num_iterations,
        rng=rng,
        should_cancel=should_cancel,
    )


def compute_expected_value(
    distribution: ProbabilityDistribution,
    pot_size: float,
    cost: float = DEFAULT_COST,
) -> float:
    """
    EV of calling `cost` to win `pot_size` with a pair or better.

    EV = p * pot_size - (1 - p) * cost, where p is the probability of
    finishing with any category above High Card.
    """
    if pot_size < 0:
        raise ValueError(f"Pot size must be non-negative, got {pot_size}")
    p = distribution.better_than_high_card()
    return p * pot_size - (1.0 - p) * cost


expected_value = compute_expected_value
