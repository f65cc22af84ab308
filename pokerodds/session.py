"""
Sequenced background recomputation.

Card changes, pot changes and refresh ticks each ask for a fresh
computation. A session runs them off the caller's thread and makes sure
an older computation can never overwrite a newer result: every request
gets an increasing sequence number, submitting a request cancels the ones
still running, and only the newest request's result is ever published.
"""

import logging
import math
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from pokerodds.game.cards import CardLike
from pokerodds.game.odds import (
    OddsConfig,
    ProbabilityDistribution,
    ComputationCancelled,
    compute_distribution,
    compute_expected_value,
)

logger = logging.getLogger(__name__)


def parse_pot_size(text: Optional[str]) -> float:
    """
    Parse pot size text, falling back to 0.0 for anything unusable.

    Empty, non-numeric, negative, NaN and infinite input all give 0.0.
    """
    if text is None:
        return 0.0
    try:
        value = float(str(text).strip())
    except ValueError:
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


@dataclass(frozen=True)
class OddsRequest:
    """Inputs for one computation."""
    hole: tuple[CardLike, ...]
    community: tuple[Optional[CardLike], ...] = ()
    pot_size: float = 0.0

    @classmethod
    def from_inputs(
        cls,
        hole: Sequence[CardLike],
        community: Sequence[Optional[CardLike]],
        pot_text: Optional[str],
    ) -> "OddsRequest":
        """Build a request from raw picker values and pot size text."""
        return cls(
            hole=tuple(hole),
            community=tuple(community),
            pot_size=parse_pot_size(pot_text),
        )


@dataclass
class OddsResult:
    """Outcome of one computation."""
    sequence: int
    request: OddsRequest
    distribution: Optional[ProbabilityDistribution] = None
    expected_value: Optional[float] = None
    error: Optional[Exception] = None
    cancelled: bool = False
    stale: bool = False  # Finished after a newer request was submitted

    @property
    def ok(self) -> bool:
        return self.distribution is not None and self.error is None


class OddsSession:
    """
    Runs odds computations in the background, newest request wins.

    Example:
        with OddsSession() as session:
            future = session.submit(OddsRequest(("As", "Ks"), ("Qs", "Js", "2d"), 100.0))
            result = future.result()
    """

    def __init__(
        self,
        config: Optional[OddsConfig] = None,
        max_workers: int = 1,
        on_result: Optional[Callable[[OddsResult], None]] = None,
    ):
        """
        Args:
            config: Odds configuration used for every request
            max_workers: Worker threads for computations
            on_result: Called with every published result
        """
        self.config = config or OddsConfig()
        self.on_result = on_result

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="odds"
        )
        self._lock = threading.Lock()
        # Held across the freshness check and on_result so callbacks stay in order
        self._publish_lock = threading.Lock()
        self._closed = False
        self._sequence = 0
        self._latest: Optional[OddsResult] = None
        self._cancel_events: dict[int, threading.Event] = {}

    @property
    def sequence(self) -> int:
        """Sequence number of the most recently submitted request."""
        with self._lock:
            return self._sequence

    @property
    def latest(self) -> Optional[OddsResult]:
        """Most recently published result."""
        with self._lock:
            return self._latest

    def submit(self, request: OddsRequest) -> "Future[OddsResult]":
        """
        Queue a computation, superseding any that are still in flight.

        Raises:
            RuntimeError: if the session has been closed
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("Cannot submit to a closed OddsSession")
            self._sequence += 1
            sequence = self._sequence
            for event in self._cancel_events.values():
                event.set()
            cancel_event = threading.Event()
            self._cancel_events[sequence] = cancel_event

        return self._executor.submit(self._run, sequence, request, cancel_event)

    def _run(
        self,
        sequence: int,
        request: OddsRequest,
        cancel_event: threading.Event,
    ) -> OddsResult:
        result = OddsResult(sequence=sequence, request=request)
        try:
            if cancel_event.is_set():
                raise ComputationCancelled("Superseded before start")
            distribution = compute_distribution(
                request.hole,
                request.community,
                config=self.config,
                should_cancel=cancel_event.is_set,
            )
            result.distribution = distribution
            result.expected_value = compute_expected_value(
                distribution, request.pot_size, self.config.cost
            )
        except ComputationCancelled:
            logger.info("Computation %d cancelled by a newer request", sequence)
            result.cancelled = True
        except ValueError as e:
            logger.info("Computation %d rejected: %s", sequence, e)
            result.error = e
        finally:
            with self._lock:
                self._cancel_events.pop(sequence, None)

        if not result.cancelled:
            self._publish(result)
        return result

    def _publish(self, result: OddsResult) -> None:
        with self._publish_lock:
            with self._lock:
                latest_sequence = self._sequence
                if result.sequence != latest_sequence:
                    result.stale = True
                else:
                    self._latest = result

            if result.stale:
                logger.info(
                    "Discarding stale result %d (latest request is %d)",
                    result.sequence, latest_sequence,
                )
                return

            if self.on_result is not None:
                self.on_result(result)

    def close(self) -> None:
        """Cancel in-flight work and shut down the worker threads."""
        with self._lock:
            self._closed = True
            for event in self._cancel_events.values():
                event.set()
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "OddsSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
