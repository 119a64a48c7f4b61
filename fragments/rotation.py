# fragments/rotation.py

"""
No-repeat-until-exhausted ("shuffle bag") selection.

Each vocabulary owns one `RotationTracker`. A tracker hands out indices
uniformly at random among those not yet used since the last reset, and
resets when either:
  - every index has been used, or
  - more than `reset_window` seconds have passed since the last reset
    (checked lazily on the next draw, no background timer).

Draws are serialized per tracker. Trackers never lock each other.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from typing import Callable, Dict, Optional, Set

from .vocabularies import Fragment, Vocabulary

logger = logging.getLogger(__name__)

DEFAULT_RESET_WINDOW_SEC = 5 * 60.0

Clock = Callable[[], float]


class RotationTracker:
    def __init__(
        self,
        size: int,
        *,
        reset_window: Optional[float] = DEFAULT_RESET_WINDOW_SEC,
        rng: Optional[random.Random] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        if size <= 0:
            raise ValueError("size must be > 0")
        self.size = size
        self.reset_window = reset_window
        self._rng = rng or random.Random()
        self._clock = clock
        self._used: Set[int] = set()
        self._last_reset = clock()
        self._lock = threading.Lock()

    @property
    def used(self) -> Set[int]:
        with self._lock:
            return set(self._used)

    @property
    def last_reset(self) -> float:
        return self._last_reset

    def reset(self) -> None:
        with self._lock:
            self._used.clear()
            self._last_reset = self._clock()

    def draw_index(self) -> int:
        """Return an index not drawn since the last reset, marking it used."""
        with self._lock:
            now = self._clock()
            if self.reset_window is not None and now - self._last_reset > self.reset_window:
                self._used.clear()
                self._last_reset = now

            if len(self._used) >= self.size:
                self._used.clear()

            available = [i for i in range(self.size) if i not in self._used]
            if not available:
                self._used.clear()
                available = list(range(self.size))

            index = self._rng.choice(available)
            self._used.add(index)
            return index


class RotationRegistry:
    """
    One tracker per vocabulary name, created on first use.

    Build one registry at startup and hand it to whatever renders
    randomized prompts; tests build a fresh one each.
    """

    def __init__(
        self,
        *,
        reset_window: Optional[float] = DEFAULT_RESET_WINDOW_SEC,
        rng: Optional[random.Random] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.reset_window = reset_window
        self._rng = rng
        self._clock = clock
        self._trackers: Dict[str, RotationTracker] = {}
        self._lock = threading.Lock()

    def tracker(self, vocabulary: Vocabulary) -> RotationTracker:
        with self._lock:
            tracker = self._trackers.get(vocabulary.name)
            if tracker is None or tracker.size != len(vocabulary):
                tracker = RotationTracker(
                    len(vocabulary),
                    reset_window=self.reset_window,
                    # Shared seeded rng keeps tests reproducible
                    rng=self._rng,
                    clock=self._clock,
                )
                self._trackers[vocabulary.name] = tracker
            return tracker

    def draw(self, vocabulary: Vocabulary) -> Fragment:
        index = self.tracker(vocabulary).draw_index()
        logger.debug("[Rotation] %s -> #%d", vocabulary.name, index)
        return vocabulary.fragments[index]

    def reset_all(self) -> None:
        with self._lock:
            trackers = list(self._trackers.values())
        for tracker in trackers:
            tracker.reset()
