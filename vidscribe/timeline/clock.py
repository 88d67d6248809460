"""Monotonic session clock anchored at recording start."""

import time
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class SessionClock:
    """Elapsed-seconds clock for one recording.

    All chunk timestamps are offsets from the instant ``start()`` is called.
    The time source must be monotonic; wall-clock adjustments would break
    the ordering of chunk boundaries.
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic):
        self._time_source = time_source
        self._anchor: Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self._anchor is not None

    def start(self) -> None:
        """Anchor time zero at the current reading."""
        self._anchor = self._time_source()
        logger.debug(f"Session clock anchored at {self._anchor:.3f}")

    def now(self) -> float:
        """Seconds elapsed since ``start()``; 0.0 when not anchored."""
        if self._anchor is None:
            return 0.0
        return self._time_source() - self._anchor

    def reset(self) -> None:
        self._anchor = None
