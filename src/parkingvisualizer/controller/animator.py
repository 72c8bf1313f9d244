"""
Paced Step Playback
===================
Drives a sort step generator at a fixed pace.

The animator is plain Python with no Qt dependency: it pulls snapshots from a
step generator, passes every snapshot to a callback and waits a fixed delay
before asking for the next one. `SortWorker` runs it in a background thread
and plugs a Qt signal in as the callback.

Interrupting the wait does not cancel the sort. The interruption is logged
and the remaining steps are delivered without delay, so the final state is
the same as for an uninterrupted run.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable

from parkingvisualizer.model.algorithms import Snapshot

logger = logging.getLogger(__name__)


class Animator:
    def __init__(
        self,
        steps: Iterable[Snapshot],
        on_step: Callable[[Snapshot], None],
        delay_s: float,
    ) -> None:
        if delay_s < 0:
            raise ValueError(f"Step delay must not be negative, got {delay_s}")
        self.steps = steps
        self.on_step = on_step
        self.delay_s = delay_s
        self._interrupted = threading.Event()
        self._reported = False

    @property
    def interrupted(self) -> bool:
        return self._interrupted.is_set()

    def interrupt(self) -> None:
        """Wakes a pending delay and skips all later ones. Thread-safe."""
        self._interrupted.set()

    def run(self) -> int:
        """Plays all steps and returns how many were delivered."""
        count = 0
        for snapshot in self.steps:
            count += 1
            logger.debug("Step %d: %s", count, list(snapshot))
            self.on_step(snapshot)
            self._pause()
        return count

    def _pause(self) -> None:
        if self._interrupted.is_set() or self._interrupted.wait(self.delay_s):
            if not self._reported:
                self._reported = True
                logger.warning("Step delay interrupted, finishing the sort without pacing.")
