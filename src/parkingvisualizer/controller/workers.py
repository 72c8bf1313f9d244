"""
Background Workers (Threading)
==============================
This module contains the QThread subclass that plays a sort animation.

Why is this file needed?
------------------------
1. Responsiveness: If we paced the sort on the main thread, the GUI would
   freeze between steps. The worker pushes the sort and its delays to a
   background thread.
2. Signals: Every snapshot travels to the GUI thread through a Qt signal
   (queued connection), so the worker never touches `ParkingLotState`.

Classes:
    SortWorker: Runs one animated sort.
"""
import logging
from typing import Sequence

from PySide6.QtCore import QThread, Signal

from parkingvisualizer.config import COMPLETED_MESSAGE, AnimationSettings
from parkingvisualizer.controller.animator import Animator
from parkingvisualizer.model.algorithms import get_algorithm

logger = logging.getLogger(__name__)


class SortWorker(QThread):
    # Signals to update the UI from the background
    step_ready = Signal(object)  # tuple of car sizes
    completed = Signal(str)  # status message
    error_occurred = Signal(str)

    def __init__(
        self,
        algorithm: str,
        car_sizes: Sequence[int],
        step_delay_s: float = AnimationSettings().step_delay_s,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.algorithm = algorithm
        # Private working copy, the displayed state only changes via step_ready
        self.car_sizes = tuple(car_sizes)
        self.animator = Animator(
            steps=get_algorithm(algorithm)(self.car_sizes),
            on_step=self.step_ready.emit,
            delay_s=step_delay_s,
        )

    def run(self) -> None:
        try:
            logger.info("Starting %s in background thread...", self.algorithm)
            steps = self.animator.run()
            logger.info("%s finished after %d steps.", self.algorithm, steps)
            self.completed.emit(COMPLETED_MESSAGE)

        except Exception as e:
            logger.error(f"Error in SortWorker: {e}")
            self.error_occurred.emit(str(e))

    def stop(self) -> None:
        """Skips the remaining delays; the sort still runs to completion."""
        self.animator.interrupt()
