"""
Parking Lot State (Data Model)
==============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the current car sizes, the selected algorithm
   and the status message in one place.
2. Ownership: Only the GUI thread mutates this object. A running sort never
   writes here directly; it hands over snapshots which the window applies
   with `apply_snapshot`.
3. Decoupling: Views read from this object; Controllers write to this object.

Classes:
    ParkingLotState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, Sequence

import numpy as np

from parkingvisualizer.config import PARKING_SPOTS, MIN_CAR_SIZE, MAX_CAR_SIZE
from parkingvisualizer.model.algorithms import list_algorithms
from parkingvisualizer.model.errors import InvalidSnapshotError, SortInProgressError

logger = logging.getLogger(__name__)


def random_car_sizes(rng: np.random.Generator, count: int = PARKING_SPOTS) -> tuple[int, ...]:
    """Draws `count` car sizes uniformly from [MIN_CAR_SIZE, MAX_CAR_SIZE]."""
    values = rng.integers(MIN_CAR_SIZE, MAX_CAR_SIZE + 1, size=count)
    return tuple(int(v) for v in values)


@dataclass
class ParkingLotState:
    """
    Holds the entire state of the parking lot shown in the window.
    Pass this instance to the Views and Controllers.
    """
    car_sizes: Optional[tuple[int, ...]] = None
    algorithm: str = field(default_factory=lambda: list_algorithms()[0])
    status_message: str = ""
    is_sorting: bool = False

    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)

    def __post_init__(self) -> None:
        if self.car_sizes is None:
            self.car_sizes = random_car_sizes(self.rng)
        else:
            self._validate(self.car_sizes)
            self.car_sizes = tuple(int(v) for v in self.car_sizes)

    @classmethod
    def with_seed(cls, seed: Optional[int]) -> ParkingLotState:
        return cls(rng=np.random.default_rng(seed))

    def reset(self) -> None:
        """Park a fresh set of random cars and clear the status message."""
        self.car_sizes = random_car_sizes(self.rng)
        self.status_message = ""
        logger.info("Parking lot reset: %s", list(self.car_sizes))

    def apply_snapshot(self, snapshot: Sequence[int]) -> None:
        """Replace the car sizes wholesale with an intermediate sort state."""
        self._validate(snapshot)
        self.car_sizes = tuple(int(v) for v in snapshot)

    def begin_sort(self) -> None:
        if self.is_sorting:
            raise SortInProgressError("A sort is already running")
        self.is_sorting = True
        self.status_message = ""
        logger.info("Sorting %s with %s", list(self.car_sizes), self.algorithm)

    def finish_sort(self, message: str) -> None:
        self.is_sorting = False
        self.status_message = message
        logger.info("Sort finished: %s", list(self.car_sizes))

    @staticmethod
    def _validate(sizes: Sequence[int]) -> None:
        if len(sizes) != PARKING_SPOTS:
            raise InvalidSnapshotError(
                f"Expected {PARKING_SPOTS} car sizes, got {len(sizes)}"
            )
        for value in sizes:
            if not MIN_CAR_SIZE <= value <= MAX_CAR_SIZE:
                raise InvalidSnapshotError(
                    f"Car size {value} outside [{MIN_CAR_SIZE}, {MAX_CAR_SIZE}]"
                )
