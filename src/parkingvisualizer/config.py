"""
Configuration & Global Constants
================================
This module serves as the central registry for the window geometry, the
parking lot layout and the animation pacing.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (spot count, car width, delays)
   scattered throughout the model and the view.
2. Runtime settings: The few values a user may change from the command line
   are grouped in `AnimationSettings`, everything else is fixed.

Exports:
    WINDOW_WIDTH, WINDOW_HEIGHT (int): Size of the main window in pixels.
    PARKING_SPOTS (int): Number of cars in the lot.
    CAR_COLORS (tuple[str, ...]): Fill color per car size (index = size - 1).
    DEFAULT_STEP_DELAY_MS (int): Pause between two visualized sort steps.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Window
APP_NAME: str = "Parking Visualizer"
WINDOW_WIDTH: int = 800
WINDOW_HEIGHT: int = 600
CONTROL_BAR_HEIGHT: int = 50

# Parking lot
PARKING_SPOTS: int = 10
MIN_CAR_SIZE: int = 1
MAX_CAR_SIZE: int = 5

# Car geometry (pixels)
CAR_WIDTH: int = 50  # width of a size-1 car
CAR_HEIGHT: int = 30
SPACE_BETWEEN_CARS: int = 20
LOT_MARGIN: int = 50

# Red, blue, green, yellow, orange
CAR_COLORS: tuple[str, ...] = ("#FF0000", "#0000FF", "#00FF00", "#FFFF00", "#FFC800")
LOT_BACKGROUND: str = "#FFFFFF"

# Animation
DEFAULT_STEP_DELAY_MS: int = 500
COMPLETED_MESSAGE: str = "Sorting completed"


@dataclass(frozen=True)
class AnimationSettings:
    """Run-time settings chosen on the command line."""
    step_delay_ms: int = DEFAULT_STEP_DELAY_MS
    seed: Optional[int] = None

    @property
    def step_delay_s(self) -> float:
        return self.step_delay_ms / 1000.0
