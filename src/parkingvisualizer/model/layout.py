"""
Parking Lot Layout
==================
Converts the car sizes into rectangles on the drawing surface.

Cars are placed left to right starting at the lot margin. A car that would
cross the right margin starts a new row. The result is a pure function of the
sizes and the surface width, so the widget only has to paint it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from parkingvisualizer.config import (
    CAR_WIDTH, CAR_HEIGHT, SPACE_BETWEEN_CARS, LOT_MARGIN, CAR_COLORS, MIN_CAR_SIZE, MAX_CAR_SIZE
)


@dataclass(frozen=True)
class CarRect:
    x: int
    y: int
    width: int
    height: int
    size: int
    color: str


def car_color(size: int) -> str:
    """Fill color for a car of the given size bucket."""
    if not MIN_CAR_SIZE <= size <= MAX_CAR_SIZE:
        raise ValueError(f"No color for car size {size}")
    return CAR_COLORS[size - MIN_CAR_SIZE]


def layout_cars(sizes: Sequence[int], surface_width: int) -> list[CarRect]:
    rects: list[CarRect] = []
    x = LOT_MARGIN
    y = LOT_MARGIN
    for size in sizes:
        width = size * CAR_WIDTH
        if x + width > surface_width - LOT_MARGIN:
            x = LOT_MARGIN
            y += CAR_HEIGHT + SPACE_BETWEEN_CARS
        rects.append(CarRect(x, y, width, CAR_HEIGHT, size, car_color(size)))
        x += width + SPACE_BETWEEN_CARS
    return rects
