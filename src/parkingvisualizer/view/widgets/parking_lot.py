"""
Parking Lot Drawing Surface
"""
from typing import Sequence

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QPainter, QColor, QPaintEvent
from PySide6.QtWidgets import QWidget

from parkingvisualizer.config import LOT_BACKGROUND, WINDOW_WIDTH, WINDOW_HEIGHT, CONTROL_BAR_HEIGHT
from parkingvisualizer.model.layout import layout_cars


class ParkingLotWidget(QWidget):
    """Paints one rectangle per car; holds a copy of the sizes it shows."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._car_sizes: tuple[int, ...] = ()
        self.setAutoFillBackground(True)
        palette = self.palette()
        palette.setColor(self.backgroundRole(), QColor(LOT_BACKGROUND))
        self.setPalette(palette)

    def sizeHint(self) -> QSize:
        return QSize(WINDOW_WIDTH, WINDOW_HEIGHT - CONTROL_BAR_HEIGHT)

    def set_car_sizes(self, car_sizes: Sequence[int]) -> None:
        self._car_sizes = tuple(car_sizes)
        self.update()

    def car_sizes(self) -> tuple[int, ...]:
        return self._car_sizes

    def paintEvent(self, event: QPaintEvent, /) -> None:
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), QColor(LOT_BACKGROUND))
            painter.setPen(Qt.NoPen)
            for car in layout_cars(self._car_sizes, self.width()):
                painter.fillRect(car.x, car.y, car.width, car.height, QColor(car.color))
        finally:
            painter.end()
