"""
Main Application Window
=======================
The primary GUI container: status label on top, the parking lot in the
middle and the control bar (Sort, Reset, algorithm selector) at the bottom.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the application.
2. Routing: It connects the buttons to the state and to the sort worker, and
   applies the snapshots the worker sends back.
"""
import logging
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QComboBox
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont

from parkingvisualizer.config import APP_NAME, WINDOW_WIDTH, WINDOW_HEIGHT, AnimationSettings
from parkingvisualizer.controller.workers import SortWorker
from parkingvisualizer.model.algorithms import list_algorithms
from parkingvisualizer.model.state import ParkingLotState
from parkingvisualizer.view.widgets.parking_lot import ParkingLotWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, lot_state: ParkingLotState, settings: Optional[AnimationSettings] = None) -> None:
        super().__init__()
        self.lot: ParkingLotState = lot_state
        self.settings: AnimationSettings = settings or AnimationSettings()
        self.sort_worker: Optional[SortWorker] = None

        self.setWindowTitle(APP_NAME)
        self.setFixedSize(WINDOW_WIDTH, WINDOW_HEIGHT)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- 1. STATUS ---
        self.lbl_status = QLabel("")
        self.lbl_status.setAlignment(Qt.AlignCenter)
        self.lbl_status.setFont(QFont("Arial", 20, QFont.Bold))
        main_layout.addWidget(self.lbl_status)

        # --- 2. PARKING LOT ---
        self.lot_view = ParkingLotWidget()
        main_layout.addWidget(self.lot_view, stretch=1)

        # --- 3. CONTROLS ---
        controls = QHBoxLayout()
        controls.addStretch()

        self.btn_sort = QPushButton("Sort")
        self.btn_sort.clicked.connect(self.on_sort_clicked)
        controls.addWidget(self.btn_sort)

        self.btn_reset = QPushButton("Reset")
        self.btn_reset.clicked.connect(self.on_reset_clicked)
        controls.addWidget(self.btn_reset)

        self.cmb_algorithm = QComboBox()
        self.cmb_algorithm.addItems(list_algorithms())
        self.cmb_algorithm.setCurrentText(self.lot.algorithm)
        self.cmb_algorithm.currentTextChanged.connect(self.on_algorithm_changed)
        controls.addWidget(self.cmb_algorithm)

        controls.addStretch()
        main_layout.addLayout(controls)

        # Initial Render
        self.refresh_ui_from_state()

    # --- HELPER METHODS ---

    def refresh_ui_from_state(self) -> None:
        """Pushes the state into the widgets."""
        self.lot_view.set_car_sizes(self.lot.car_sizes)
        self.lbl_status.setText(self.lot.status_message)
        self._set_controls_enabled(not self.lot.is_sorting)

    def _set_controls_enabled(self, enabled: bool) -> None:
        self.btn_sort.setEnabled(enabled)
        self.btn_reset.setEnabled(enabled)
        self.cmb_algorithm.setEnabled(enabled)

    # --- SLOTS ---

    def on_algorithm_changed(self, name: str) -> None:
        self.lot.algorithm = name
        logger.debug("Algorithm selected: %s", name)

    def on_reset_clicked(self) -> None:
        if self.lot.is_sorting:
            logger.warning("Reset ignored, a sort is running.")
            return
        self.lot.reset()
        self.refresh_ui_from_state()

    def on_sort_clicked(self) -> None:
        if self.lot.is_sorting:
            logger.warning("Sort ignored, another sort is still running.")
            return

        self.lot.begin_sort()
        self.refresh_ui_from_state()

        self.sort_worker = SortWorker(
            algorithm=self.lot.algorithm,
            car_sizes=self.lot.car_sizes,
            step_delay_s=self.settings.step_delay_s,
        )
        self.sort_worker.step_ready.connect(self.on_step_ready)
        self.sort_worker.completed.connect(self.on_sort_finished)
        self.sort_worker.error_occurred.connect(self.on_sort_error)
        self.sort_worker.start()

    def on_step_ready(self, snapshot: tuple) -> None:
        """Slot called in the GUI thread for every sort step."""
        self.lot.apply_snapshot(snapshot)
        self.lot_view.set_car_sizes(self.lot.car_sizes)

    def on_sort_finished(self, message: str) -> None:
        self.lot.finish_sort(message)
        self.refresh_ui_from_state()

    def on_sort_error(self, message: str) -> None:
        self.lot.finish_sort(f"Sorting failed: {message}")
        self.refresh_ui_from_state()

    def closeEvent(self, event, /) -> None:
        """Lets a running sort finish undelayed before the window goes away."""
        if self.sort_worker is not None and self.sort_worker.isRunning():
            logger.info("Window closing, stopping the running sort...")
            self.sort_worker.stop()
            self.sort_worker.wait()
        event.accept()
