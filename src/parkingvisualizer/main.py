"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Reads the command line and sets up logging.
2. Instantiates the Data Model (ParkingLotState).
3. Instantiates the Main Window (View), passing the Model in.
4. Prevents circular import errors by being the orchestrator.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from parkingvisualizer.config import APP_NAME, DEFAULT_STEP_DELAY_MS, AnimationSettings
from parkingvisualizer.logging_config import setup_logging
from parkingvisualizer.model.state import ParkingLotState
from parkingvisualizer.view.main_window import MainWindow

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parking-visualizer",
        description="Animate bubble, selection, insertion and merge sort on a parking lot.",
    )
    parser.add_argument(
        "--delay", type=non_negative_int, default=DEFAULT_STEP_DELAY_MS, metavar="MS",
        help=f"pause between two sort steps in milliseconds (default: {DEFAULT_STEP_DELAY_MS})",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random car sizes")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO")
    parser.add_argument("--log-file", default=None, metavar="PATH", help="also write the log to this file")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> tuple[AnimationSettings, argparse.Namespace]:
    args = build_parser().parse_args(argv)
    settings = AnimationSettings(step_delay_ms=args.delay, seed=args.seed)
    return settings, args


def main(argv: Optional[Sequence[str]] = None) -> int:
    # 1. Command line + Logging
    settings, args = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    # 2. Create the Qt Application (Qt gets only the program name)
    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)

    # 3. Initialize the Data Model
    lot = ParkingLotState.with_seed(settings.seed)
    logger.info("Initial parking lot: %s", list(lot.car_sizes))

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(lot, settings)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
