import logging

import pytest

from parkingvisualizer.config import DEFAULT_STEP_DELAY_MS, AnimationSettings
from parkingvisualizer.logging_config import setup_logging

pytest.importorskip("PySide6.QtWidgets")

from parkingvisualizer import main  # noqa: E402


@pytest.fixture
def package_logger():
    logger = logging.getLogger("parkingvisualizer")
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_defaults():
    settings, args = main.parse_args([])
    assert settings == AnimationSettings(step_delay_ms=DEFAULT_STEP_DELAY_MS, seed=None)
    assert args.log_level == "INFO"
    assert args.log_file is None


def test_delay_and_seed_options():
    settings, _ = main.parse_args(["--delay", "50", "--seed", "42"])
    assert settings.step_delay_ms == 50
    assert settings.step_delay_s == pytest.approx(0.05)
    assert settings.seed == 42


@pytest.mark.parametrize("argv", [["--delay", "-1"], ["--delay", "fast"], ["--log-level", "LOUD"]])
def test_invalid_arguments_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as excinfo:
        main.parse_args(argv)
    assert excinfo.value.code == 2


def test_setup_logging_writes_to_file(tmp_path, package_logger):
    log_file = tmp_path / "visualizer.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logging.getLogger("parkingvisualizer.test").info("lot reset")

    assert len(package_logger.handlers) == 2
    for handler in package_logger.handlers:
        handler.flush()
    assert "parkingvisualizer.test - INFO - lot reset" in log_file.read_text(encoding="utf-8")


def test_setup_logging_replaces_handlers(package_logger):
    setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.WARNING)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.WARNING


def test_delay_error_message_is_readable(capsys):
    with pytest.raises(SystemExit):
        main.parse_args(["--delay", "fast"])
    err = capsys.readouterr().err
    assert "not a whole number: 'fast'" in err
    assert "non_negative_int" not in err
