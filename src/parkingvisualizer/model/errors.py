"""Exceptions raised by the model layer."""


class ParkingVisualizerError(Exception):
    """Base class for all errors raised by this package."""


class InvalidSnapshotError(ParkingVisualizerError, ValueError):
    """A snapshot has the wrong length or a car size outside the allowed range."""


class UnknownAlgorithmError(ParkingVisualizerError, KeyError):
    """No sort algorithm is registered under the requested name."""


class SortInProgressError(ParkingVisualizerError, RuntimeError):
    """A sort was started while another one is still running."""
