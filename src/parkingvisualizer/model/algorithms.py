"""
Step-wise Sort Algorithms
=========================
The four textbook sorts shown by the visualizer, written as generators.

Why is this file needed?
------------------------
1. Animation: Each algorithm yields an immutable snapshot of its private
   working list after every state-changing operation (swap, shift or merge).
   The caller decides what to do between two steps (redraw, wait), so the
   algorithms never touch the GUI or the shared state.
2. Registry: The selector in the window lists the algorithms by their display
   names; `get_algorithm` resolves a name back to its step function.

Functions:
    bubble_sort, selection_sort, insertion_sort, merge_sort: Step generators.
    sort_sizes: Runs an algorithm to the end and returns the sorted list.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterator, Sequence

from parkingvisualizer.model.errors import UnknownAlgorithmError

logger = logging.getLogger(__name__)

Snapshot = tuple[int, ...]
StepFunction = Callable[[Sequence[int]], Iterator[Snapshot]]

_REGISTRY: dict[str, StepFunction] = {}


def register_algorithm(name: str) -> Callable[[StepFunction], StepFunction]:
    """Decorator registering a step function under its display name."""
    def decorator(func: StepFunction) -> StepFunction:
        if name in _REGISTRY:
            raise ValueError(f"Algorithm '{name}' is already registered")
        _REGISTRY[name] = func
        return func
    return decorator


@register_algorithm("Bubble Sort")
def bubble_sort(sizes: Sequence[int]) -> Iterator[Snapshot]:
    cars = list(sizes)
    n = len(cars)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if cars[j] > cars[j + 1]:
                cars[j], cars[j + 1] = cars[j + 1], cars[j]
                yield tuple(cars)


@register_algorithm("Selection Sort")
def selection_sort(sizes: Sequence[int]) -> Iterator[Snapshot]:
    cars = list(sizes)
    n = len(cars)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if cars[j] < cars[min_index]:
                min_index = j
        # A swap with itself changes nothing and is not shown
        if min_index != i:
            cars[i], cars[min_index] = cars[min_index], cars[i]
            yield tuple(cars)


@register_algorithm("Insertion Sort")
def insertion_sort(sizes: Sequence[int]) -> Iterator[Snapshot]:
    """
    Shifts larger cars one slot to the right until the gap reaches the key's
    position. While shifting, the moved car is briefly visible twice.
    """
    cars = list(sizes)
    for i in range(1, len(cars)):
        key = cars[i]
        j = i - 1
        while j >= 0 and cars[j] > key:
            cars[j + 1] = cars[j]
            j -= 1
            yield tuple(cars)
        if j + 1 != i:
            cars[j + 1] = key
            yield tuple(cars)


@register_algorithm("Merge Sort")
def merge_sort(sizes: Sequence[int]) -> Iterator[Snapshot]:
    cars = list(sizes)
    if cars:
        yield from _merge_sort_range(cars, 0, len(cars) - 1)


def _merge_sort_range(cars: list[int], left: int, right: int) -> Iterator[Snapshot]:
    if left >= right:
        return
    middle = (left + right) // 2
    yield from _merge_sort_range(cars, left, middle)
    yield from _merge_sort_range(cars, middle + 1, right)

    before = cars[left:right + 1]
    _merge(cars, left, middle, right)
    if cars[left:right + 1] != before:
        yield tuple(cars)


def _merge(cars: list[int], left: int, middle: int, right: int) -> None:
    """Merges the sorted runs [left, middle] and [middle + 1, right] in place."""
    left_run = cars[left:middle + 1]
    right_run = cars[middle + 1:right + 1]

    i = j = 0
    k = left
    while i < len(left_run) and j < len(right_run):
        # '<=' keeps equal cars in their original order
        if left_run[i] <= right_run[j]:
            cars[k] = left_run[i]
            i += 1
        else:
            cars[k] = right_run[j]
            j += 1
        k += 1

    for value in left_run[i:] + right_run[j:]:
        cars[k] = value
        k += 1


# --- Registry helpers ---

def list_algorithms() -> list[str]:
    """Display names in registration order (the order of the selector)."""
    return list(_REGISTRY.keys())


def get_algorithm(name: str) -> StepFunction:
    func = _REGISTRY.get(name)
    if func is None:
        raise UnknownAlgorithmError(f"No sort algorithm registered for '{name}'")
    return func


def sort_sizes(name: str, sizes: Sequence[int]) -> list[int]:
    """
    Runs the algorithm without any pacing and returns the final state.

    The input sequence is left untouched.
    """
    final: Sequence[int] = sizes
    for snapshot in get_algorithm(name)(sizes):
        final = snapshot
    return list(final)


def count_steps(name: str, sizes: Sequence[int]) -> int:
    """Number of visualized steps the algorithm needs for this input."""
    steps = sum(1 for _ in get_algorithm(name)(sizes))
    logger.debug("%s needs %d steps for %s", name, steps, list(sizes))
    return steps
