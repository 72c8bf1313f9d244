import logging
import threading
import time

import pytest

from parkingvisualizer.controller.animator import Animator
from parkingvisualizer.model.algorithms import get_algorithm


def test_delivers_every_step_in_order(example_sizes):
    seen = []
    animator = Animator(get_algorithm("Bubble Sort")(example_sizes), seen.append, delay_s=0)
    count = animator.run()

    assert count == len(seen) > 0
    assert list(seen[-1]) == sorted(example_sizes)
    assert seen == list(get_algorithm("Bubble Sort")(example_sizes))


def test_sorted_lot_finishes_without_steps():
    seen = []
    assert Animator(get_algorithm("Merge Sort")([1, 2, 3]), seen.append, delay_s=10).run() == 0
    assert seen == []


def test_waits_between_steps():
    steps = [(1,), (2,), (3,)]
    animator = Animator(steps, lambda snapshot: None, delay_s=0.05)
    started = time.monotonic()
    animator.run()
    assert time.monotonic() - started >= 0.14


def test_negative_delay_is_rejected():
    with pytest.raises(ValueError):
        Animator([], lambda snapshot: None, delay_s=-0.1)


def test_interrupt_skips_delays_but_keeps_outcome(algorithm, example_sizes, caplog):
    seen = []
    first_step = threading.Event()

    def on_step(snapshot):
        seen.append(snapshot)
        first_step.set()

    animator = Animator(get_algorithm(algorithm)(example_sizes), on_step, delay_s=30)
    runner = threading.Thread(target=animator.run)

    with caplog.at_level(logging.WARNING, logger="parkingvisualizer"):
        runner.start()
        assert first_step.wait(5)
        animator.interrupt()
        runner.join(5)

    assert not runner.is_alive()
    assert animator.interrupted
    assert list(seen[-1]) == [1, 1, 2, 3, 3, 4, 5, 5, 6, 9]
    assert "interrupted" in caplog.text


def test_interrupt_before_run_plays_everything_at_once(example_sizes, caplog):
    started = time.monotonic()
    seen = []
    animator = Animator(get_algorithm("Insertion Sort")(example_sizes), seen.append, delay_s=30)
    animator.interrupt()

    with caplog.at_level(logging.WARNING, logger="parkingvisualizer"):
        animator.run()

    assert list(seen[-1]) == sorted(example_sizes)
    assert time.monotonic() - started < 5
    assert caplog.text.count("interrupted") == 1
