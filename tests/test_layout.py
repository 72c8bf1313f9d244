import pytest

from parkingvisualizer.config import CAR_COLORS, WINDOW_WIDTH
from parkingvisualizer.model.layout import CarRect, car_color, layout_cars


def test_single_row_layout():
    rects = layout_cars([1, 2, 3], WINDOW_WIDTH)
    assert rects == [
        CarRect(50, 50, 50, 30, 1, CAR_COLORS[0]),
        CarRect(120, 50, 100, 30, 2, CAR_COLORS[1]),
        CarRect(240, 50, 150, 30, 3, CAR_COLORS[2]),
    ]


def test_wraps_to_new_row_when_car_would_cross_margin():
    # 50 + 250 + 20 + 250 + 20 = 590, a third size-5 car would end at 840 > 750
    rects = layout_cars([5, 5, 5, 1], WINDOW_WIDTH)
    assert [(r.x, r.y) for r in rects] == [(50, 50), (320, 50), (50, 100), (320, 100)]


def test_car_ending_exactly_at_margin_stays_on_row():
    # Sixth size-2 car starts at 650 and ends at 750, the right margin
    rects = layout_cars([2, 2, 2, 2, 2, 2, 1], WINDOW_WIDTH)
    assert (rects[5].x, rects[5].y) == (650, 50)
    assert rects[5].x + rects[5].width == WINDOW_WIDTH - 50
    assert (rects[6].x, rects[6].y) == (50, 100)


def test_width_proportional_to_size_and_fixed_height():
    for rect in layout_cars([1, 2, 3, 4, 5, 5, 4, 3, 2, 1], WINDOW_WIDTH):
        assert rect.width == rect.size * 50
        assert rect.height == 30


def test_rows_never_exceed_surface(rng):
    from parkingvisualizer.model.state import random_car_sizes

    for _ in range(100):
        for rect in layout_cars(random_car_sizes(rng), WINDOW_WIDTH):
            assert rect.x >= 50
            assert rect.x + rect.width <= WINDOW_WIDTH - 50


def test_empty_lot_has_no_rectangles():
    assert layout_cars([], WINDOW_WIDTH) == []


def test_palette_per_size_bucket():
    assert [car_color(size) for size in range(1, 6)] == list(CAR_COLORS)
    assert len(set(CAR_COLORS)) == 5


@pytest.mark.parametrize("size", [0, 6, -1])
def test_no_color_outside_size_range(size):
    with pytest.raises(ValueError):
        car_color(size)
