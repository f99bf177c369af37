import logging
import random
import threading

import numpy as np
import pytest
from PIL import Image

from pointgeompy import surfaces
from pointgeompy.point_geometry import (
    random_bitmap_point,
    random_screen_point,
    random_window_point,
)
from pointgeompy.surfaces import (
    NoCurrentWindowError,
    Window,
    close_all_windows,
    close_window,
    current_window,
    load_bitmap,
    open_window,
    rnd,
    set_random_source,
)


class SequenceSource:
    """Random source replaying a fixed list of values."""

    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values)


@pytest.fixture(autouse=True)
def isolated_state():
    previous = set_random_source(np.random.default_rng(0))
    close_all_windows()
    yield
    close_all_windows()
    set_random_source(previous)


def test_random_window_point_scales_by_window_size():
    set_random_source(SequenceSource([0.5, 0.25]))
    pt = random_window_point(Window("test", 800, 600))
    assert pt.x == 400.0
    assert pt.y == 150.0


def test_random_bitmap_point_uses_pil_image_size():
    set_random_source(SequenceSource([0.5, 0.5]))
    pt = random_bitmap_point(Image.new("RGB", (64, 32)))
    assert pt.x == 32.0
    assert pt.y == 16.0


def test_random_screen_point_uses_current_window():
    open_window("first", 100, 100)
    open_window("second", 200, 50)
    set_random_source(SequenceSource([0.5, 0.5]))
    pt = random_screen_point()
    assert pt.x == 100.0
    assert pt.y == 25.0


def test_random_screen_point_without_window():
    with pytest.raises(NoCurrentWindowError):
        random_screen_point()


def test_closing_current_window_falls_back_to_previous():
    first = open_window("first", 100, 100)
    second = open_window("second", 200, 50)
    close_window(second)
    assert current_window() is first
    close_window(first)
    with pytest.raises(NoCurrentWindowError):
        current_window()


def test_window_size_must_be_positive():
    with pytest.raises(ValueError):
        Window("bad", 0, 100)


def test_seeded_points_stay_within_bounds():
    window = Window("bounds", 320, 240)
    for _ in range(200):
        pt = random_window_point(window)
        assert 0 <= pt.x < 320
        assert 0 <= pt.y < 240


def test_stdlib_random_is_accepted_as_source():
    set_random_source(random.Random(42))
    value = rnd()
    assert 0.0 <= value < 1.0


def test_set_random_source_rejects_objects_without_random():
    with pytest.raises(TypeError):
        set_random_source(object())


def test_set_random_source_returns_previous():
    first = SequenceSource([0.1])
    set_random_source(first)
    assert set_random_source(SequenceSource([0.2])) is first


def test_out_of_range_random_value_is_logged(caplog):
    set_random_source(SequenceSource([1.5]))
    with caplog.at_level(logging.WARNING, logger=surfaces.__name__):
        assert rnd() == 1.5
    assert "outside [0, 1)" in caplog.text


def test_load_bitmap(tmp_path):
    path = tmp_path / "sprite.png"
    Image.new("RGBA", (40, 20)).save(path)
    bitmap = load_bitmap(str(path))
    # pixels are already read and the file handle released
    assert bitmap.fp is None
    assert bitmap.getpixel((0, 0)) == (0, 0, 0, 0)
    set_random_source(SequenceSource([0.25, 0.5]))
    pt = random_bitmap_point(bitmap)
    assert pt.x == 10.0
    assert pt.y == 10.0


def test_windows_opened_and_closed_from_many_threads():
    errors = []

    def open_and_close(index):
        try:
            for _ in range(50):
                window = open_window(f"worker-{index}", 10 + index, 10)
                close_window(window)
        except Exception as e:  # pragma: no cover - reported below
            errors.append(e)

    threads = [threading.Thread(target=open_and_close, args=(i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert surfaces._open_windows == []
    with pytest.raises(NoCurrentWindowError):
        current_window()
