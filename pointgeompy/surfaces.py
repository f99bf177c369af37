"""
Surfaces and random source used to generate random points.

The point geometry functions only need two capabilities from the outside
world: something with a width and height (a window or bitmap) and something
that yields uniform floats in [0, 1). Both are described as protocols so
tests and callers can substitute their own implementations.

The module also keeps the current window: a registry of open windows, the
last opened or selected being current. It holds no display resources, only
sizes. Registry updates are serialised with a lock, so windows may be opened
and closed from several threads. The random source is shared module state
and is only as thread-safe as the object passed to set_random_source();
numpy Generators are not, so give each thread its own source if needed.
"""

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Protocol, Union, runtime_checkable

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


@runtime_checkable
class SizedSurface(Protocol):
    """Anything exposing `width` and `height`, e.g. a Window or a PIL image."""

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...


@runtime_checkable
class RandomSource(Protocol):
    """Uniform random number generator yielding floats in [0, 1)."""

    def random(self) -> float: ...


class NoCurrentWindowError(RuntimeError):
    """Raised when a window is required but none has been opened."""


@dataclass(frozen=True, eq=False)
class Window:
    """A drawing surface with a title and a fixed size in pixels."""

    title: str
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Window size must be positive, got {self.width}x{self.height}"
            )


# ========== Current window ==========

# Guards _open_windows and _current_window
_window_lock = threading.Lock()
_open_windows: List[Window] = []
_current_window: Optional[Window] = None


def open_window(title: str, width: int, height: int) -> Window:
    """Open a window and make it the current window."""
    window = Window(title, width, height)
    set_current_window(window)
    return window


def set_current_window(window: Window) -> None:
    global _current_window
    with _window_lock:
        if window not in _open_windows:
            _open_windows.append(window)
        _current_window = window
    logger.info(
        f"Current window is now '{window.title}' ({window.width}x{window.height})"
    )


def current_window() -> Window:
    window = _current_window
    if window is None:
        raise NoCurrentWindowError("No window is open. Call open_window() first.")
    return window


def close_window(window: Window) -> None:
    """
    Close `window`. If it was current, the most recently opened remaining
    window becomes current.
    """
    global _current_window
    with _window_lock:
        closed = window in _open_windows
        if closed:
            _open_windows.remove(window)
        if _current_window is window:
            _current_window = _open_windows[-1] if _open_windows else None
    if closed:
        logger.info(f"Closed window '{window.title}'")


def close_all_windows() -> None:
    global _current_window
    with _window_lock:
        _open_windows.clear()
        _current_window = None


# ========== Bitmaps ==========


def load_bitmap(path: str) -> Image.Image:
    """
    Load an image from disk.

    Pixel data is read eagerly so Pillow releases the file handle before
    returning. Only the size is used by this package.
    """
    bitmap = Image.open(path)
    bitmap.load()
    logger.debug(f"Loaded bitmap {path} ({bitmap.width}x{bitmap.height})")
    return bitmap


def bitmap_width(bitmap: SizedSurface) -> float:
    return bitmap.width


def bitmap_height(bitmap: SizedSurface) -> float:
    return bitmap.height


# ========== Random source ==========

_random_source: RandomSource = np.random.default_rng()


def set_random_source(source: Union[RandomSource, np.random.Generator]) -> RandomSource:
    """
    Replace the random source used for random points.

    Args:
        source: Object with a `random()` method, e.g. a seeded
            `numpy.random.Generator` or `random.Random`

    Returns:
        RandomSource: The previous source, so callers can restore it
    """
    global _random_source
    if not callable(getattr(source, "random", None)):
        raise TypeError(
            f"Random source must provide a random() method, got {type(source)}"
        )
    previous = _random_source
    _random_source = source
    return previous


def rnd() -> float:
    """Next uniform float in [0, 1) from the configured source."""
    value = float(_random_source.random())
    if not 0.0 <= value < 1.0:
        logger.warning(f"Random source returned {value}, outside [0, 1)")
    return value
