"""The fire simulation: an intensity grid, its update rule and rendering."""

from __future__ import annotations

import operator
import sys
from typing import Any

import numpy as np

from doomfire.palette import MAX_INTENSITY, PALETTE
from doomfire.utilities.logging import get_logger

logger = get_logger(__name__)

BYTES_PER_PIXEL = 4
DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 400
# Drift values come from round(uniform(0, 3)), so the middle values are twice
# as likely as the ends.
DRIFT_RANGE = 3.0

RandomSource = np.random.Generator | int | None


class FireFieldError(Exception):
    """Base class for errors raised by :class:`FireField`."""


class InvalidDimensionsError(FireFieldError, ValueError):
    """Raised when a field is requested with unusable dimensions."""


class FrameSizeError(FireFieldError, ValueError):
    """Raised when ``render`` receives a buffer of the wrong length."""


def _validate_dimension(name: str, value: Any) -> int:
    try:
        parsed = operator.index(value)
    except TypeError as exc:
        raise InvalidDimensionsError(
            f"{name} must be an integer, got {value!r}"
        ) from exc
    if parsed < 1:
        raise InvalidDimensionsError(f"{name} must be at least 1, got {parsed}")
    return parsed


class FireField:
    """A width x height grid of fire intensities driven by the Doom fire rule.

    Cells are stored row-major with row 0 at the top. Intensities range from
    ``0`` (cold) to :data:`~doomfire.palette.MAX_INTENSITY` (white hot). The
    field starts cold and unlit; call :meth:`ignite` to seed the bottom row.
    """

    def __init__(self, width: int, height: int, rng: RandomSource = None) -> None:
        self._width = _validate_dimension("width", width)
        self._height = _validate_dimension("height", height)
        if self._width * self._height * BYTES_PER_PIXEL > sys.maxsize:
            raise InvalidDimensionsError(
                f"A {self._width}x{self._height} field does not fit in memory"
            )
        try:
            self._grid = np.zeros((self._height, self._width), dtype=np.uint8)
        except MemoryError as exc:
            raise InvalidDimensionsError(
                f"Cannot allocate a {self._width}x{self._height} field"
            ) from exc
        # Flat view sharing memory with ``_grid``.
        self._cells = self._grid.reshape(-1)
        self._lit = False
        self._rng = np.random.default_rng(rng)

    @classmethod
    def default(cls, rng: RandomSource = None) -> FireField:
        return cls(DEFAULT_WIDTH, DEFAULT_HEIGHT, rng=rng)

    @classmethod
    def from_grid(
        cls,
        grid: Any,
        *,
        lit: bool = False,
        rng: RandomSource = None,
    ) -> FireField:
        """Build a field whose cells are copied from a 2-D intensity array."""

        values = np.asarray(grid)
        if values.ndim != 2:
            raise ValueError(f"grid must be 2-dimensional, got shape {values.shape}")
        if not np.issubdtype(values.dtype, np.integer):
            raise ValueError(f"grid values must be integers, got {values.dtype}")
        height, width = values.shape
        field = cls(width, height, rng=rng)
        if values.size and (values.min() < 0 or values.max() > MAX_INTENSITY):
            raise ValueError(
                f"grid values must be between 0 and {MAX_INTENSITY}"
            )
        field._grid[...] = values
        field._lit = lit
        return field

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def frame_size(self) -> int:
        """Number of bytes :meth:`render` expects."""

        return self._width * self._height * BYTES_PER_PIXEL

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the intensities, shaped ``(height, width)``."""

        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def is_lit(self) -> bool:
        return self._lit

    def ignite(self) -> None:
        """Set the bottom row to full heat and switch to the sustaining rule."""

        self._grid[-1, :] = MAX_INTENSITY
        self._lit = True
        logger.debug("Ignited %sx%s fire", self._width, self._height)

    def extinguish(self) -> None:
        # The bottom row keeps its heat; it burns off over the next steps.
        self._lit = False
        logger.debug("Extinguished %sx%s fire", self._width, self._height)

    def toggle(self) -> bool:
        """Extinguish a lit fire or ignite an unlit one, returning the new state."""

        if self._lit:
            self.extinguish()
        else:
            self.ignite()
        return self._lit

    def step(self) -> None:
        """Advance the simulation by one tick.

        Heat in every cell below the top row moves one row up (more when
        unlit), drifting up to two columns left or one column right and
        cooling by at most one level. Columns are visited left to right and
        rows top to bottom within each column; when two sources land on the
        same cell the later one wins.
        """

        width = self._width
        height = self._height
        lit = self._lit
        max_index = width * height - 1
        draws_per_source = 1 if lit else 2
        drifts = iter(self._draw_drifts(width * (height - 1) * draws_per_source))
        cells = self._cells.tolist()

        for x in range(width):
            for y in range(1, height):
                src_index = y * width + x
                src = cells[src_index]
                if src == 0:
                    cells[src_index - width] = 0
                    continue

                drift = next(drifts)
                if lit:
                    dst_index = (src_index - drift + 1) - width
                else:
                    rise = next(drifts)
                    dst_index = (src_index - drift + 1) - width * rise
                # A negative index is an unsigned wraparound, which lands on
                # the last cell just like an index past the end.
                if dst_index < 0 or dst_index > max_index:
                    dst_index = max_index
                cells[dst_index] = src - (drift & 1)

        self._cells[:] = cells
        assert int(self._cells.max()) <= MAX_INTENSITY, "Intensity exceeded palette"

    def render(self, buffer: Any) -> None:
        """Write the RGBA color of every cell into ``buffer``.

        ``buffer`` must be a writable, contiguous object supporting the
        buffer protocol with exactly :attr:`frame_size` bytes.
        """

        view = memoryview(buffer)
        if view.nbytes != self.frame_size:
            raise FrameSizeError(
                f"Expected a {self.frame_size} byte buffer for a "
                f"{self._width}x{self._height} field, got {view.nbytes}"
            )
        if view.readonly:
            raise TypeError("render requires a writable buffer")

        pixels = np.frombuffer(view, dtype=np.uint8).reshape(-1, BYTES_PER_PIXEL)
        np.take(PALETTE, self._cells, axis=0, out=pixels)

    def _draw_drifts(self, count: int) -> list[int]:
        samples = self._rng.uniform(0.0, DRIFT_RANGE, size=count)
        # floor(x + 0.5) rounds halves away from zero on non-negative input.
        return (np.floor(samples + 0.5).astype(np.int64) & 3).tolist()
