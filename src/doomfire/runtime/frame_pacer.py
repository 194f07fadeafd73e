from __future__ import annotations

import time
from typing import Callable


class FramePacer:
    """Cap the loop at ``max_fps`` by sleeping off the rest of each frame."""

    def __init__(
        self,
        max_fps: int,
        *,
        monotonic: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_fps < 0:
            raise ValueError("max_fps must not be negative")
        self._max_fps = max_fps
        self._monotonic = monotonic
        self._sleep = sleep

    @property
    def max_fps(self) -> int:
        return self._max_fps

    def frame_start(self) -> float:
        return self._monotonic()

    def pace(self, frame_start: float) -> float:
        """Sleep until the frame that began at ``frame_start`` has used its interval.

        Returns the number of seconds slept.
        """

        interval_s = self._target_interval_s()
        if interval_s <= 0.0:
            return 0.0
        elapsed_s = self._monotonic() - frame_start
        sleep_s = interval_s - elapsed_s
        if sleep_s > 0:
            self._sleep(sleep_s)
            return sleep_s
        return 0.0

    def _target_interval_s(self) -> float:
        if self._max_fps <= 0:
            return 0.0
        return 1.0 / self._max_fps
