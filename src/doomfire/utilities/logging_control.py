from __future__ import annotations

import logging
import threading
import time
from functools import cache
from typing import Callable, Sequence

from doomfire.utilities.env import Configuration

DEFAULT_FALLBACK_LEVEL = logging.DEBUG


class LoggingController:
    """Throttle log statements that would otherwise fire every frame.

    Each ``key`` is emitted at its requested level at most once per
    ``interval`` seconds. Calls inside the interval are demoted to
    ``fallback_level`` (or dropped when it is ``None``).
    """

    def __init__(
        self,
        *,
        interval: float | None,
        fallback_level: int | None = DEFAULT_FALLBACK_LEVEL,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._interval = interval
        self._fallback_level = fallback_level
        self._monotonic = monotonic
        self._lock = threading.Lock()
        self._next_emit: dict[str, float] = {}

    def log(
        self,
        *,
        key: str,
        logger: logging.Logger,
        level: int,
        msg: str,
        args: Sequence[object] | None = None,
    ) -> bool:
        """Return ``True`` when the message was emitted at ``level``."""

        if self._interval is None:
            logger.log(level, msg, *(args or ()))
            return True

        now = self._monotonic()
        with self._lock:
            next_emit = self._next_emit.get(key, 0.0)
            if now >= next_emit:
                self._next_emit[key] = now + self._interval
                logger.log(level, msg, *(args or ()))
                return True

        if self._fallback_level is not None:
            logger.log(self._fallback_level, msg, *(args or ()))
        return False


@cache
def get_logging_controller() -> LoggingController:
    """Return the shared logging controller instance."""

    return LoggingController(interval=Configuration.log_interval())
