import logging
from pathlib import Path

from doomfire.utilities.env.parsing import (_env_flag, _env_int,
                                            _env_optional_float, _env_str)

DEFAULT_LOG_INTERVAL_SECONDS = 1.0
DEFAULT_LOG_DIR = Path.home() / ".doomfire" / "logs"
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_BACKUPS = 5


class LoggingConfiguration:
    @classmethod
    def log_interval(cls) -> float | None:
        """Seconds between throttled per-frame logs, ``None`` to log every call."""

        return _env_optional_float(
            "DOOMFIRE_LOG_INTERVAL",
            default=DEFAULT_LOG_INTERVAL_SECONDS,
            minimum=0.0,
        )

    @classmethod
    def log_level(cls) -> int:
        """Numeric level named by ``LOG_LEVEL``; unknown names mean INFO."""

        name = _env_str("LOG_LEVEL", default="INFO").upper()
        return logging.getLevelNamesMapping().get(name, logging.INFO)

    @classmethod
    def log_dir(cls) -> Path:
        value = _env_str("DOOMFIRE_LOG_DIR", default="")
        return Path(value).expanduser() if value else DEFAULT_LOG_DIR

    @classmethod
    def log_to_file(cls) -> bool:
        return _env_flag("DOOMFIRE_LOG_FILE", default=True)

    @classmethod
    def log_max_bytes(cls) -> int:
        return _env_int(
            "DOOMFIRE_LOG_MAX_BYTES", default=DEFAULT_LOG_MAX_BYTES, minimum=1
        )

    @classmethod
    def log_backups(cls) -> int:
        return _env_int("DOOMFIRE_LOG_BACKUPS", default=DEFAULT_LOG_BACKUPS, minimum=0)
