import logging
from logging.handlers import RotatingFileHandler

from doomfire.utilities.env import Configuration

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _file_handler(name: str) -> RotatingFileHandler:
    """Rotating file handler writing ``doomfire_field.log`` for ``doomfire.field``."""

    log_dir = Configuration.log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        log_dir / f"{name.replace('.', '_') or 'root'}.log",
        maxBytes=Configuration.log_max_bytes(),
        backupCount=Configuration.log_backups(),
    )


def get_logger(name: str) -> logging.Logger:
    """Return the named logger, attaching doomfire's handlers on first use.

    Every logger writes to stderr. Unless ``DOOMFIRE_LOG_FILE`` is off, it also
    keeps its own rotating file under ``DOOMFIRE_LOG_DIR``.
    """

    logger = logging.getLogger(name)
    level = Configuration.log_level()
    logger.setLevel(level)
    if logger.handlers:
        return logger

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    problem = None
    try:
        if Configuration.log_to_file():
            handlers.append(_file_handler(name))
    except (ValueError, OSError) as exc:
        problem = exc

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.propagate = False

    if problem is not None:
        logger.warning("File logging disabled: %s", problem)
    return logger
