"""
Logging setup for the blog service.

Everything logs through ``logging.getLogger(__name__)``; this module
only attaches handlers to the root logger.  Seeding, comment fetches
and startup messages end up on stderr and, when ``LOG_FILE`` is set,
in that file as well.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Does nothing when the root logger already has handlers, which is
    the case under uvicorn's own logging config, under pytest, or when
    ``create_app`` runs more than once in a process.

    Parameters
    ----------
    level : str
        ``LOG_LEVEL`` value such as ``"debug"`` or ``"INFO"``; an
        unrecognised name means ``INFO``.
    logfile : Optional[str]
        ``LOG_FILE`` value.  Missing parent directories are created.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
