"""Optional logging setup for applications embedding :mod:`confstore`.

The library itself only emits records through :mod:`logging`; this helper
routes them to a rotating log file (or stderr) with the usual format.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "confstore.log"

_handler: Optional[logging.Handler] = None


def configure_logging(
    level: str = "INFO",
    log_dir: Optional[Union[str, Path]] = None,
    rotation_mb: int = 10,
    backup_count: int = 10,
) -> logging.Handler:
    """Attach a single handler to the root logger and return it.

    Calling this again replaces the handler installed by the previous call.
    """
    global _handler

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if _handler is not None:
        root.removeHandler(_handler)
        _handler.close()

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_path / LOG_FILE_NAME,
            maxBytes=rotation_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    _handler = handler
    return handler
