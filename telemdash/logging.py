"""Logging configuration helpers."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "WARNING", *, log_path: Path | None = None) -> None:
    """Configure root logging handlers.

    The panel is redrawn over the whole terminal, so console records are only
    useful at WARNING and above. Point *log_path* at a file to keep the
    per-cycle detail.
    """
    logging.captureWarnings(True)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    resolved = getattr(logging, level.upper(), logging.WARNING)
    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(level=resolved, format=LOG_FORMAT, filename=str(log_path))
    else:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
