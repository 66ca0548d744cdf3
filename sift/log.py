"""Logging setup. The terminal belongs to the UI, so records only go to a file."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def parse_level(value: Optional[str]) -> int:
    if value is None:
        return logging.INFO
    try:
        return _LEVELS[value.strip().lower()]
    except KeyError:
        raise ValueError(f"invalid log level: {value}") from None


def configure(log_file: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """Route the ``sift`` logger to ``log_file``, or silence it when there is none."""
    root = logging.getLogger("sift")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.propagate = False
    root.setLevel(level)

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(_FORMAT))
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)
    return root
