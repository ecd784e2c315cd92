# tempscope/util/logging_setup.py
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def init_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """
    Initialize the root logger for command-line use:
    'YYYY-mm-dd HH:MM:SS,ms | LEVEL | message'
    - Single StreamHandler, stderr by default so a wrapped command owns stdout
    - Library modules only create named loggers; they never call this
    """
    lvl = _LEVELS.get((level or "info").lower(), logging.INFO)

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
    root.addHandler(handler)
    root.setLevel(lvl)
