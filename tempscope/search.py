# tempscope/search.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Optional, Sequence

from tempscope import config as cfg
from tempscope import guard
from tempscope.candidates import paths_to_try
from tempscope.names import random_name

log = logging.getLogger("tempscope.search")


def claim_path(
    prefix: str,
    *,
    exists: Callable[[str], bool],
    make: Callable[[str], bool],
    roots: Optional[Sequence[str]] = None,
    attempts: Optional[int] = None,
    max_path_length: Optional[int] = None,
    max_name_length: Optional[int] = None,
    separator: Optional[str] = None,
    settings: Optional[cfg.Settings] = None,
) -> Optional[Path]:
    """
    Bring exactly one new filesystem object into existence under the first
    usable candidate root and return its path, or None if every root is used up.

    Roots are tried strictly in order. Each root gets `attempts` random names;
    a name that is too long or already taken burns one attempt and never
    moves the search to another root early. `make` failing (missing root,
    no permission, lost race) counts the same way.
    """
    s = settings or cfg.settings
    budget = s.attempts_per_root if attempts is None else attempts
    path_limit = s.max_path_length if max_path_length is None else max_path_length
    name_limit = s.max_name_length if max_name_length is None else max_name_length
    sep = os.sep if separator is None else separator

    with guard.lock:
        candidates = list(paths_to_try() if roots is None else roots)
        if not candidates:
            log.warning("No candidate temp roots available")
            return None

        for root in candidates:
            for _ in range(budget):
                name = prefix + random_name(s.name_length)
                if len(name) > name_limit:
                    continue

                candidate = root + sep + name
                # +1 for the terminator the OS limit accounts for
                if len(candidate) + 1 > path_limit:
                    continue

                if exists(candidate):
                    continue

                if make(candidate):
                    log.debug("Claimed temp path | %s", candidate)
                    return Path(candidate)

            log.debug("Temp root exhausted after %d attempts | %s", budget, root)

    log.warning("Could not create temp resource with prefix %r under %d root(s)", prefix, len(candidates))
    return None
