# tempscope/names.py
from __future__ import annotations

import random
from typing import Optional

from tempscope import config as cfg

ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789_"


def random_name(length: Optional[int] = None, *, rng: Optional[random.Random] = None) -> str:
    """
    Short random token for temp names. Uniqueness only, not secrecy:
    uses the process-wide PRNG unless `rng` is given.
    """
    k = cfg.settings.name_length if length is None else int(length)
    choice = (rng or random).choice
    return "".join(choice(ALPHABET) for _ in range(k))
