# tempscope/candidates.py
"""
Ordered list of directories a temp resource may be created under.

Priority (highest first):
  1. TEMP, TMP, TMPDIR                      (set and non-empty only)
  2. OS locations
       nt:    %SYSTEMROOT%\\Temp, %USERPROFILE%\\AppData\\Local\\Temp, C:\\temp, C:\\tmp
       posix: /tmp, /var/tmp, /usr/tmp
  3. Current directory via CD (nt) / PWD (posix)

Nothing is checked for existence here; unusable roots just fail every
creation attempt later on.
"""
from __future__ import annotations

import os
from typing import List, Mapping, Optional

ENV_VARS = ("TEMP", "TMP", "TMPDIR")
POSIX_DIRS = ("/tmp", "/var/tmp", "/usr/tmp")
WINDOWS_DIRS = ("C:\\temp", "C:\\tmp")


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name)
    return value if value else None


def paths_to_try(
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> List[str]:
    env = os.environ if environ is None else environ
    windows = (platform or os.name) == "nt"

    paths: List[str] = []
    for var in ENV_VARS:
        value = _env(env, var)
        if value is not None:
            paths.append(value)

    if windows:
        system_root = _env(env, "SYSTEMROOT")
        if system_root is not None:
            paths.append(system_root + "\\Temp")
        profile = _env(env, "USERPROFILE")
        if profile is not None:
            paths.append(profile + "\\AppData\\Local\\Temp")
        paths.extend(WINDOWS_DIRS)
    else:
        paths.extend(POSIX_DIRS)

    # last resort: wherever we were started from
    cwd = _env(env, "CD" if windows else "PWD")
    if cwd is not None:
        paths.append(cwd)

    return paths
