# tempscope/resource.py
"""
Lifecycle shared by temp directories and temp files.

A handle starts empty, binds to one freshly created path through create(),
and gives it up through remove(). Handles are single use: once removed they
never become good again. Dropping a handle that is still good removes its
path; that teardown never raises.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from tempscope import config as cfg
from tempscope import guard
from tempscope.core.ports import Filesystem
from tempscope.fs import local_fs
from tempscope.search import claim_path

log = logging.getLogger("tempscope.resource")


class TempResource:
    kind = "resource"

    def __init__(
        self,
        prefix: Optional[str] = None,
        *,
        fs: Optional[Filesystem] = None,
        settings: Optional[cfg.Settings] = None,
    ) -> None:
        self._good = False
        self._spent = False
        self._path: Optional[Path] = None
        self._settings = settings or cfg.settings
        self._prefix = self._settings.default_prefix if prefix is None else str(prefix)
        self._fs: Filesystem = fs or local_fs

    # ---------- Queries ----------

    @property
    def good(self) -> bool:
        return self._good

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def path(self) -> Optional[Path]:
        return self._path

    # ---------- Hooks for subclasses ----------

    def _exists(self, path: str) -> bool:
        raise NotImplementedError

    def _make(self, path: str) -> bool:
        raise NotImplementedError

    def _still_there(self, path: Path) -> bool:
        raise NotImplementedError

    def _discard(self, path: Path) -> bool:
        raise NotImplementedError

    # ---------- Operations ----------

    def create(self) -> bool:
        """
        Create a new uniquely named object and bind this handle to it.
        Returns False, with no side effects, if the handle is already bound
        or was already used.
        """
        with guard.lock:
            if self._good or self._spent:
                return False
            path = claim_path(
                self._prefix,
                exists=self._exists,
                make=self._make,
                settings=self._settings,
            )
            if path is None:
                return False
            self._path = path
            self._good = True
            return True

    def remove(self) -> bool:
        """
        Remove the bound object. False if nothing is bound, it has already
        disappeared, or the filesystem refused to delete it. The handle is
        spent either way; repeated calls are harmless.
        """
        with guard.lock:
            if not self._good or self._path is None:
                return False
            self._good = False
            self._spent = True
            if not self._still_there(self._path):
                log.debug("Temp %s already gone | %s", self.kind, self._path)
                return False
            return self._discard(self._path)

    def _release_quietly(self) -> None:
        try:
            self.remove()
        except Exception:
            log.exception("Failed to remove temp %s %s", self.kind, self._path)

    # ---------- Python protocols ----------

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._release_quietly()

    def __del__(self) -> None:
        # __init__ may not have finished
        if getattr(self, "_good", False):
            self._release_quietly()

    def __fspath__(self) -> str:
        if self._path is None:
            raise ValueError(f"temp {self.kind} has no path yet")
        return str(self._path)

    def __copy__(self) -> Any:
        raise TypeError(f"temp {self.kind} handles own their path and cannot be copied")

    def __deepcopy__(self, memo: Any) -> Any:
        raise TypeError(f"temp {self.kind} handles own their path and cannot be copied")

    def __reduce__(self) -> Any:
        raise TypeError(f"temp {self.kind} handles cannot be pickled")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={self._prefix!r}, path={self._path!r}, good={self._good})"
