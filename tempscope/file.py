# tempscope/file.py
from __future__ import annotations

import logging
from pathlib import Path

from tempscope.resource import TempResource

log = logging.getLogger("tempscope.resource")


class File(TempResource):
    """Temp file handle; create() makes a new empty file."""

    kind = "file"

    def _exists(self, path: str) -> bool:
        return self._fs.exists(path)

    def _make(self, path: str) -> bool:
        return self._fs.make_file(path)

    def _still_there(self, path: Path) -> bool:
        return self._fs.exists(path)

    def _discard(self, path: Path) -> bool:
        if not self._fs.remove_file(path):
            log.warning("Temp file not removed | %s", path)
            return False
        return True
