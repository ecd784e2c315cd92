# tempscope/directory.py
from __future__ import annotations

import logging
from pathlib import Path

from tempscope.resource import TempResource

log = logging.getLogger("tempscope.resource")


class Directory(TempResource):
    """
    Temp directory handle. Starts empty; call create() to make the
    directory and remove() (or drop the handle) to delete it together
    with everything put inside.
    """

    kind = "directory"

    def _exists(self, path: str) -> bool:
        return self._fs.is_directory(path)

    def _make(self, path: str) -> bool:
        return self._fs.make_directory(path)

    def _still_there(self, path: Path) -> bool:
        return self._fs.is_directory(path)

    def _discard(self, path: Path) -> bool:
        # Plain files first (best effort), then the tree, whose outcome is reported
        for file_path in self._fs.list_files(path):
            if not self._fs.remove_file(file_path):
                log.debug("Could not remove %s", file_path)
        if not self._fs.remove_tree(path):
            log.warning("Temp directory not fully removed | %s", path)
            return False
        return True
