# tempscope/fs.py
from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import List

from tempscope.types import PathLike

log = logging.getLogger("tempscope.fs")


class LocalFilesystem:
    """
    Default filesystem collaborator backed by os/shutil.
    OSError never escapes; it is logged at debug level and reported as False.
    """

    def make_directory(self, path: PathLike) -> bool:
        try:
            os.mkdir(path)
        except OSError as e:
            log.debug("mkdir failed | %s | %s", path, e)
            return False
        return True

    def make_file(self, path: PathLike) -> bool:
        # O_EXCL: fail rather than adopt a file someone else just created
        flags = os.O_CREAT | os.O_EXCL | os.O_WRONLY | getattr(os, "O_BINARY", 0)
        try:
            fd = os.open(path, flags, 0o600)
        except OSError as e:
            log.debug("create file failed | %s | %s", path, e)
            return False
        os.close(fd)
        return True

    def remove_file(self, path: PathLike) -> bool:
        try:
            os.remove(path)
        except OSError as e:
            log.debug("remove file failed | %s | %s", path, e)
            return False
        return True

    def remove_tree(self, path: PathLike) -> bool:
        try:
            shutil.rmtree(path)
        except OSError as e:
            log.debug("remove tree failed | %s | %s", path, e)
            return False
        return True

    def exists(self, path: PathLike) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: PathLike) -> bool:
        return os.path.isdir(path)

    def list_files(self, path: PathLike) -> List[Path]:
        # never reach through a symlink into files we do not own
        if os.path.islink(path):
            return []
        try:
            with os.scandir(path) as it:
                return [Path(e.path) for e in it if e.is_file(follow_symlinks=False)]
        except OSError as e:
            log.debug("scandir failed | %s | %s", path, e)
            return []


# Shared default instance
local_fs = LocalFilesystem()
