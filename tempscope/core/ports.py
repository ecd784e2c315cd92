# tempscope/core/ports.py
from __future__ import annotations
from pathlib import Path
from typing import List, Protocol

from tempscope.types import PathLike


class Filesystem(Protocol):
    """
    Filesystem operations the temp resources depend on. Every call reports
    success as a bool; implementations must not raise for ordinary OS errors.
    """

    def make_directory(self, path: PathLike) -> bool: ...

    def make_file(self, path: PathLike) -> bool: ...

    def remove_file(self, path: PathLike) -> bool: ...

    def remove_tree(self, path: PathLike) -> bool: ...

    def exists(self, path: PathLike) -> bool: ...

    def is_directory(self, path: PathLike) -> bool: ...

    def list_files(self, path: PathLike) -> List[Path]: ...
