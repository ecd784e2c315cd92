# tempscope/scoped.py
"""
Scoped temp resources: created on construction, removed when the scope ends.

Construction never raises for a failed creation. Check `good` afterwards:

    with ScopedDirectory("build_") as d:
        if not d.good:
            ...
        (d.path / "out.txt").write_text("...")
    # directory and contents are gone here, even if the block raised

Leaving the `with` block, calling close(), or letting the object be
garbage-collected all remove the resource; only the first one has effect.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from tempscope import config as cfg
from tempscope.core.ports import Filesystem
from tempscope.directory import Directory
from tempscope.file import File
from tempscope.resource import TempResource

log = logging.getLogger("tempscope.resource")


class _Scoped:
    _resource: TempResource

    def __init__(self, resource: TempResource) -> None:
        self._resource = resource
        resource.create()  # outcome is observable via .good

    @property
    def resource(self) -> TempResource:
        return self._resource

    @property
    def good(self) -> bool:
        return self._resource.good

    @property
    def prefix(self) -> str:
        return self._resource.prefix

    @property
    def path(self) -> Optional[Path]:
        return self._resource.path

    def close(self) -> None:
        """Remove the resource now. Never raises."""
        try:
            self._resource.remove()
        except Exception:
            log.exception("Failed to release %r", self._resource)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_resource", None) is not None:
            self.close()

    def __fspath__(self) -> str:
        return self._resource.__fspath__()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={self.prefix!r}, path={self.path!r}, good={self.good})"


class ScopedDirectory(_Scoped):
    def __init__(
        self,
        prefix: Optional[str] = None,
        *,
        fs: Optional[Filesystem] = None,
        settings: Optional[cfg.Settings] = None,
    ) -> None:
        super().__init__(Directory(prefix, fs=fs, settings=settings))


class ScopedFile(_Scoped):
    def __init__(
        self,
        prefix: Optional[str] = None,
        *,
        fs: Optional[Filesystem] = None,
        settings: Optional[cfg.Settings] = None,
    ) -> None:
        super().__init__(File(prefix, fs=fs, settings=settings))
