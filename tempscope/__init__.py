"""
tempscope

Temporary files and directories with guaranteed cleanup.

    - Directory / File:              explicit create() / remove()
    - ScopedDirectory / ScopedFile:  created on construction, removed at scope end

Names are <root><sep><prefix><8 random chars>, where <root> is the first
usable entry of candidates.paths_to_try().
"""

from .config import Settings, settings
from .directory import Directory
from .file import File
from .scoped import ScopedDirectory, ScopedFile

__all__ = [
    "Directory",
    "File",
    "ScopedDirectory",
    "ScopedFile",
    "Settings",
    "settings",
]
