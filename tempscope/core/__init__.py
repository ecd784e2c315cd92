# tempscope/core/__init__.py
from .ports import Filesystem

__all__ = ["Filesystem"]
