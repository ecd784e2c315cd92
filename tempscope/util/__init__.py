# tempscope/util/__init__.py
from .logging_setup import init_logging

__all__ = ["init_logging"]
