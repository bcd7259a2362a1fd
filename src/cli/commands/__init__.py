"""CLI command modules."""

from .init import init
from .journal import journal
from .mood import mood

__all__ = [
    "init",
    "journal",
    "mood",
]
