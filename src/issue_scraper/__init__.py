"""List URLs mentioned in an issue's comments and in issues that reference it."""

from .runner import main, run

__all__ = ["main", "run"]
