"""Command line interface for commitguard."""

from .main import main, run_hook

__all__ = ["main", "run_hook"]
