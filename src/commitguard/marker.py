"""Marker file recording that the pre-commit hook already ran.

The pre-commit entry point touches the marker once its checks ran, and the
prepare-commit-msg entry point clears it when done. If prepare-commit-msg
finds no marker, pre-commit was bypassed for this commit.
"""

import logging
from pathlib import Path
from typing import Union

from .config import DEFAULT_MARKER_FILENAME

logger = logging.getLogger(__name__)


class PrecommitMarker:
    """Existence-only flag file inside the git dir."""

    def __init__(self, git_dir: Union[str, Path], filename: str = DEFAULT_MARKER_FILENAME) -> None:
        self.path = Path(git_dir) / filename

    def exists(self) -> bool:
        return self.path.exists()

    def touch(self) -> None:
        logger.debug("Creating pre-commit marker %s", self.path)
        self.path.touch()

    def clear(self) -> None:
        if self.path.exists():
            logger.debug("Removing pre-commit marker %s", self.path)
            self.path.unlink()
