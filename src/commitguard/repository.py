"""Git repository access through the git command line."""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from .exceptions import RepositoryError

logger = logging.getLogger(__name__)


class GitRepository:
    """A git working tree, queried by running ``git`` in it."""

    def __init__(self, work_tree: Union[str, Path, None] = None) -> None:
        self._cwd = Path(work_tree) if work_tree else Path.cwd()
        self._git_dir: Optional[Path] = None
        self._work_tree: Optional[Path] = None

    def run(self, *args: str) -> str:
        """Run a git command and return its stripped stdout.

        Args:
            *args: Arguments passed to git

        Returns:
            Command stdout without surrounding whitespace

        Raises:
            RepositoryError: If git is missing or exits with a non-zero code
        """
        command: List[str] = ["git", *args]
        logger.debug("Running %s in %s", " ".join(command), self._cwd)
        try:
            result = subprocess.run(
                command,
                cwd=str(self._cwd),
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise RepositoryError(f"git executable not found: {e}", command=command)

        if result.returncode != 0:
            raise RepositoryError(
                f"git command failed: {' '.join(command)}: {result.stderr.strip()}",
                command=command,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result.stdout.strip()

    @property
    def git_dir(self) -> Path:
        """Absolute path of the repository metadata directory."""
        if self._git_dir is None:
            git_dir = Path(self.run("rev-parse", "--git-dir"))
            if not git_dir.is_absolute():
                git_dir = self._cwd / git_dir
            self._git_dir = git_dir.resolve()
        return self._git_dir

    @property
    def work_tree(self) -> Path:
        """Absolute path of the top of the working tree."""
        if self._work_tree is None:
            self._work_tree = Path(self.run("rev-parse", "--show-toplevel")).resolve()
        return self._work_tree

    def __repr__(self) -> str:
        return f"GitRepository({str(self._cwd)!r})"
