"""Inspection of the changes staged for the commit in progress."""

from typing import List

from .repository import GitRepository

REVERT_HEAD = "REVERT_HEAD"


class StagedChanges:
    """Staged changes of the commit being prepared."""

    def __init__(self, repository: GitRepository) -> None:
        self._repository = repository

    def is_revert(self) -> bool:
        """Check if the commit in progress comes from ``git revert``.

        git leaves REVERT_HEAD in the git dir while a revert is pending.
        """
        return (self._repository.git_dir / REVERT_HEAD).exists()

    def get_staged_files(self) -> List[str]:
        """List added, copied, modified and renamed files in the index."""
        output = self._repository.run("diff", "--cached", "--name-only", "--diff-filter=ACMR")
        return [line for line in output.splitlines() if line]
