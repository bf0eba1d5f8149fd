"""Commit message holder for the prepare-commit-msg hook."""

from pathlib import Path
from typing import Optional, Union

from .exceptions import CommitMessageError


class CommitMessage:
    """Mutable commit message, optionally backed by git's message file.

    git passes the path of the message file to prepare-commit-msg; whatever
    is in that file when the hook exits becomes the commit message.
    """

    def __init__(self, message: str, path: Union[str, Path, None] = None) -> None:
        self._message = message
        self._path = Path(path) if path else None

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CommitMessage":
        """Load a commit message from a file.

        Args:
            path: Message file written by git

        Returns:
            CommitMessage bound to that file

        Raises:
            CommitMessageError: If the file cannot be read
        """
        path = Path(path)
        try:
            message = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CommitMessageError(f"Cannot read commit message file: {e}", path=path)
        return cls(message, path=path)

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def get_message(self) -> str:
        """Get the full message text."""
        return self._message

    def update_message(self, message: str) -> None:
        """Replace the full message text."""
        self._message = message

    def get_summary(self) -> str:
        """Get the first line that is not blank or a git comment."""
        for line in self._message.splitlines():
            if line.strip() and not line.startswith("#"):
                return line.strip()
        return ""

    def is_empty(self) -> bool:
        """Check if the message has only blank lines and comments."""
        return self.get_summary() == ""

    def save(self) -> None:
        """Write the message back to its file.

        Raises:
            CommitMessageError: If there is no file or it cannot be written
        """
        if self._path is None:
            raise CommitMessageError("Commit message is not backed by a file")
        try:
            self._path.write_text(self._message, encoding="utf-8")
        except OSError as e:
            raise CommitMessageError(f"Cannot write commit message file: {e}", path=self._path)

    def __repr__(self) -> str:
        return f"CommitMessage(summary={self.get_summary()!r}, path={self._path!r})"
