"""Concrete application context backed by a git repository."""

import copy
from typing import Optional

from ..config import GuardSettings
from ..marker import PrecommitMarker
from ..repository import GitRepository
from ..staged_changes import StagedChanges
from ..terminal import Terminal
from .base import BaseAppContext


class HookApp(BaseAppContext):
    """Application context for a hook running inside a git working tree."""

    def __init__(
        self,
        hook_name: str,
        repository: Optional[GitRepository] = None,
        terminal: Optional[Terminal] = None,
        settings: Optional[GuardSettings] = None,
    ) -> None:
        super().__init__(hook_name)
        self._settings = settings or GuardSettings()
        self._repository = repository or GitRepository()
        self._terminal = terminal or Terminal(supports_color=False if self._settings.no_color else None)
        self._staged_changes: Optional[StagedChanges] = None

    @property
    def settings(self) -> GuardSettings:
        return self._settings

    def get_repository(self) -> GitRepository:
        return self._repository

    def get_staged_changes(self) -> StagedChanges:
        if self._staged_changes is None:
            self._staged_changes = StagedChanges(self._repository)
        return self._staged_changes

    def get_terminal(self) -> Terminal:
        return self._terminal

    def get_marker(self) -> PrecommitMarker:
        """Get the pre-commit marker of this repository."""
        return PrecommitMarker(self._repository.git_dir, self._settings.marker_filename)

    def clone(self, name: str) -> "HookApp":
        """Create a context for another hook phase.

        The repository is shared; the terminal is copied so that toggles on
        the clone leave this context untouched.
        """
        return HookApp(
            name,
            repository=self._repository,
            terminal=copy.copy(self._terminal),
            settings=self._settings,
        )

    def __repr__(self) -> str:
        return f"HookApp(hook_name={self.hook_name.value!r}, repository={self._repository!r})"
