"""pytest configuration and shared fixtures for commitguard tests."""

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

import pytest

from commitguard import registry
from commitguard.commit_message import CommitMessage
from commitguard.contexts.base import BaseAppContext
from commitguard.terminal import Terminal


class FakeStagedChanges:
    """Staged-change inspector with a fixed answer."""

    def __init__(self, revert: bool = False, files: Optional[List[str]] = None) -> None:
        self.revert = revert
        self.files = files or []
        self.is_revert_calls = 0

    def is_revert(self) -> bool:
        self.is_revert_calls += 1
        return self.revert

    def get_staged_files(self) -> List[str]:
        return list(self.files)


class FakeRepository:
    def __init__(self, git_dir: Path) -> None:
        self.git_dir = git_dir


class FakeApp(BaseAppContext):
    """In-memory application context that records its clones."""

    def __init__(self, hook_name: str = "prepare-commit-msg", revert: bool = False,
                 terminal: Optional[Terminal] = None, git_dir: Path = Path("/nonexistent/.git")) -> None:
        super().__init__(hook_name)
        self.terminal = terminal or Terminal(is_utf8=True, supports_color=True)
        self.staged_changes = FakeStagedChanges(revert=revert)
        self.repository = FakeRepository(git_dir)
        self.clones: List["FakeApp"] = []

    def get_repository(self) -> FakeRepository:
        return self.repository

    def get_staged_changes(self) -> FakeStagedChanges:
        return self.staged_changes

    def get_terminal(self) -> Terminal:
        return self.terminal

    def clone(self, name: str) -> "FakeApp":
        cloned = FakeApp(
            name,
            revert=self.staged_changes.revert,
            terminal=Terminal(is_utf8=self.terminal.is_utf8,
                              supports_color=self.terminal.supports_color),
            git_dir=self.repository.git_dir,
        )
        self.clones.append(cloned)
        return cloned


@pytest.fixture(autouse=True)
def restore_plugin_registry():
    """Keep plugin registrations made by a test out of the other tests."""
    saved = {hook: dict(plugins) for hook, plugins in registry._REGISTERED_PLUGINS.items()}
    yield
    registry._REGISTERED_PLUGINS.clear()
    registry._REGISTERED_PLUGINS.update(saved)


@pytest.fixture
def fake_app():
    """Factory for FakeApp contexts."""

    def _fake_app(**kwargs) -> FakeApp:
        return FakeApp(**kwargs)

    return _fake_app


@pytest.fixture
def commit_message():
    """Commit message as passed with ``git commit -m``."""
    return CommitMessage("Fix login redirect")


@pytest.fixture
def git_repo(tmp_path):
    """Empty git repository in a temporary directory."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    subprocess.run(["git", "init", "-q", str(tmp_path)], check=True)
    return tmp_path
