"""Git commit hooks that notice when pre-commit was skipped.

commitguard runs plugins for git hook phases. Its built-in
``detect_commit_no_verify`` plugin runs during prepare-commit-msg: when the
commit bypassed pre-commit (``git commit --no-verify``), it re-runs the
pre-commit checks and appends their failing output to the commit message.
Reverts with failing checks are blocked instead.

Basic Usage:
    from commitguard import plugin, PluginReturnCode

    @plugin("pre-commit")
    def no_todo_files(app, staged_changes):
        if "TODO" in staged_changes.get_staged_files():
            print("Remove the TODO file")
            return PluginReturnCode.FAILED
        return PluginReturnCode.PASSED

Hook installation:
    # .git/hooks/pre-commit
    exec commitguard pre-commit "$@"
    # .git/hooks/prepare-commit-msg
    exec commitguard prepare-commit-msg "$@"
"""

__version__ = "1.0.3"

from .capture import capture_stdout
from .commit_message import CommitMessage
from .config import GuardSettings, configure_logging
from .contexts import BaseAppContext, HookApp
from .exceptions import (
    CommitGuardError,
    CommitMessageError,
    InvalidHookNameError,
    PluginRegistrationError,
    PluginResultError,
    RepositoryError,
)
from .hooks import run_all_tests
from .marker import PrecommitMarker
from .plugins import detect_commit_no_verify, strip_ansi
from .registry import clear_registered_plugins, get_plugins, plugin, register_plugin
from .repository import GitRepository
from .staged_changes import StagedChanges
from .terminal import Terminal
from .types import HookName, PluginReturnCode

__all__ = [
    # Plugin API
    "plugin",
    "register_plugin",
    "get_plugins",
    "clear_registered_plugins",
    "HookName",
    "PluginReturnCode",
    # Built-in plugin
    "detect_commit_no_verify",
    "strip_ansi",
    # Collaborators
    "BaseAppContext",
    "HookApp",
    "CommitMessage",
    "GitRepository",
    "StagedChanges",
    "PrecommitMarker",
    "Terminal",
    "run_all_tests",
    "capture_stdout",
    # Configuration
    "GuardSettings",
    "configure_logging",
    # Exceptions
    "CommitGuardError",
    "CommitMessageError",
    "InvalidHookNameError",
    "PluginRegistrationError",
    "PluginResultError",
    "RepositoryError",
]
