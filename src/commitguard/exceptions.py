"""Exception hierarchy for commitguard.

Every error raised on purpose by commitguard derives from CommitGuardError,
which carries a standardized error code, a suggested fix and a free-form
context dictionary alongside the message. Hook entry points catch the base
class and report it through ``output_utils.handle_hook_error``.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class CommitGuardError(Exception):
    """Base exception for commitguard.

    Attributes:
        message: Human readable error message
        error_code: Standardized error code (CATEGORY_SPECIFIC_CODE)
        suggested_fix: What the user can do about it
        context: Extra information collected where the error was raised
    """

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        suggested_fix: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.suggested_fix = suggested_fix
        self.context = context or {}

    def add_context(self, key: str, value: Any) -> None:
        """Add a context entry."""
        self.context[key] = value

    def get_user_message(self) -> str:
        """Get the message shown to the user on the terminal."""
        user_msg = f"{self.message} [{self.error_code}]"
        if self.suggested_fix:
            user_msg += f"\n\nSuggested fix: {self.suggested_fix}"
        return user_msg


class InvalidHookNameError(CommitGuardError):
    """Unknown git hook phase."""

    def __init__(self, message: str, hook_name: Optional[str] = None,
                 valid_names: Optional[List[str]] = None, **kwargs: Any) -> None:
        self.hook_name = hook_name
        self.valid_names = valid_names or []
        kwargs.setdefault("error_code", "USER_INVALID_HOOK_NAME")
        if self.valid_names:
            kwargs.setdefault("suggested_fix", f"Use one of: {', '.join(self.valid_names)}")
        context = kwargs.setdefault("context", {})
        if hook_name is not None:
            context["hook_name"] = hook_name
        super().__init__(message, **kwargs)


class PluginRegistrationError(CommitGuardError):
    """A plugin could not be registered."""

    def __init__(self, message: str, plugin_name: Optional[str] = None, **kwargs: Any) -> None:
        self.plugin_name = plugin_name
        kwargs.setdefault("error_code", "INTERNAL_PLUGIN_REGISTRATION")
        if plugin_name:
            kwargs.setdefault("context", {})["plugin_name"] = plugin_name
        super().__init__(message, **kwargs)


class PluginResultError(CommitGuardError):
    """A plugin returned something other than a PluginReturnCode."""

    def __init__(self, message: str, plugin_name: Optional[str] = None,
                 hook_name: Optional[str] = None, **kwargs: Any) -> None:
        self.plugin_name = plugin_name
        self.hook_name = hook_name
        kwargs.setdefault("error_code", "INTERNAL_PLUGIN_RESULT")
        kwargs.setdefault("suggested_fix", "Return PluginReturnCode.SKIPPED, PASSED or FAILED from the plugin")
        context = kwargs.setdefault("context", {})
        if plugin_name:
            context["plugin_name"] = plugin_name
        if hook_name:
            context["hook_name"] = hook_name
        super().__init__(message, **kwargs)


class RepositoryError(CommitGuardError):
    """A git command failed or git is not available."""

    def __init__(self, message: str, command: Optional[List[str]] = None,
                 returncode: Optional[int] = None, stderr: str = "", **kwargs: Any) -> None:
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr
        kwargs.setdefault("error_code", "SYSTEM_GIT_COMMAND")
        kwargs.setdefault("suggested_fix", "Make sure git is installed and the hook runs inside a repository")
        context = kwargs.setdefault("context", {})
        if self.command:
            context["command"] = " ".join(self.command)
        if returncode is not None:
            context["returncode"] = returncode
        super().__init__(message, **kwargs)


class CommitMessageError(CommitGuardError):
    """The commit message file could not be read or written."""

    def __init__(self, message: str, path: Union[str, Path, None] = None, **kwargs: Any) -> None:
        self.path = Path(path) if path else None
        kwargs.setdefault("error_code", "SYSTEM_COMMIT_MESSAGE_IO")
        kwargs.setdefault("suggested_fix", "Check that the commit message file exists and is writable")
        if self.path:
            kwargs.setdefault("context", {})["path"] = str(self.path)
        super().__init__(message, **kwargs)
