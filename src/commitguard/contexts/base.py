"""Base class for hook application contexts."""

from abc import ABC, abstractmethod
from typing import Any

from ..exceptions import InvalidHookNameError
from ..marker import PrecommitMarker
from ..types import ColorName
from ..types.enums import HookName


class BaseAppContext(ABC):
    """Everything a plugin may ask of the running hook.

    A context is bound to one hook phase. ``clone(name)`` gives a separate
    context for another phase so that phase-specific state set on the clone
    does not leak back into this one.
    """

    def __init__(self, hook_name: str) -> None:
        try:
            self._hook_name = HookName.from_string(hook_name)
        except ValueError as e:
            raise InvalidHookNameError(str(e), hook_name=hook_name,
                                       valid_names=HookName.get_all_names())

    @property
    def hook_name(self) -> HookName:
        """Get the hook phase this context runs for."""
        return self._hook_name

    @abstractmethod
    def get_repository(self) -> Any:
        """Get the repository the hook runs in."""
        pass

    @abstractmethod
    def get_staged_changes(self) -> Any:
        """Get the staged-change inspector for the commit in progress."""
        pass

    @abstractmethod
    def get_terminal(self) -> Any:
        """Get the terminal abstraction for this context."""
        pass

    @abstractmethod
    def clone(self, name: str) -> "BaseAppContext":
        """Create an independent context configured for another hook phase."""
        pass

    def get_marker(self) -> PrecommitMarker:
        """Get the marker recording that pre-commit ran for this commit."""
        return PrecommitMarker(self.get_repository().git_dir)

    def color(self, color: ColorName, text: str) -> str:
        """Colorize text for this context's terminal."""
        return self.get_terminal().color(color, text)
