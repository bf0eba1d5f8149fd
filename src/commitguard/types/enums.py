"""Enumerations for commitguard hooks and plugins.

All enums inherit from str and Enum so they compare equal to their string
values and can be written straight into log records.
"""

from enum import Enum
from typing import List


class HookName(str, Enum):
    """Git hook phases that commitguard can run plugins for.

    The values match the file names git uses under ``.git/hooks``.
    """
    PRE_COMMIT = "pre-commit"
    PREPARE_COMMIT_MSG = "prepare-commit-msg"

    @classmethod
    def from_string(cls, value: str) -> "HookName":
        """Parse a hook name from string.

        Args:
            value: String value to parse

        Returns:
            HookName enum value

        Raises:
            ValueError: If value is not a supported hook name
        """
        try:
            return cls(value)
        except ValueError:
            valid_values = [hook.value for hook in cls]
            raise ValueError(f"Invalid hook name '{value}'. Valid values: {valid_values}")

    @classmethod
    def get_all_names(cls) -> List[str]:
        """Get all supported hook names."""
        return [hook.value for hook in cls]


class PluginReturnCode(str, Enum):
    """Outcome of a single plugin run.

    Values:
        SKIPPED: The plugin decided it had nothing to do
        PASSED: The plugin ran and the hook may continue
        FAILED: The plugin ran and the host must abort the commit
    """
    SKIPPED = "skipped"
    PASSED = "passed"
    FAILED = "failed"

    def is_blocking(self) -> bool:
        """Check if this result should abort the commit.

        Returns:
            True if result is FAILED
        """
        return self == self.FAILED
