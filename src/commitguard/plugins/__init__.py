"""Built-in plugins.

Importing this package registers them with the plugin registry.
"""

from .no_verify import (
    REVERT_INSTRUCTIONS,
    detect_commit_no_verify,
    precommit_marker_exists,
    strip_ansi,
)

__all__ = [
    "REVERT_INSTRUCTIONS",
    "detect_commit_no_verify",
    "precommit_marker_exists",
    "strip_ansi",
]
