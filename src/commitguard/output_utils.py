"""Exit helpers and error handlers for the hook entry points.

git only looks at the exit code of a hook: zero lets the commit continue,
anything else aborts it.
"""

import logging
import sys
from typing import NoReturn, Optional, TextIO

from .exceptions import CommitGuardError

logger = logging.getLogger(__name__)


def exit_failure(message: Optional[str] = None, exit_code: int = 1,
                 file: Optional[TextIO] = None) -> NoReturn:
    """Exit with an error, which makes git abort the commit.

    Args:
        message: Optional error message to print
        exit_code: Exit code (defaults to 1)
        file: Output file (defaults to stderr)
    """
    if message:
        print(message, file=file or sys.stderr)
    sys.exit(exit_code)


def handle_hook_error(error: Exception, file: Optional[TextIO] = None) -> NoReturn:
    """Report an error raised while running a hook and exit.

    Args:
        error: The exception that stopped the hook
        file: Output file for the error message
    """
    if isinstance(error, CommitGuardError):
        logger.debug("Hook error %s: %s", error.error_code, error.context)
        exit_failure(error.get_user_message(), exit_code=1, file=file)
    logger.debug("Unexpected hook error", exc_info=error)
    exit_failure(f"Unexpected error: {error}", exit_code=1, file=file)
