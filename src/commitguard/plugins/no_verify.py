"""Find out when a commit skipped pre-commit and record what it skipped.

Sometimes ``git commit --no-verify`` is the fastest way past the checks. To
keep it from being too tempting, this plugin runs during prepare-commit-msg,
notices that the pre-commit phase did not run for this commit, and runs the
pre-commit checks itself. The commit still goes through when they fail, but
their output is appended to the commit message for posterity.

``git revert`` never runs pre-commit and prepare-commit-msg cannot be
skipped with ``--no-verify``, so for reverts a failure blocks the commit
instead.
"""

import logging
import re
from typing import Callable, Optional

from ..capture import capture_stdout
from ..commit_message import CommitMessage
from ..contexts.base import BaseAppContext
from ..hooks import pre_commit
from ..registry import plugin
from ..types import ValidationRunner
from ..types.enums import HookName, PluginReturnCode

logger = logging.getLogger(__name__)

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[\d;]*[a-zA-Z]")

REVERT_INSTRUCTIONS = "Fix the errors above and use 'git commit' to complete the revert."


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences, which commit messages do not support."""
    return ANSI_ESCAPE_RE.sub("", text)


def precommit_marker_exists(app: BaseAppContext) -> bool:
    """Check whether the pre-commit hook already ran for this commit."""
    return app.get_marker().exists()


@plugin(HookName.PREPARE_COMMIT_MSG)
def detect_commit_no_verify(
    app: BaseAppContext,
    commit_message: CommitMessage,
    *,
    has_precommit_run: Optional[Callable[[BaseAppContext], bool]] = None,
    run_validation: Optional[ValidationRunner] = None,
) -> PluginReturnCode:
    """Re-run the pre-commit checks if they were bypassed.

    Args:
        app: Context of the prepare-commit-msg hook
        commit_message: Message of the commit in progress
        has_precommit_run: Predicate telling whether pre-commit already ran
            (default: the marker file exists)
        run_validation: Runner for the full pre-commit suite
            (default: hooks.pre_commit.run_all_tests)

    Returns:
        SKIPPED if pre-commit already ran, FAILED if a revert fails the
        checks, PASSED otherwise
    """
    has_precommit_run = has_precommit_run or precommit_marker_exists
    run_validation = run_validation or pre_commit.run_all_tests

    if has_precommit_run(app):
        logger.debug("pre-commit already ran for this commit, skipping")
        return PluginReturnCode.SKIPPED

    # Pretend to be the pre-commit hook to gather its output.
    local_app = app.clone(name=HookName.PRE_COMMIT.value)
    # The output may end up in the commit message, which does not take utf8 well.
    local_app.get_terminal().is_utf8 = False

    logger.debug("pre-commit was bypassed, running its checks")
    with capture_stdout() as output:
        changes_pass = run_validation(local_app)
    stdout = output.getvalue()

    if changes_pass:
        logger.debug("Bypassed pre-commit checks passed")
        return PluginReturnCode.PASSED

    if app.get_staged_changes().is_revert():
        logger.info("Blocking revert with failing pre-commit checks")
        print(stdout.rstrip())
        print()
        print(app.color("red", REVERT_INSTRUCTIONS))
        return PluginReturnCode.FAILED

    if re.search(r"\S", stdout):
        # Keep the message passed via -m at the top.
        cleaned = strip_ansi(stdout.rstrip())
        commit_message.update_message(commit_message.get_message() + "\n\n" + cleaned)
        logger.info("Appended failing pre-commit output to the commit message")

    return PluginReturnCode.PASSED
