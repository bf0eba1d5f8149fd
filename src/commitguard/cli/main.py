"""Console entry point dispatching git hooks to commitguard plugins.

pre-commit runs the validation suite and, when it passes, leaves the marker
file behind. prepare-commit-msg runs its plugins on the message file git
passed in, saves the message and removes the marker, so the next commit
starts without one.
"""

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from .. import plugins  # noqa: F401  (registers the built-in plugins)
from ..commit_message import CommitMessage
from ..config import GuardSettings, configure_logging
from ..contexts.app import HookApp
from ..exceptions import CommitGuardError
from ..hooks import pre_commit, prepare_commit_msg
from ..output_utils import handle_hook_error
from ..types.enums import HookName
from .argument_parser import parse_args

logger = logging.getLogger(__name__)


def _run_pre_commit(app: HookApp) -> int:
    passed = pre_commit.run_all_tests(app)
    if not passed:
        return 1
    app.get_marker().touch()
    return 0


def _run_prepare_commit_msg(app: HookApp, hook_args: List[str]) -> int:
    if not hook_args:
        raise CommitGuardError(
            "prepare-commit-msg needs the commit message file as its first argument",
            error_code="USER_MISSING_ARGUMENT",
            suggested_fix="Install the hook as: exec commitguard prepare-commit-msg \"$@\"",
        )
    commit_message = CommitMessage.from_file(hook_args[0])
    try:
        exit_code = prepare_commit_msg.run(app, commit_message)
        commit_message.save()
    finally:
        app.get_marker().clear()
    return exit_code


def run_hook(args: argparse.Namespace, settings: Optional[GuardSettings] = None) -> int:
    """Run one hook phase.

    Args:
        args: Parsed command line arguments
        settings: Runtime settings (default: read from the environment)

    Returns:
        Exit code for git
    """
    settings = settings or GuardSettings.from_env()
    app = HookApp(args.hook_name, settings=settings)
    logger.debug("Running %s hook in %r", app.hook_name.value, app.get_repository())

    if app.hook_name == HookName.PRE_COMMIT:
        return _run_pre_commit(app)
    return _run_prepare_commit_msg(app, args.hook_args)


def main(argv: Optional[List[str]] = None) -> NoReturn:
    """Console script entry point."""
    args = parse_args(argv)
    settings = GuardSettings.from_env()
    configure_logging(settings)

    try:
        exit_code = run_hook(args, settings)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)
    except CommitGuardError as e:
        handle_hook_error(e)
    sys.exit(exit_code)
