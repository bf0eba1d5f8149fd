"""CLI argument parser for the commitguard hook dispatcher.

Usage:
    commitguard pre-commit
    commitguard prepare-commit-msg .git/COMMIT_EDITMSG [source [sha]]

Git hook scripts forward their own arguments, e.g.
``exec commitguard prepare-commit-msg "$@"``.
"""

import argparse
from typing import List, Optional

from .. import __version__
from ..types.enums import HookName


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="commitguard",
        description="Run commitguard plugins for a git hook phase.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "hook_name",
        metavar="HOOK",
        help=f"Hook phase to run ({', '.join(HookName.get_all_names())})",
    )
    parser.add_argument(
        "hook_args",
        nargs=argparse.REMAINDER,
        help="Arguments git passed to the hook",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return create_parser().parse_args(argv)
