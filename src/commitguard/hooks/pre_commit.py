"""Validation runner for the pre-commit hook phase."""

import logging
from typing import Dict, Tuple

from ..contexts.base import BaseAppContext
from ..registry import get_plugins
from ..types.enums import HookName, PluginReturnCode

logger = logging.getLogger(__name__)

# (utf8 symbol, ascii fallback, color) per plugin outcome
STATUS_SYMBOLS: Dict[PluginReturnCode, Tuple[str, str, str]] = {
    PluginReturnCode.PASSED: ("✔", "[OK]", "green"),
    PluginReturnCode.FAILED: ("✘", "[FAIL]", "red"),
    PluginReturnCode.SKIPPED: ("–", "[SKIP]", "grey"),
}


def format_status_line(app: BaseAppContext, name: str, result: PluginReturnCode) -> str:
    """Build the status line printed for one plugin."""
    utf8_symbol, ascii_symbol, color = STATUS_SYMBOLS[result]
    symbol = utf8_symbol if app.get_terminal().is_utf8 else ascii_symbol
    return f"{app.color(color, symbol)} {name}"


def run_all_tests(app: BaseAppContext) -> bool:
    """Run every pre-commit plugin against the staged changes.

    Diagnostics are printed to stdout. A plugin that raises counts as
    failed and the remaining plugins still run.

    Args:
        app: Context configured for the pre-commit phase

    Returns:
        True if no plugin failed
    """
    plugins = get_plugins(HookName.PRE_COMMIT)
    if not plugins:
        logger.debug("No pre-commit plugins registered")
        return True

    staged_changes = app.get_staged_changes()
    all_passed = True
    for name, func in plugins:
        try:
            result = PluginReturnCode(func(app=app, staged_changes=staged_changes))
            error_message = None
        except Exception as e:
            logger.debug("Pre-commit plugin %s raised", name, exc_info=True)
            result = PluginReturnCode.FAILED
            error_message = str(e) or type(e).__name__

        print(format_status_line(app, name, result))
        if error_message:
            print(f"    {app.color('red', error_message)}")

        if result.is_blocking():
            all_passed = False

    logger.debug("Pre-commit checks %s", "passed" if all_passed else "failed")
    return all_passed
