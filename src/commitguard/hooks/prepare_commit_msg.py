"""Runner for the prepare-commit-msg hook phase."""

import logging

from ..commit_message import CommitMessage
from ..contexts.base import BaseAppContext
from ..exceptions import PluginResultError
from ..registry import get_plugins
from ..types.enums import HookName, PluginReturnCode

logger = logging.getLogger(__name__)


def run(app: BaseAppContext, commit_message: CommitMessage) -> int:
    """Run every prepare-commit-msg plugin.

    Args:
        app: Context for the prepare-commit-msg phase
        commit_message: Message of the commit in progress

    Returns:
        1 if any plugin failed (git aborts the commit), 0 otherwise

    Raises:
        PluginResultError: If a plugin returns something that is not a
            PluginReturnCode
    """
    exit_code = 0
    for name, func in get_plugins(HookName.PREPARE_COMMIT_MSG):
        raw = func(app=app, commit_message=commit_message)
        try:
            result = PluginReturnCode(raw)
        except ValueError:
            valid = ", ".join(code.value for code in PluginReturnCode)
            raise PluginResultError(
                f"Plugin '{name}' returned {raw!r}, expected one of: {valid}",
                plugin_name=name,
                hook_name=HookName.PREPARE_COMMIT_MSG.value,
            ) from None
        logger.debug("prepare-commit-msg plugin %s returned %s", name, result.value)
        if result.is_blocking():
            exit_code = 1
    return exit_code
