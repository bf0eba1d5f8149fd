"""Tests for commitguard enums."""

import pytest

from commitguard.types import HookName, PluginReturnCode


class TestHookName:
    """Test hook name parsing."""

    def test_values_match_git_hook_files(self):
        assert HookName.get_all_names() == ["pre-commit", "prepare-commit-msg"]

    def test_from_string(self):
        assert HookName.from_string("pre-commit") is HookName.PRE_COMMIT
        assert HookName.from_string(HookName.PREPARE_COMMIT_MSG) is HookName.PREPARE_COMMIT_MSG

    def test_from_string_invalid(self):
        with pytest.raises(ValueError, match="Invalid hook name 'commit-msg'"):
            HookName.from_string("commit-msg")

    def test_str_enum_equality(self):
        assert HookName.PRE_COMMIT == "pre-commit"


class TestPluginReturnCode:
    """Test plugin results."""

    def test_exactly_three_results(self):
        assert [code.value for code in PluginReturnCode] == ["skipped", "passed", "failed"]

    @pytest.mark.parametrize("code,blocking", [
        (PluginReturnCode.SKIPPED, False),
        (PluginReturnCode.PASSED, False),
        (PluginReturnCode.FAILED, True),
    ])
    def test_is_blocking(self, code, blocking):
        assert code.is_blocking() is blocking
