"""Tests for the commitguard command line entry point."""

import argparse
import logging

import pytest

from commitguard.cli.argument_parser import parse_args
from commitguard.cli.main import main, run_hook
from commitguard.config import GuardSettings
from commitguard.plugins.no_verify import detect_commit_no_verify
from commitguard.registry import clear_registered_plugins, register_plugin
from commitguard.types.enums import HookName, PluginReturnCode


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def in_repo(git_repo, monkeypatch):
    monkeypatch.chdir(git_repo)
    monkeypatch.delenv("COMMITGUARD_MARKER", raising=False)
    clear_registered_plugins()
    register_plugin(HookName.PREPARE_COMMIT_MSG, detect_commit_no_verify)
    return git_repo


def failing_check(app, staged_changes):
    print("style.py:1: missing docstring")
    return PluginReturnCode.FAILED


def hook_args(*argv):
    return argparse.Namespace(hook_name=argv[0], hook_args=list(argv[1:]))


class TestArgumentParser:
    """Test command line parsing."""

    def test_hook_and_arguments(self):
        args = parse_args(["prepare-commit-msg", ".git/COMMIT_EDITMSG", "message"])
        assert args.hook_name == "prepare-commit-msg"
        assert args.hook_args == [".git/COMMIT_EDITMSG", "message"]

    def test_hook_without_arguments(self):
        args = parse_args(["pre-commit"])
        assert args.hook_args == []


class TestRunHook:
    """Test the marker lifecycle across both hooks."""

    def test_pre_commit_pass_leaves_marker(self, in_repo):
        assert run_hook(hook_args("pre-commit"), GuardSettings()) == 0
        assert (in_repo / ".git" / "COMMIT-MSG-CHECKS").exists()

    def test_pre_commit_failure_leaves_no_marker(self, in_repo, capsys):
        register_plugin(HookName.PRE_COMMIT, failing_check)

        assert run_hook(hook_args("pre-commit"), GuardSettings(no_color=True)) == 1
        assert not (in_repo / ".git" / "COMMIT-MSG-CHECKS").exists()
        assert "missing docstring" in capsys.readouterr().out

    def test_normal_commit_skips_and_clears_marker(self, in_repo):
        register_plugin(HookName.PRE_COMMIT, failing_check)
        (in_repo / ".git" / "COMMIT-MSG-CHECKS").touch()
        message_file = in_repo / ".git" / "COMMIT_EDITMSG"
        message_file.write_text("Add feature\n", encoding="utf-8")

        assert run_hook(hook_args("prepare-commit-msg", str(message_file)), GuardSettings()) == 0
        assert message_file.read_text(encoding="utf-8") == "Add feature\n"
        assert not (in_repo / ".git" / "COMMIT-MSG-CHECKS").exists()

    def test_no_verify_commit_gets_output_appended(self, in_repo):
        register_plugin(HookName.PRE_COMMIT, failing_check)
        message_file = in_repo / ".git" / "COMMIT_EDITMSG"
        message_file.write_text("Add feature\n", encoding="utf-8")

        exit_code = run_hook(hook_args("prepare-commit-msg", str(message_file)),
                             GuardSettings(no_color=True))

        assert exit_code == 0
        assert message_file.read_text(encoding="utf-8") == (
            "Add feature\n\n\nstyle.py:1: missing docstring\n[FAIL] failing_check"
        )

    def test_revert_with_failing_checks_is_blocked(self, in_repo, capsys):
        register_plugin(HookName.PRE_COMMIT, failing_check)
        (in_repo / ".git" / "REVERT_HEAD").write_text("0" * 40 + "\n")
        message_file = in_repo / ".git" / "COMMIT_EDITMSG"
        message_file.write_text("Revert \"Add feature\"\n", encoding="utf-8")

        exit_code = run_hook(hook_args("prepare-commit-msg", str(message_file)),
                             GuardSettings(no_color=True))

        assert exit_code == 1
        assert message_file.read_text(encoding="utf-8") == "Revert \"Add feature\"\n"
        assert "complete the revert" in capsys.readouterr().out


class TestMain:
    """Test exit codes of the console script."""

    def test_pre_commit_exit_code(self, in_repo):
        with pytest.raises(SystemExit) as exc_info:
            main(["pre-commit"])
        assert exc_info.value.code == 0

    def test_unknown_hook(self, in_repo, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["post-merge"])
        assert exc_info.value.code == 1
        assert "Invalid hook name 'post-merge'" in capsys.readouterr().err

    def test_missing_message_file_argument(self, in_repo, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["prepare-commit-msg"])
        assert exc_info.value.code == 1
        assert "USER_MISSING_ARGUMENT" in capsys.readouterr().err

    def test_unreadable_message_file(self, in_repo, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["prepare-commit-msg", str(in_repo / "missing")])
        assert exc_info.value.code == 1
        assert "Cannot read commit message file" in capsys.readouterr().err

    def test_plugin_without_result(self, in_repo, capsys):
        message_file = in_repo / ".git" / "COMMIT_EDITMSG"
        message_file.write_text("Add feature\n", encoding="utf-8")
        register_plugin(HookName.PREPARE_COMMIT_MSG, lambda app, commit_message: None,
                        name="unfinished")

        with pytest.raises(SystemExit) as exc_info:
            main(["prepare-commit-msg", str(message_file)])

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Plugin 'unfinished' returned None" in err
        assert "INTERNAL_PLUGIN_RESULT" in err
