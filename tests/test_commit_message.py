"""Tests for CommitMessage."""

import pytest

from commitguard.commit_message import CommitMessage
from commitguard.exceptions import CommitMessageError


class TestCommitMessage:
    """Test the in-memory message holder."""

    def test_get_and_update(self):
        message = CommitMessage("first")
        message.update_message("second")
        assert message.get_message() == "second"

    @pytest.mark.parametrize("text,summary", [
        ("Fix bug\n\nDetails", "Fix bug"),
        ("\n\n  Leading blank lines\n", "Leading blank lines"),
        ("# Please enter the commit message\nReal subject\n", "Real subject"),
        ("", ""),
    ])
    def test_get_summary(self, text, summary):
        assert CommitMessage(text).get_summary() == summary

    def test_is_empty(self):
        assert CommitMessage("").is_empty() is True
        assert CommitMessage("\n# comment only\n#\n").is_empty() is True
        assert CommitMessage("subject\n# comment").is_empty() is False


class TestCommitMessageFile:
    """Test reading and writing git's message file."""

    def test_round_trip_through_file(self, tmp_path):
        path = tmp_path / "COMMIT_EDITMSG"
        path.write_text("subject\n", encoding="utf-8")

        message = CommitMessage.from_file(path)
        assert message.path == path
        assert message.get_message() == "subject\n"

        message.update_message("subject\n\nappended")
        message.save()
        assert path.read_text(encoding="utf-8") == "subject\n\nappended"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CommitMessageError) as exc_info:
            CommitMessage.from_file(tmp_path / "missing")
        assert exc_info.value.error_code == "SYSTEM_COMMIT_MESSAGE_IO"
        assert exc_info.value.context["path"].endswith("missing")

    def test_save_without_path(self):
        with pytest.raises(CommitMessageError):
            CommitMessage("subject").save()
