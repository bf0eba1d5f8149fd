"""Hook phase runners."""

from . import pre_commit, prepare_commit_msg
from .pre_commit import run_all_tests

__all__ = [
    "pre_commit",
    "prepare_commit_msg",
    "run_all_tests",
]
