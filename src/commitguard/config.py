"""Environment-driven settings and logging setup for commitguard."""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MARKER_FILENAME = "COMMIT-MSG-CHECKS"
DEFAULT_LOG_LEVEL = "WARNING"

DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PLAIN_FORMAT = "%(message)s"


def _env_flag(value: Optional[str]) -> bool:
    return (value or "false").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class GuardSettings:
    """Runtime settings for the hook entry points.

    Attributes:
        debug: Verbose log format and DEBUG level
        log_level: Logging level name used when debug is off
        marker_filename: Name of the pre-commit marker inside the git dir
        no_color: Disable ANSI colors on the terminal
    """
    debug: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    marker_filename: str = DEFAULT_MARKER_FILENAME
    no_color: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GuardSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            GuardSettings instance
        """
        env = os.environ if environ is None else environ
        return cls(
            debug=_env_flag(env.get("COMMITGUARD_DEBUG")),
            log_level=env.get("COMMITGUARD_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            marker_filename=env.get("COMMITGUARD_MARKER") or DEFAULT_MARKER_FILENAME,
            no_color=env.get("NO_COLOR") is not None,
        )

    @property
    def logging_level(self) -> int:
        """Numeric level for the stdlib logging module."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level, logging.WARNING)


def configure_logging(settings: GuardSettings) -> None:
    """Configure the root logger for a hook run.

    Records go to stderr so they never end up in captured stdout, and
    therefore never in a commit message.
    """
    logging.basicConfig(
        level=settings.logging_level,
        format=DEBUG_FORMAT if settings.debug else PLAIN_FORMAT,
        stream=sys.stderr,
        force=True,
    )
