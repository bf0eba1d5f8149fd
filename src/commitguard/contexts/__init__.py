"""Application contexts handed to commitguard plugins."""

from .app import HookApp
from .base import BaseAppContext

__all__ = [
    "BaseAppContext",
    "HookApp",
]
