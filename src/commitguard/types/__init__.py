"""Type definitions for commitguard."""

from typing import Any, Callable, Literal

from .enums import HookName, PluginReturnCode

# Color names understood by Terminal.color()
ColorName = Literal["red", "green", "yellow", "blue", "grey", "bold"]

# Registered plugins are called with keyword arguments only
PluginCallable = Callable[..., PluginReturnCode]

# Validation runner: context in, pass/fail out
ValidationRunner = Callable[[Any], bool]

__all__ = [
    "HookName",
    "PluginReturnCode",
    "ColorName",
    "PluginCallable",
    "ValidationRunner",
]
