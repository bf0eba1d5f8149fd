"""Plugin registration per git hook phase.

Plugins are plain callables registered with the ``plugin`` decorator. Each
hook runner looks up the plugins of its phase and calls them with keyword
arguments in registration order.
"""

from typing import Callable, Dict, List, Optional, Tuple, Union

from .exceptions import InvalidHookNameError, PluginRegistrationError
from .types import PluginCallable
from .types.enums import HookName

_REGISTERED_PLUGINS: Dict[HookName, Dict[str, PluginCallable]] = {}


def _resolve_hook_name(hook_name: Union[str, HookName]) -> HookName:
    try:
        return HookName.from_string(hook_name)
    except ValueError as e:
        raise InvalidHookNameError(str(e), hook_name=str(hook_name),
                                   valid_names=HookName.get_all_names())


def register_plugin(hook_name: Union[str, HookName], func: PluginCallable,
                    name: Optional[str] = None) -> None:
    """Register a plugin callable for a hook phase.

    Args:
        hook_name: Hook phase the plugin runs in
        func: Plugin callable
        name: Registration name (default: the callable's __name__)

    Raises:
        InvalidHookNameError: If the hook phase is unknown
        PluginRegistrationError: If the name is already taken for that phase
    """
    hook = _resolve_hook_name(hook_name)
    plugin_name = name or func.__name__
    plugins = _REGISTERED_PLUGINS.setdefault(hook, {})
    if plugin_name in plugins:
        raise PluginRegistrationError(
            f"Plugin '{plugin_name}' is already registered for {hook.value}",
            plugin_name=plugin_name,
        )
    plugins[plugin_name] = func


def plugin(hook_name: Union[str, HookName],
           name: Optional[str] = None) -> Callable[[PluginCallable], PluginCallable]:
    """Decorator for registering plugin functions.

    Example:
        @plugin("pre-commit")
        def check_trailing_whitespace(app, staged_changes):
            ...
    """
    def decorator(func: PluginCallable) -> PluginCallable:
        register_plugin(hook_name, func, name=name)
        return func

    return decorator


def get_plugins(hook_name: Union[str, HookName]) -> List[Tuple[str, PluginCallable]]:
    """Get (name, callable) pairs for a hook phase in registration order."""
    hook = _resolve_hook_name(hook_name)
    return list(_REGISTERED_PLUGINS.get(hook, {}).items())


def unregister_plugin(hook_name: Union[str, HookName], name: str) -> bool:
    """Remove a plugin.

    Returns:
        True if the plugin was registered
    """
    hook = _resolve_hook_name(hook_name)
    return _REGISTERED_PLUGINS.get(hook, {}).pop(name, None) is not None


def clear_registered_plugins() -> None:
    """Clear all registered plugins (mainly for testing)."""
    _REGISTERED_PLUGINS.clear()
