"""
Name-based dispatch of generation hooks.

A generator implements ``gen_<kind>`` methods for the node kinds it can
render. Kinds it does not implement are skipped without error, so a new
target language only needs the hooks it cares about.
"""

from typing import Any, Callable, Dict, List, Optional

from ..logging_config import get_logger
from .core.schema import NodeKind, SchemaNode

logger = get_logger(__name__)

HANDLER_PREFIX = "gen_"


def hook_name(kind: NodeKind) -> str:
    """Name of the hook for a node kind (e.g. ``gen_simple_type``)."""
    return f"{HANDLER_PREFIX}{kind.value}"


def handler_name(node: SchemaNode) -> str:
    """Name of the hook that renders a node."""
    return hook_name(node.kind)


def find_hook(receiver: Any, name: str) -> Optional[Callable[..., Any]]:
    """
    Look up a hook on a receiver.

    A HandlerRegistry answers from its registered handlers only; any other
    receiver from its attributes. Non-callable attributes count as missing.
    """
    if isinstance(receiver, HandlerRegistry):
        function = receiver.get(name)
    else:
        function = getattr(receiver, name, None)
    return function if callable(function) else None


def call_by_name(receiver: Any, name: str, *args, **kwargs) -> Any:
    """
    Invoke ``receiver.<name>(*args, **kwargs)`` if it exists.

    Args:
        receiver: Object exposing generation hooks
        name: Hook name

    Returns:
        The hook's return value, or None when the receiver has no such hook

    Raises:
        Exception: Whatever the hook raises, or an exception instance the
            hook returned in place of a result
    """
    function = find_hook(receiver, name)
    if function is None:
        logger.debug(f"{type(receiver).__name__} has no hook {name}, skipping")
        return None

    result = function(*args, **kwargs)
    if isinstance(result, BaseException):
        raise result
    return result


class HandlerRegistry:
    """
    Hooks registered by name instead of defined as methods.

    :func:`call_by_name` dispatches to registered handlers only, so a
    registry can stand in for a generator object without its own methods
    being mistaken for hooks.
    """

    def __init__(self):
        self._handlers: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str, handler: Optional[Callable[..., Any]] = None):
        """Register a handler; usable directly or as a decorator."""
        if handler is None:
            def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
                self._handlers[name] = func
                return func

            return decorator

        self._handlers[name] = handler
        return handler

    def unregister(self, name: str):
        self._handlers.pop(name, None)

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    def get(self, name: str) -> Optional[Callable[..., Any]]:
        return self._handlers.get(name)
