"""
Binding Markers

The decorators component authors use to bind class members to host
properties, services and events. They only record metadata; the class is
rewired later by ``widget_definition``.

Every marker accepts the same forms:

    level = widget_property()
    level = widget_property("Level", can_bind("check_level"))

    @widget_service
    def refresh(self): ...

    @widget_service("Refresh")
    def refresh(self): ...
"""

import warnings
from typing import Any, Callable, Optional, Tuple, Union

from ..app.configurator import get_binding_options
from .bindings import BindingKind
from .exceptions import BindingError
from .registry import annotate_member


class BindingMarker:
    """
    Placeholder left in the class body until the class is materialized.

    Python calls ``__set_name__`` once for every class member when the class
    object is created; that is where the binding is recorded.
    """

    def __init__(self, kind: BindingKind, args: Tuple = (), member: Any = None):
        self.kind = kind
        self.args = tuple(args)
        self.member = member

    def __call__(self, member: Union[Callable, property]) -> "BindingMarker":
        # @widget_property("Name") applied to a function
        if self.member is not None:
            raise TypeError(f"{self!r} already wraps {self.member!r}")
        return BindingMarker(self.kind, self.args, member)

    def __set_name__(self, owner, name: str) -> None:
        annotate_member(owner, name, self.kind, *self.args, member=self.member)

    def __repr__(self) -> str:
        return f"BindingMarker({self.kind.value}, args={self.args!r})"


def _marker(kind: BindingKind, args: Tuple) -> BindingMarker:
    # Used without parentheses: the only argument is the decorated function or accessor
    if len(args) == 1 and (callable(args[0]) or isinstance(args[0], property)):
        return BindingMarker(kind, (), member=args[0])
    return BindingMarker(kind, args)


def widget_property(*args) -> BindingMarker:
    """
    Bind a class member to a widget property.

    Args:
        *args: Optional external property name followed by property aspects
            (``can_bind``, ``did_bind``). Without a name the member name is used.

    The member's own getter or setter, if it has one, is replaced when the
    class is materialized.
    """
    return _marker(BindingKind.PROPERTY, args)


def widget_service(*args) -> BindingMarker:
    """Bind a method to the widget service with the given name, or the method's own name."""
    return _marker(BindingKind.SERVICE, args)


def widget_event(*args) -> BindingMarker:
    """
    Bind a class member to the widget event with the given name, or the member's own name.

    The member must be event-shaped: declared without a value and, if
    annotated, annotated as ``WidgetEvent``.
    """
    return _marker(BindingKind.EVENT, args)


def _legacy_marker(kind: BindingKind, name: Optional[str], replacement: str) -> BindingMarker:
    if get_binding_options().legacy_warnings:
        warnings.warn(
            f"bound_{kind.value} is deprecated, use {replacement} instead",
            DeprecationWarning,
            stacklevel=3,
        )
    if not isinstance(name, str) or not name:
        raise BindingError(f"bound_{kind.value} requires a non-empty {kind.value} name, got {name!r}")
    return BindingMarker(kind, (name,))


def bound_property(name: str) -> BindingMarker:
    """Deprecated: use ``widget_property(name)``."""
    return _legacy_marker(BindingKind.PROPERTY, name, "widget_property")


def bound_service(name: str) -> BindingMarker:
    """Deprecated: use ``widget_service(name)``."""
    return _legacy_marker(BindingKind.SERVICE, name, "widget_service")
