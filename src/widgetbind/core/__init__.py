"""
widgetbind Core Module

Binding metadata: aspects, member markers, the per-class registry and the
materializer that turns collected bindings into a widget definition.
"""

from .exceptions import (
    WidgetBindingError,
    AspectError,
    BindingError,
    WidgetDefinitionError,
    FrozenRegistrationError,
    IncompatibleEventMemberError,
    BindingNotFoundError,
)
from .aspects import Aspect, AspectKey, aspect_with_key_and_value, can_bind, did_bind
from .bindings import BindingKind, BindingDescriptor, RegistrationTable, WidgetDefinition
from .naming import ResolvedBinding, resolve_binding_arguments
from .registry import WidgetRegistry, widget_registry, annotate_member
from .descriptors import BoundProperty, EventEmitter, WidgetEvent
from .decorators import (
    BindingMarker,
    widget_property,
    widget_service,
    widget_event,
    bound_property,
    bound_service,
)
from .materialize import (
    widget_definition,
    get_widget_definition,
    runtime_widget,
    named_runtime_widget,
)

__all__ = [
    "WidgetBindingError",
    "AspectError",
    "BindingError",
    "WidgetDefinitionError",
    "FrozenRegistrationError",
    "IncompatibleEventMemberError",
    "BindingNotFoundError",
    "Aspect",
    "AspectKey",
    "aspect_with_key_and_value",
    "can_bind",
    "did_bind",
    "BindingKind",
    "BindingDescriptor",
    "RegistrationTable",
    "WidgetDefinition",
    "ResolvedBinding",
    "resolve_binding_arguments",
    "WidgetRegistry",
    "widget_registry",
    "annotate_member",
    "BoundProperty",
    "EventEmitter",
    "WidgetEvent",
    "BindingMarker",
    "widget_property",
    "widget_service",
    "widget_event",
    "bound_property",
    "bound_service",
    "widget_definition",
    "get_widget_definition",
    "runtime_widget",
    "named_runtime_widget",
]
