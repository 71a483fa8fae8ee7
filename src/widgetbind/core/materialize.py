"""
Widget Materialization

``widget_definition`` turns the bindings collected for a widget class into
one frozen ``WidgetDefinition``: it validates the bound members, installs
their descriptors, attaches the definition to the class and exports it to
the runtime catalog.
"""

import inspect
import logging
import warnings
from typing import Any, Dict, Optional, Type, TypeVar, Union

from ..app.configurator import get_binding_options
from ..runtime.catalog import runtime_widgets
from ..runtime.widget import RuntimeWidget
from .aspects import AspectKey
from .bindings import BindingDescriptor, BindingKind, WidgetDefinition
from .decorators import BindingMarker
from .descriptors import BoundProperty, EventEmitter, WidgetEvent
from .exceptions import BindingError, IncompatibleEventMemberError, WidgetDefinitionError
from .registry import widget_registry

logger = logging.getLogger(__name__)

W = TypeVar("W", bound=Type[RuntimeWidget])

_METHOD_ASPECTS = (AspectKey.PRE_UPDATE_VALIDATOR.value, AspectKey.POST_UPDATE_NOTIFIER.value)


def _collect_bindings(widget_class: Type, inherit: bool) -> Dict[str, BindingDescriptor]:
    """Merge the tables along the MRO; subclasses override their bases."""
    classes = reversed(widget_class.__mro__) if inherit else (widget_class,)
    bindings: Dict[str, BindingDescriptor] = {}
    for klass in classes:
        table = widget_registry.find(klass)
        if table is not None:
            bindings.update(table.bindings())
    return bindings


def _collect_annotations(widget_class: Type) -> Dict[str, Any]:
    annotations: Dict[str, Any] = {}
    for klass in reversed(widget_class.__mro__):
        annotations.update(inspect.get_annotations(klass))
    return annotations


def _is_event_annotation(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.rsplit(".", 1)[-1] == WidgetEvent.__name__
    return isinstance(annotation, type) and issubclass(annotation, WidgetEvent)


def _validate(widget_class: Type, bindings: Dict[str, BindingDescriptor]) -> None:
    annotations = _collect_annotations(widget_class)
    for member_name, binding in bindings.items():
        if binding.kind == BindingKind.EVENT:
            if binding.member is not None:
                raise IncompatibleEventMemberError(
                    widget_class, member_name, f"declared as {type(binding.member).__name__}, not as an event slot"
                )
            annotation = annotations.get(member_name)
            if annotation is not None and not _is_event_annotation(annotation):
                raise IncompatibleEventMemberError(
                    widget_class, member_name, f"annotated as {annotation!r}, expected WidgetEvent"
                )

        if binding.kind == BindingKind.SERVICE:
            current = inspect.getattr_static(widget_class, member_name, None)
            if isinstance(current, BindingMarker) and current.member is None:
                raise WidgetDefinitionError(
                    f"Service member {widget_class.__qualname__}.{member_name} must be a method"
                )

        for aspect in binding.aspects:
            if aspect.key not in _METHOD_ASPECTS:
                continue
            method = getattr(widget_class, aspect.value, None) if isinstance(aspect.value, str) else None
            if not callable(method):
                raise WidgetDefinitionError(
                    f"Aspect {aspect.key} of {widget_class.__qualname__}.{member_name} "
                    f"names a missing method '{aspect.value}'"
                )


def _install(widget_class: Type, bindings: Dict[str, BindingDescriptor]) -> None:
    for member_name, binding in bindings.items():
        if binding.kind == BindingKind.PROPERTY:
            setattr(widget_class, member_name, BoundProperty(member_name, binding.external_name))
        elif binding.kind == BindingKind.EVENT:
            setattr(widget_class, member_name, EventEmitter(member_name, binding.external_name))
        else:
            # Services keep their method; an override without a marker stays in place
            current = inspect.getattr_static(widget_class, member_name, None)
            if isinstance(current, BindingMarker):
                setattr(widget_class, member_name, current.member)


def _materialize(widget_class: Type, name: Optional[str]) -> Type:
    if not (isinstance(widget_class, type) and issubclass(widget_class, RuntimeWidget)):
        raise WidgetDefinitionError(f"{widget_class!r} is not a RuntimeWidget subclass")
    if name is None:
        name = widget_class.__name__

    options = get_binding_options()
    table = widget_registry.table_for(widget_class)
    bindings = _collect_bindings(widget_class, options.inherit_bindings)

    if not table.frozen:
        _validate(widget_class, bindings)
        _install(widget_class, bindings)
        table.freeze()
    elif table.widget_name != name:
        logger.debug(f"Re-exporting {widget_class.__qualname__}: {table.widget_name} -> {name}")

    table.widget_name = name
    definition = WidgetDefinition(name=name, widget_class=widget_class, bindings=bindings)
    widget_class.__widget_definition__ = definition

    if options.catalog_exports:
        runtime_widgets.register(name, widget_class)
    logger.info(f"Widget {name} defined by {widget_class.__qualname__} with {len(bindings)} binding(s)")
    return widget_class


def widget_definition(widget: Union[Type, str, None] = None):
    """
    Make a widget class available to the host.

    Used directly (``@widget_definition``) the widget is exported under its
    class name. Used with a name (``@widget_definition("Gauge")``) or with no
    argument (``@widget_definition()``) it returns the class decorator.
    Applying it again re-exports the class under the new name.
    """
    if isinstance(widget, type):
        return _materialize(widget, None)
    if widget is not None and (not isinstance(widget, str) or not widget):
        raise BindingError(f"Widget name must be a non-empty string, got {widget!r}")

    def decorator(widget_class: W) -> W:
        return _materialize(widget_class, widget)

    return decorator


def get_widget_definition(widget_class: Type) -> WidgetDefinition:
    """Return the definition attached to ``widget_class`` itself."""
    definition = vars(widget_class).get("__widget_definition__")
    if definition is None:
        raise WidgetDefinitionError(f"{widget_class.__qualname__} has not been finalized with widget_definition")
    return definition


def _warn_legacy(entry_point: str) -> None:
    if get_binding_options().legacy_warnings:
        warnings.warn(f"{entry_point} is deprecated, use widget_definition instead", DeprecationWarning, stacklevel=3)


def runtime_widget(widget: W) -> W:
    """Deprecated: use ``@widget_definition``."""
    _warn_legacy("runtime_widget")
    return widget_definition(widget)


def named_runtime_widget(name: str):
    """Deprecated: use ``@widget_definition(name)``."""
    _warn_legacy("named_runtime_widget")
    return widget_definition(name)
