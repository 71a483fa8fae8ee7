"""
Binding Errors

Exception hierarchy raised while declaring, materializing and dispatching
widget bindings.
"""

from typing import Optional, Type


class WidgetBindingError(Exception):
    """Base class for all widgetbind errors."""


class AspectError(WidgetBindingError, TypeError):
    """Raised when an aspect is malformed (non-string or empty key, or a non-aspect value in an aspect list)."""


class BindingError(WidgetBindingError, ValueError):
    """Raised when binding arguments cannot produce a valid descriptor."""


class WidgetDefinitionError(WidgetBindingError):
    """Raised when a widget class cannot be materialized."""


class FrozenRegistrationError(WidgetDefinitionError):
    """Raised when a finalized registration table is written to."""


class IncompatibleEventMemberError(WidgetDefinitionError):
    """Raised when a member bound as an event is not event-shaped."""

    def __init__(self, widget_class: Type, member_name: str, reason: Optional[str] = None):
        self.widget_class = widget_class
        self.member_name = member_name
        message = f"Member '{member_name}' of widget class '{widget_class.__qualname__}' cannot be bound to an event"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class BindingNotFoundError(WidgetBindingError, LookupError):
    """Raised when the host asks for a binding the widget does not declare."""
