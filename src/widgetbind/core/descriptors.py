"""
Member Descriptors

Descriptors installed on a widget class when it is materialized. Property
members get a synthetic getter/setter pair that routes every read and write
through the widget's property store; event members get an emitter.
"""


class BoundProperty:
    """Read/write the host property ``external_name`` through the widget's property store."""

    def __init__(self, member_name: str, external_name: str) -> None:
        self.member_name = member_name
        self.external_name = external_name

    def __get__(self, instance, owner):
        #  class access  →  the descriptor itself, so the binding stays inspectable
        if instance is None:
            return self
        return instance.get_property(self.external_name)

    def __set__(self, instance, value) -> None:
        instance.set_property(self.external_name, value)

    def __repr__(self) -> str:
        return f"BoundProperty({self.member_name!r} -> {self.external_name!r})"


class WidgetEvent:
    """
    An event slot bound to a widget instance.

    Use it as the type annotation of event members; calling it triggers the
    event under its external name.
    """

    def __init__(self, widget, name: str) -> None:
        self.widget = widget
        self.name = name

    def __call__(self, *args, **kwargs):
        return self.widget.trigger_event(self.name, *args, **kwargs)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WidgetEvent):
            return NotImplemented
        return self.widget is other.widget and self.name == other.name

    def __hash__(self) -> int:
        return hash((id(self.widget), self.name))

    def __repr__(self) -> str:
        return f"WidgetEvent({self.name!r})"


class EventEmitter:
    """Hand out a ``WidgetEvent`` per instance; event members cannot be reassigned."""

    def __init__(self, member_name: str, external_name: str) -> None:
        self.member_name = member_name
        self.external_name = external_name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return WidgetEvent(instance, self.external_name)

    def __set__(self, instance, value) -> None:
        raise AttributeError(f"Event member '{self.member_name}' is read-only")

    def __repr__(self) -> str:
        return f"EventEmitter({self.member_name!r} -> {self.external_name!r})"
