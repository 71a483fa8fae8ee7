"""
Binding Registry

Process-wide arena that owns one registration table per widget class.
Tables are created on first use, filled while class bodies execute and
frozen when the class is materialized.
"""

import logging
from typing import Any, Dict, Optional, Sequence, Type

from .bindings import BindingDescriptor, BindingKind, RegistrationTable
from .naming import resolve_binding_arguments

logger = logging.getLogger(__name__)


class WidgetRegistry:
    """Registry of registration tables keyed by widget class identity."""

    def __init__(self):
        self._tables: Dict[Type, RegistrationTable] = {}

    def table_for(self, widget_class: Type) -> RegistrationTable:
        """Return the class's table, creating an empty one on first access."""
        table = self._tables.get(widget_class)
        if table is None:
            table = RegistrationTable(widget_class)
            self._tables[widget_class] = table
            logger.debug(f"Created registration table for {widget_class.__qualname__}")
        return table

    def find(self, widget_class: Type) -> Optional[RegistrationTable]:
        """Return the class's own table without creating one."""
        return self._tables.get(widget_class)

    def annotate(
        self,
        widget_class: Type,
        member_name: str,
        kind: BindingKind,
        args: Sequence = (),
        member: Any = None,
    ) -> BindingDescriptor:
        """
        Record a binding for one class member.

        Args:
            widget_class: Class that declares the member
            member_name: Attribute name of the member
            kind: Binding kind selected by the marker that was used
            args: Marker arguments, ``(name, *aspects)`` or ``(*aspects)``
            member: The object the author declared for the member, if any

        Returns:
            The descriptor stored in the class's table
        """
        resolved = resolve_binding_arguments(member_name, args)
        descriptor = BindingDescriptor(
            member_name=member_name,
            external_name=resolved.external_name,
            kind=kind,
            aspects=resolved.aspects,
            # Property accessors are replaced outright, so they are not kept
            member=None if kind == BindingKind.PROPERTY else member,
        )
        self.table_for(widget_class).put(descriptor)
        logger.debug(
            f"Bound {widget_class.__qualname__}.{member_name} as {kind.value} "
            f"'{descriptor.external_name}' with {len(descriptor.aspects)} aspect(s)"
        )
        return descriptor

    def clear(self) -> None:
        """Forget every table. Useful for testing."""
        self._tables.clear()

    def __contains__(self, widget_class: Type) -> bool:
        return widget_class in self._tables

    def __len__(self) -> int:
        return len(self._tables)


# Global registry instance
widget_registry = WidgetRegistry()


def annotate_member(
    target_class: Type,
    member_name: str,
    kind: BindingKind,
    *args,
    member: Any = None,
) -> BindingDescriptor:
    """Record a binding for ``target_class.member_name`` in the global registry."""
    return widget_registry.annotate(target_class, member_name, kind, args, member=member)
