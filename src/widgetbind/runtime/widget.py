"""
Runtime Widget

Base class for bindable widgets and the in-process side of the host
contract: property storage, binding-driven property updates, service
dispatch and event delivery.
"""

import json
import logging
import uuid
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from fastcore.xml import Div, to_xml
from pydantic import BaseModel, ConfigDict, Field

from ..core.aspects import AspectKey
from ..core.bindings import BindingKind, WidgetDefinition
from ..core.exceptions import BindingNotFoundError, WidgetDefinitionError

logger = logging.getLogger(__name__)


class UpdatePropertyInfo(BaseModel):
    """A host-driven property update, as delivered by a binding."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    target_property: str = Field(alias="TargetProperty")
    single_property_value: Any = Field(default=None, alias="SinglePropertyValue")
    raw_single_property_value: Any = Field(default=None, alias="RawSinglePropertyValue")
    source_property: Optional[str] = Field(default=None, alias="SourceProperty")
    actual_data_rows: Optional[List[Any]] = Field(default=None, alias="ActualDataRows")
    is_bound_to_selected_rows: bool = Field(default=False, alias="IsBoundToSelectedRows")


class RuntimeWidget:
    """
    Base class for all widget classes.

    Subclasses declare bound members with ``widget_property``,
    ``widget_service`` and ``widget_event`` and are finalized with
    ``widget_definition``.
    """
    __widget_definition__: Optional[WidgetDefinition] = None

    def __init__(self, properties: Optional[Mapping[str, Any]] = None, widget_id: Optional[str] = None):
        self.widget_id = widget_id or f"{type(self).__name__.lower()}-{uuid.uuid4().hex[:8]}"
        self._properties: Dict[str, Any] = dict(properties or {})
        self._listeners: Dict[str, List[Callable]] = {}

    @property
    def definition(self) -> WidgetDefinition:
        """The materialized definition of this widget's class."""
        definition = vars(type(self)).get("__widget_definition__")
        if definition is None:
            raise WidgetDefinitionError(f"{type(self).__qualname__} has not been finalized with widget_definition")
        return definition

    @property
    def properties(self) -> Dict[str, Any]:
        return dict(self._properties)

    def get_property(self, name: str, default: Any = None) -> Any:
        return self._properties.get(name, default)

    def set_property(self, name: str, value: Any) -> None:
        self._properties[name] = value

    def update_property(self, info: Union[UpdatePropertyInfo, Mapping[str, Any]]) -> bool:
        """
        Apply a property update coming from a binding.

        The bound member's ``can_bind`` method may veto the update; its
        ``did_bind`` method is called with the previous value afterwards.
        Properties without a bound member are stored as-is.

        Args:
            info: The update, or a mapping with the host's field names

        Returns:
            True if the value was committed, False if it was vetoed
        """
        if not isinstance(info, UpdatePropertyInfo):
            info = UpdatePropertyInfo.model_validate(info)
        value = info.single_property_value

        binding = self.definition.binding_for(BindingKind.PROPERTY, info.target_property)
        if binding is None:
            self.set_property(info.target_property, value)
            return True

        validator = binding.aspect_value(AspectKey.PRE_UPDATE_VALIDATOR)
        if validator and getattr(self, validator)(value, info) is False:
            logger.debug(f"{self.widget_id}: update of '{info.target_property}' rejected by {validator}")
            return False

        previous = getattr(self, binding.member_name)
        setattr(self, binding.member_name, value)

        notifier = binding.aspect_value(AspectKey.POST_UPDATE_NOTIFIER)
        if notifier:
            getattr(self, notifier)(previous, info)
        return True

    def service_invoked(self, name: str) -> Any:
        """Invoke the method bound to the service ``name``."""
        binding = self.definition.binding_for(BindingKind.SERVICE, name)
        if binding is None:
            raise BindingNotFoundError(f"{type(self).__qualname__} does not bind a service named '{name}'")
        logger.debug(f"{self.widget_id}: invoking service '{name}' via {binding.member_name}")
        return getattr(self, binding.member_name)()

    def on(self, event_name: str, callback: Callable) -> Callable:
        """Subscribe ``callback`` to an event; returns the callback."""
        self._listeners.setdefault(event_name, []).append(callback)
        return callback

    def off(self, event_name: str, callback: Callable) -> None:
        listeners = self._listeners.get(event_name, [])
        if callback in listeners:
            listeners.remove(callback)

    def trigger_event(self, name: str, *args, **kwargs) -> int:
        """Deliver event ``name`` to its listeners; returns how many were called."""
        listeners = list(self._listeners.get(name, []))
        logger.debug(f"{self.widget_id}: event '{name}' -> {len(listeners)} listener(s)")
        for callback in listeners:
            callback(self, *args, **kwargs)
        return len(listeners)

    def __ft__(self):
        """Render the widget's root element with its current properties."""
        definition = vars(type(self)).get("__widget_definition__")
        name = definition.name if definition else type(self).__name__
        return Div(
            id=self.widget_id,
            data_widget=name,
            data_properties=json.dumps(self._properties, default=str),
        )

    def render_html(self) -> str:
        return to_xml(self.__ft__())
