"""
Binding Data Model

Descriptors for individual member bindings, the per-class registration table
they accumulate in, and the consolidated definition handed to the host.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

from .aspects import Aspect, AspectKey
from .exceptions import FrozenRegistrationError

logger = logging.getLogger(__name__)


class BindingKind(str, Enum):
    """The external data source a member is bound to."""
    PROPERTY = "property"  # readable/writable host state
    SERVICE = "service"    # invokable operation
    EVENT = "event"        # emittable signal


class BindingDescriptor(BaseModel):
    """Metadata recorded for one annotated class member."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    member_name: str = Field(min_length=1)
    external_name: str = Field(min_length=1)
    kind: BindingKind
    aspects: Tuple[Aspect, ...] = ()

    # Declared service method or event value, checked at finalization; never exported
    member: Any = Field(default=None, exclude=True, repr=False)

    def aspect_value(self, key: str, default: Any = None) -> Any:
        """Return the value of the last aspect with the given key."""
        if isinstance(key, AspectKey):
            key = key.value
        for aspect in reversed(self.aspects):
            if aspect.key == key:
                return aspect.value
        return default

    def to_host(self) -> Dict[str, Any]:
        """Shape understood by the host loader."""
        return {
            "kind": self.kind.value,
            "externalName": self.external_name,
            "aspects": [{"key": a.key, "value": a.value} for a in self.aspects],
        }


class RegistrationTable:
    """
    Per-class mapping of member name to binding descriptor.

    The table grows while the class body executes and is frozen when the
    class is materialized. Re-annotating a member replaces its descriptor.
    """

    def __init__(self, widget_class: Type):
        self.widget_class = widget_class
        self.widget_name: Optional[str] = None
        self._bindings: Dict[str, BindingDescriptor] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def put(self, descriptor: BindingDescriptor) -> None:
        """Insert or overwrite the descriptor for its member."""
        if self._frozen:
            raise FrozenRegistrationError(
                f"Registration table of '{self.widget_class.__qualname__}' is frozen; "
                f"cannot bind member '{descriptor.member_name}'"
            )
        previous = self._bindings.get(descriptor.member_name)
        if previous is not None:
            logger.debug(
                f"Rebinding {self.widget_class.__qualname__}.{descriptor.member_name}: "
                f"{previous.kind.value}:{previous.external_name} -> {descriptor.kind.value}:{descriptor.external_name}"
            )
        self._bindings[descriptor.member_name] = descriptor

    def get(self, member_name: str) -> Optional[BindingDescriptor]:
        return self._bindings.get(member_name)

    def freeze(self) -> None:
        self._frozen = True

    def bindings(self) -> Mapping[str, BindingDescriptor]:
        """Read-only view of the recorded bindings."""
        return MappingProxyType(self._bindings)

    def __contains__(self, member_name: str) -> bool:
        return member_name in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"RegistrationTable({self.widget_class.__qualname__}, {len(self)} bindings, {state})"


@dataclass(frozen=True)
class WidgetDefinition:
    """Consolidated, read-only registration descriptor for a widget class."""
    name: str
    widget_class: Type
    bindings: Mapping[str, BindingDescriptor] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))

    def __hash__(self) -> int:
        return hash((self.name, self.widget_class))

    def _of_kind(self, kind: BindingKind) -> Dict[str, BindingDescriptor]:
        return {member: d for member, d in self.bindings.items() if d.kind == kind}

    def properties(self) -> Dict[str, BindingDescriptor]:
        return self._of_kind(BindingKind.PROPERTY)

    def services(self) -> Dict[str, BindingDescriptor]:
        return self._of_kind(BindingKind.SERVICE)

    def events(self) -> Dict[str, BindingDescriptor]:
        return self._of_kind(BindingKind.EVENT)

    def binding_for(self, kind: BindingKind, external_name: str) -> Optional[BindingDescriptor]:
        """Find the binding of a kind by the name the host knows it under."""
        for descriptor in self.bindings.values():
            if descriptor.kind == kind and descriptor.external_name == external_name:
                return descriptor
        return None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "bindings": {member: d.to_host() for member, d in self.bindings.items()},
        }
