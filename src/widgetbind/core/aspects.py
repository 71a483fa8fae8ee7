"""
Aspect Model

Aspects are immutable key/value modifiers attached to a binding. The host
reads them after materialization to decide how an externally driven update
is applied to the bound member.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import AspectError


class AspectKey(str, Enum):
    """Well-known aspect keys understood by the runtime."""
    PRE_UPDATE_VALIDATOR = "preUpdateValidator"  # method(value, info) -> bool
    POST_UPDATE_NOTIFIER = "postUpdateNotifier"  # method(previous_value, info)


class Aspect(BaseModel):
    """A single behavioral modifier for a binding."""
    model_config = ConfigDict(frozen=True, strict=True)

    key: str = Field(min_length=1)
    value: Any = None

    def __repr__(self) -> str:
        return f"Aspect({self.key!r}, {self.value!r})"


def aspect_with_key_and_value(key: str, value: Any) -> Aspect:
    """
    Construct an aspect from a key and a value.

    Args:
        key: Non-empty string identifying the modifier
        value: Arbitrary payload, usually a method name on the widget class

    Returns:
        The immutable aspect

    Raises:
        AspectError: If the key is not a non-empty string
    """
    if isinstance(key, AspectKey):
        key = key.value
    try:
        return Aspect(key=key, value=value)
    except ValidationError as e:
        raise AspectError(f"Invalid aspect key {key!r}: {e.errors()[0]['msg']}") from e


def can_bind(name: str) -> Aspect:
    """
    Aspect naming a method that can veto a binding update.

    The method is called with ``(value, info)`` before the property is
    updated and must return a boolean; ``False`` discards the update.
    """
    return aspect_with_key_and_value(AspectKey.PRE_UPDATE_VALIDATOR, name)


def did_bind(name: str) -> Aspect:
    """
    Aspect naming a method invoked after a binding updated the property.

    The method is called with ``(previous_value, info)`` once the new value is
    assigned. Plain assignments from widget code do not trigger it.
    """
    return aspect_with_key_and_value(AspectKey.POST_UPDATE_NOTIFIER, name)
