"""
Name Resolution

Decides which external name a binding is published under. Marker arguments
are either ``(name, *aspects)`` or ``(*aspects)``; the shape of the first
argument alone selects the form.
"""

from typing import NamedTuple, Sequence, Tuple

from .aspects import Aspect
from .exceptions import AspectError, BindingError


class ResolvedBinding(NamedTuple):
    external_name: str
    aspects: Tuple[Aspect, ...]


def resolve_binding_arguments(member_name: str, args: Sequence) -> ResolvedBinding:
    """
    Split marker arguments into an external name and an aspect list.

    A leading string is the explicit external name and the remaining
    arguments are aspects. Otherwise every argument is an aspect and the
    member name is used as the external name. ``str`` is tested before
    ``Aspect``, so a string-like aspect would be read as a name.

    Args:
        member_name: Name of the class member being bound
        args: Positional arguments given to the marker

    Returns:
        ResolvedBinding with the external name and the aspects in declaration order

    Raises:
        BindingError: If the explicit name is empty
        AspectError: If any non-leading argument is not an Aspect
    """
    if args and isinstance(args[0], str):
        external_name, aspects = args[0], tuple(args[1:])
        if not external_name:
            raise BindingError(f"Explicit external name for member '{member_name}' must not be empty")
    else:
        external_name, aspects = member_name, tuple(args)

    for aspect in aspects:
        if not isinstance(aspect, Aspect):
            raise AspectError(
                f"Binding arguments for member '{member_name}' must be aspects after the optional name, "
                f"got {type(aspect).__name__}: {aspect!r}"
            )
    return ResolvedBinding(external_name, aspects)
