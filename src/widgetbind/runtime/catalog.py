"""
Runtime Widget Catalog

The host-side table of exported widgets. Materialized widget classes are
published here under their exported name so the host can look them up and
instantiate them.
"""

import logging
from typing import Dict, List, Optional, Type, TYPE_CHECKING

from ..core.exceptions import WidgetDefinitionError

if TYPE_CHECKING:
    from .widget import RuntimeWidget

logger = logging.getLogger(__name__)


class WidgetCatalog:
    """Exported widget name → widget class."""

    def __init__(self):
        self._widgets: Dict[str, Type["RuntimeWidget"]] = {}

    def register(self, name: str, widget_class: Type["RuntimeWidget"]) -> None:
        """
        Export a widget class under ``name``.

        A class is exported under one name at a time; registering it again
        under a different name drops the previous entry.
        """
        for stale in [n for n, c in self._widgets.items() if c is widget_class and n != name]:
            del self._widgets[stale]
            logger.debug(f"Renamed widget export {stale} -> {name}")

        existing = self._widgets.get(name)
        if existing is not None and existing is not widget_class:
            logger.warning(
                f"Widget name '{name}' was exported by {existing.__qualname__}, "
                f"now re-bound to {widget_class.__qualname__}"
            )
        self._widgets[name] = widget_class

    def unregister(self, name: str) -> Optional[Type["RuntimeWidget"]]:
        return self._widgets.pop(name, None)

    def get(self, name: str) -> Optional[Type["RuntimeWidget"]]:
        return self._widgets.get(name)

    def name_of(self, widget_class: Type["RuntimeWidget"]) -> Optional[str]:
        for name, c in self._widgets.items():
            if c is widget_class:
                return name
        return None

    def create(self, name: str, **kwargs) -> "RuntimeWidget":
        """Instantiate the widget exported as ``name``."""
        widget_class = self._widgets.get(name)
        if widget_class is None:
            raise WidgetDefinitionError(f"No widget is exported as '{name}'")
        return widget_class(**kwargs)

    def names(self) -> List[str]:
        return list(self._widgets)

    def clear(self) -> None:
        """Drop every export. Useful for testing."""
        self._widgets.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._widgets

    def __len__(self) -> int:
        return len(self._widgets)


# Global catalog the materializer exports to
runtime_widgets = WidgetCatalog()
