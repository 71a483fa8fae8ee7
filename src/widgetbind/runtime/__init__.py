"""
widgetbind Runtime

In-process reference host: the widget base class that honors bindings and
the catalog finalized widgets are exported to.
"""

from .widget import RuntimeWidget, UpdatePropertyInfo
from .catalog import WidgetCatalog, runtime_widgets

__all__ = [
    "RuntimeWidget",
    "UpdatePropertyInfo",
    "WidgetCatalog",
    "runtime_widgets",
]
