"""
widgetbind - Declarative Bindings for Runtime Widgets

Mark widget class members as host properties, services or events and let
``widget_definition`` assemble the registration the host runtime reads.

Example:
    ```python
    from widgetbind import RuntimeWidget, WidgetEvent, can_bind, widget_definition, widget_event, widget_property

    @widget_definition("Thermostat")
    class Thermostat(RuntimeWidget):
        temperature = widget_property()
        level = widget_property(can_bind("validate_level"))
        alarm: WidgetEvent = widget_event("AlarmRaised")

        def validate_level(self, value, info):
            return 0 <= value <= 10
    ```
"""

from .core import *
from .core import __all__ as _core_all
from .runtime import RuntimeWidget, UpdatePropertyInfo, WidgetCatalog, runtime_widgets
from .app import BindingOptions, configure_bindings, get_binding_options, reset_binding_options

__version__ = "0.1.0"

__all__ = [
    *_core_all,
    # Runtime
    'RuntimeWidget',
    'UpdatePropertyInfo',
    'WidgetCatalog',
    'runtime_widgets',
    # Configuration
    'BindingOptions',
    'configure_bindings',
    'get_binding_options',
    'reset_binding_options',
]
