"""
Thermostat - Minimal widgetbind Widget

Demonstrates:
- Property bindings with can_bind / did_bind aspects
- A service binding invoked by the host
- An event binding with an explicit name
"""

import logging

from widgetbind import (
    RuntimeWidget,
    WidgetEvent,
    can_bind,
    did_bind,
    runtime_widgets,
    widget_definition,
    widget_event,
    widget_property,
    widget_service,
)

logging.basicConfig(level=logging.DEBUG)


@widget_definition("Thermostat")
class Thermostat(RuntimeWidget):
    temperature = widget_property()
    setpoint = widget_property("SetPoint", can_bind("accept_setpoint"), did_bind("setpoint_changed"))
    overheated: WidgetEvent = widget_event("Overheated")

    def accept_setpoint(self, value, info):
        return 5 <= value <= 30

    def setpoint_changed(self, previous, info):
        print(f"Setpoint {previous} -> {self.setpoint}")

    @widget_service("CheckTemperature")
    def check_temperature(self):
        if (self.temperature or 0) > (self.setpoint or 0) + 5:
            self.overheated()


if __name__ == "__main__":
    print(Thermostat.__widget_definition__.as_dict())

    thermostat = runtime_widgets.create("Thermostat", properties={"SetPoint": 20})
    thermostat.on("Overheated", lambda widget: print(f"{widget.widget_id} overheated"))

    thermostat.update_property({"TargetProperty": "SetPoint", "SinglePropertyValue": 99})  # vetoed
    thermostat.update_property({"TargetProperty": "SetPoint", "SinglePropertyValue": 22})
    thermostat.temperature = 31
    thermostat.service_invoked("CheckTemperature")
    print(thermostat.render_html())
