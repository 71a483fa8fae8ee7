"""
Tests for widget materialization.
"""

import logging
import warnings

import pytest

from widgetbind import (
    BindingError,
    BindingKind,
    BindingMarker,
    BoundProperty,
    EventEmitter,
    IncompatibleEventMemberError,
    RuntimeWidget,
    WidgetDefinitionError,
    WidgetEvent,
    bound_property,
    bound_service,
    can_bind,
    configure_bindings,
    did_bind,
    get_widget_definition,
    named_runtime_widget,
    runtime_widget,
    runtime_widgets,
    widget_definition,
    widget_event,
    widget_property,
    widget_registry,
    widget_service,
)


class TestExportedName:

    def test_direct_form_uses_class_name(self):
        @widget_definition
        class Thermostat(RuntimeWidget):
            temperature = widget_property()

        assert get_widget_definition(Thermostat).name == "Thermostat"
        assert runtime_widgets.get("Thermostat") is Thermostat

    def test_indirect_form_without_name_uses_class_name(self):
        @widget_definition()
        class Thermostat(RuntimeWidget):
            pass

        assert get_widget_definition(Thermostat).name == "Thermostat"

    def test_indirect_form_with_name(self):
        @widget_definition("ClimateControl")
        class Thermostat(RuntimeWidget):
            pass

        assert get_widget_definition(Thermostat).name == "ClimateControl"
        assert "ClimateControl" in runtime_widgets
        assert "Thermostat" not in runtime_widgets

    def test_decorator_returns_the_class(self):
        class Thermostat(RuntimeWidget):
            pass

        assert widget_definition(Thermostat) is Thermostat
        assert widget_definition("Other")(Thermostat) is Thermostat

    @pytest.mark.parametrize("name", ["", 42])
    def test_invalid_name_rejected(self, name):
        with pytest.raises(BindingError):
            widget_definition(name)


class TestScenarios:

    def test_property_without_arguments(self):
        @widget_definition
        class Sensor(RuntimeWidget):
            temperature = widget_property()

        descriptor = get_widget_definition(Sensor).bindings["temperature"]
        assert descriptor.member_name == "temperature"
        assert descriptor.external_name == "temperature"
        assert descriptor.kind == BindingKind.PROPERTY
        assert descriptor.aspects == ()

    def test_property_with_validator(self):
        @widget_definition
        class Tank(RuntimeWidget):
            level = widget_property(can_bind("validate_level"))

            def validate_level(self, value, info):
                return value >= 0

        aspects = get_widget_definition(Tank).bindings["level"].to_host()["aspects"]
        assert aspects == [{"key": "preUpdateValidator", "value": "validate_level"}]

    def test_event_with_explicit_name(self):
        @widget_definition
        class Siren(RuntimeWidget):
            on_alarm: WidgetEvent = widget_event("AlarmRaised")

        descriptor = get_widget_definition(Siren).bindings["on_alarm"]
        assert descriptor.external_name == "AlarmRaised"
        assert descriptor.kind == BindingKind.EVENT

    def test_empty_widget(self):
        @widget_definition("EmptyWidget")
        class Empty(RuntimeWidget):
            pass

        definition = get_widget_definition(Empty)
        assert definition.as_dict() == {"name": "EmptyWidget", "bindings": {}}
        table = widget_registry.find(Empty)
        assert table is not None
        assert len(table) == 0
        assert table.frozen

    def test_reannotated_member_has_single_entry(self):
        class Panel(RuntimeWidget):
            status = widget_property()

        widget_property("StatusValue").__set_name__(Panel, "status")
        widget_definition(Panel)

        bindings = get_widget_definition(Panel).bindings
        assert list(bindings) == ["status"]
        assert bindings["status"].external_name == "StatusValue"


class TestConsolidatedDefinition:

    def test_host_shape(self):
        @widget_definition("Dial")
        class Dial(RuntimeWidget):
            value = widget_property("Value", can_bind("check"), did_bind("changed"))
            turned: WidgetEvent = widget_event()

            @widget_service("Reset")
            def reset(self):
                self.value = 0

            def check(self, value, info):
                return True

            def changed(self, previous, info):
                pass

        assert get_widget_definition(Dial).as_dict() == {
            "name": "Dial",
            "bindings": {
                "value": {
                    "kind": "property",
                    "externalName": "Value",
                    "aspects": [
                        {"key": "preUpdateValidator", "value": "check"},
                        {"key": "postUpdateNotifier", "value": "changed"},
                    ],
                },
                "turned": {"kind": "event", "externalName": "turned", "aspects": []},
                "reset": {"kind": "service", "externalName": "Reset", "aspects": []},
            },
        }

    def test_bindings_grouped_by_kind(self):
        @widget_definition
        class Dial(RuntimeWidget):
            value = widget_property()
            turned: WidgetEvent = widget_event()

            @widget_service
            def reset(self):
                pass

        definition = get_widget_definition(Dial)
        assert list(definition.properties()) == ["value"]
        assert list(definition.services()) == ["reset"]
        assert list(definition.events()) == ["turned"]
        assert definition.binding_for(BindingKind.SERVICE, "reset").member_name == "reset"
        assert definition.binding_for(BindingKind.PROPERTY, "reset") is None

    def test_definition_is_read_only(self):
        @widget_definition
        class Dial(RuntimeWidget):
            value = widget_property()

        definition = get_widget_definition(Dial)
        with pytest.raises(TypeError):
            definition.bindings["other"] = definition.bindings["value"]
        with pytest.raises(AttributeError):
            definition.name = "Renamed"

    def test_definition_is_hashable(self):
        @widget_definition
        class Dial(RuntimeWidget):
            value = widget_property()

        definition = get_widget_definition(Dial)
        assert definition in {definition}
        assert hash(definition) == hash(("Dial", Dial))

    def test_unfinalized_class_has_no_definition(self):
        class Draft(RuntimeWidget):
            pass

        with pytest.raises(WidgetDefinitionError):
            get_widget_definition(Draft)


class TestAccessors:

    def test_property_accessor_installed(self):
        @widget_definition
        class Label(RuntimeWidget):
            text = widget_property("Text")

        assert isinstance(vars(Label)["text"], BoundProperty)
        label = Label(properties={"Text": "hello"})
        assert label.text == "hello"
        label.text = "bye"
        assert label.get_property("Text") == "bye"

    def test_existing_getter_replaced(self):
        @widget_definition
        class Label(RuntimeWidget):
            @widget_property("Text")
            def text(self):
                return "original"

        assert Label(properties={"Text": "bound"}).text == "bound"

    def test_replaced_getter_not_recorded(self):
        @widget_definition
        class Label(RuntimeWidget):
            @widget_property("Text")
            def text(self):
                return "original"

        assert get_widget_definition(Label).bindings["text"].member is None

    def test_existing_property_replaced(self):
        @widget_definition
        class Label(RuntimeWidget):
            @widget_property
            @property
            def caption(self):
                return "original"

        label = Label()
        label.caption = "bound"
        assert label.caption == "bound"
        assert label.get_property("caption") == "bound"

    def test_event_emitter_installed(self):
        @widget_definition
        class Button(RuntimeWidget):
            clicked: WidgetEvent = widget_event("Clicked")

        assert isinstance(vars(Button)["clicked"], EventEmitter)
        assert Button().clicked.name == "Clicked"

    def test_service_keeps_method(self):
        @widget_definition
        class Player(RuntimeWidget):
            @widget_service("Play")
            def play(self):
                return "playing"

        assert Player().play() == "playing"

    def test_service_without_method_rejected(self):
        class Player(RuntimeWidget):
            play = widget_service()

        with pytest.raises(WidgetDefinitionError):
            widget_definition(Player)

    def test_failed_finalization_leaves_class_untouched(self):
        class Player(RuntimeWidget):
            volume = widget_property()
            play = widget_service()

        with pytest.raises(WidgetDefinitionError):
            widget_definition(Player)

        assert isinstance(vars(Player)["volume"], BindingMarker)
        assert not widget_registry.table_for(Player).frozen
        assert "__widget_definition__" not in vars(Player)

    def test_aspect_naming_missing_method_rejected(self):
        class Tank(RuntimeWidget):
            level = widget_property(can_bind("no_such_method"))

        with pytest.raises(WidgetDefinitionError, match="no_such_method"):
            widget_definition(Tank)


class TestEventMembers:

    def test_unannotated_event_accepted(self):
        @widget_definition
        class Button(RuntimeWidget):
            clicked = widget_event()

        assert "clicked" in get_widget_definition(Button).events()

    def test_method_bound_as_event_rejected(self):
        class Button(RuntimeWidget):
            @widget_event
            def clicked(self):
                pass

        with pytest.raises(IncompatibleEventMemberError) as exc_info:
            widget_definition(Button)
        assert exc_info.value.member_name == "clicked"
        assert exc_info.value.widget_class is Button
        assert "Button" in str(exc_info.value)

    def test_wrongly_annotated_event_rejected(self):
        class Button(RuntimeWidget):
            clicked: int = widget_event()

        with pytest.raises(IncompatibleEventMemberError, match="clicked"):
            widget_definition(Button)
        assert runtime_widgets.name_of(Button) is None
        assert not widget_registry.find(Button).frozen


class TestRedefinition:

    def test_reinvocation_replaces_name_without_duplicates(self):
        @widget_definition("First")
        class Meter(RuntimeWidget):
            value = widget_property()

        widget_definition("Second")(Meter)

        definition = get_widget_definition(Meter)
        assert definition.name == "Second"
        assert list(definition.bindings) == ["value"]
        assert widget_registry.find(Meter).widget_name == "Second"
        assert runtime_widgets.get("Second") is Meter
        assert "First" not in runtime_widgets

    def test_reinvocation_keeps_accessors(self):
        @widget_definition
        class Meter(RuntimeWidget):
            value = widget_property()

        accessor = vars(Meter)["value"]
        widget_definition(Meter)
        assert vars(Meter)["value"] is accessor


class TestInheritance:

    def test_subclass_overrides_base_binding(self):
        @widget_definition
        class Base(RuntimeWidget):
            value = widget_property()
            changed: WidgetEvent = widget_event()

            @widget_service
            def refresh(self):
                return "base"

        @widget_definition("Derived")
        class Derived(Base):
            value = widget_property("DerivedValue")

            def refresh(self):
                return "derived"

        bindings = get_widget_definition(Derived).bindings
        assert bindings["value"].external_name == "DerivedValue"
        assert set(bindings) == {"value", "changed", "refresh"}

        derived = Derived()
        derived.value = 3
        assert derived.get_property("DerivedValue") == 3
        assert derived.service_invoked("refresh") == "derived"

        assert get_widget_definition(Base).bindings["value"].external_name == "value"

    def test_inheritance_can_be_disabled(self):
        configure_bindings(inherit_bindings=False)

        @widget_definition
        class Base(RuntimeWidget):
            value = widget_property()

        @widget_definition
        class Derived(Base):
            pass

        assert dict(get_widget_definition(Derived).bindings) == {}


class TestLegacyEntryPoints:

    def test_runtime_widget(self):
        with pytest.warns(DeprecationWarning, match="runtime_widget"):
            @runtime_widget
            class Legacy(RuntimeWidget):
                value = widget_property()

        assert get_widget_definition(Legacy).name == "Legacy"
        assert runtime_widgets.get("Legacy") is Legacy

    def test_named_runtime_widget(self):
        with pytest.warns(DeprecationWarning, match="named_runtime_widget"):
            @named_runtime_widget("OldGauge")
            class Legacy(RuntimeWidget):
                value = widget_property()

        assert get_widget_definition(Legacy).name == "OldGauge"
        assert list(get_widget_definition(Legacy).bindings) == ["value"]

    def test_bound_property_and_service(self):
        with pytest.warns(DeprecationWarning):
            class Legacy(RuntimeWidget):
                value = bound_property("Value")

                @bound_service("Reload")
                def reload(self):
                    return "reloaded"

        widget_definition(Legacy)
        legacy = Legacy(properties={"Value": 1})
        assert legacy.value == 1
        assert legacy.service_invoked("Reload") == "reloaded"

    def test_legacy_marker_requires_name(self):
        configure_bindings(legacy_warnings=False)
        with pytest.raises(BindingError):
            bound_property("")

    def test_legacy_warnings_can_be_disabled(self):
        configure_bindings(legacy_warnings=False)
        with warnings.catch_warnings():
            warnings.simplefilter("error")

            @runtime_widget
            class Legacy(RuntimeWidget):
                pass

        assert get_widget_definition(Legacy).name == "Legacy"


def test_non_widget_class_rejected():
    class Plain:
        pass

    with pytest.raises(WidgetDefinitionError):
        widget_definition(Plain)


def test_catalog_export_can_be_disabled():
    configure_bindings(catalog_exports=False)

    @widget_definition
    class Hidden(RuntimeWidget):
        pass

    assert get_widget_definition(Hidden).name == "Hidden"
    assert "Hidden" not in runtime_widgets


def test_definition_logged(caplog):
    with caplog.at_level(logging.INFO, logger="widgetbind"):
        @widget_definition("Thermostat")
        class Thermostat(RuntimeWidget):
            temperature = widget_property()

    assert any("Widget Thermostat defined" in r.getMessage() for r in caplog.records)
