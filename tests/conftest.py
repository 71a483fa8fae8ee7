import pytest

from widgetbind import reset_binding_options, runtime_widgets, widget_registry


@pytest.fixture(autouse=True)
def clean_bindings():
    """Start every test with default options, an empty registry and an empty catalog."""
    reset_binding_options()
    widget_registry.clear()
    runtime_widgets.clear()
    yield
    reset_binding_options()
    widget_registry.clear()
    runtime_widgets.clear()
