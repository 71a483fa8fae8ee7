"""
Binding Configurator

Process-wide options that control how widget classes are materialized.
Call ``configure_bindings`` before the widget modules are imported.
"""

import logging

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class BindingOptions(BaseModel):
    """Options applied when widget classes are finalized."""
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    catalog_exports: bool = True   # publish finalized widgets to the runtime catalog
    legacy_warnings: bool = True   # warn when deprecated entry points are used
    inherit_bindings: bool = True  # merge bindings declared on base classes


_options = BindingOptions()


def configure_bindings(**options) -> BindingOptions:
    """
    Validate and install binding options.

    Example:
        ```python
        from widgetbind import configure_bindings

        configure_bindings(catalog_exports=False)
        ```

    Raises:
        pydantic.ValidationError: If an option is unknown or has the wrong type
    """
    global _options
    _options = BindingOptions(**{**_options.model_dump(), **options})
    logger.info(f"Binding options configured: {_options.model_dump()}")
    return _options


def get_binding_options() -> BindingOptions:
    return _options


def reset_binding_options() -> BindingOptions:
    """Restore default options. Useful for testing."""
    global _options
    _options = BindingOptions()
    return _options
