"""
Application configuration for widgetbind.
"""

from .configurator import BindingOptions, configure_bindings, get_binding_options, reset_binding_options

__all__ = [
    'BindingOptions',
    'configure_bindings',
    'get_binding_options',
    'reset_binding_options',
]
