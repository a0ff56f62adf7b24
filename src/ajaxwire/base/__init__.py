"""Base definitions shared across ajaxwire."""

from .errors import (
    ConfigurationError,
    FrameworkError,
    PluginError,
    PluginNotFoundError,
    PluginTypeError,
)

__all__ = [
    "FrameworkError",
    "ConfigurationError",
    "PluginError",
    "PluginNotFoundError",
    "PluginTypeError",
]
