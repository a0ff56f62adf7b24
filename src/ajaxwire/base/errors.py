"""Framework exception hierarchy.

All exceptions raised deliberately by ajaxwire derive from :class:`FrameworkError`,
so hosting code can separate framework failures from arbitrary runtime faults.

The hierarchy mirrors the two failure policies of the configuration pass:

    - **ConfigurationError**: an explicitly named configuration source could not
      be loaded or parsed. Always fatal to startup.
    - **PluginError** (and subclasses): a string-identified implementation could
      not be resolved or constructed. Fatal when raised from a declarative file,
      isolated and logged when raised by a custom configurator.

.. seealso::
   :mod:`ajaxwire.container.plugins` : Raises the plugin errors
   :mod:`ajaxwire.container.orchestrator` : Applies the isolation policy
"""


class FrameworkError(Exception):
    """Base exception for all framework-related errors.

    This is the root exception class for all custom exceptions within
    ajaxwire. It provides a common base for framework-specific error
    handling and categorization.
    """

    pass


class ConfigurationError(FrameworkError):
    """Exception for configuration-source failures.

    Raised when a declarative configuration resource is missing, unreadable,
    malformed, or declares beans that cannot be created. These failures abort
    startup so the operator sees the misconfiguration immediately.
    """

    def __init__(self, message: str, resource: str | None = None):
        super().__init__(message)
        self.resource = resource


class PluginError(FrameworkError):
    """Exception for failures while creating a string-identified implementation."""

    def __init__(self, message: str, identifier: str, param_name: str | None = None):
        super().__init__(message)
        self.identifier = identifier
        self.param_name = param_name


class PluginNotFoundError(PluginError):
    """The identifier does not name an importable module attribute."""

    pass


class PluginTypeError(PluginError):
    """The identifier names something that is not a class of the expected capability."""

    pass
