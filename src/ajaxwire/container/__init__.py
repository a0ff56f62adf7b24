"""Container System for ajaxwire.

This package assembles the process-wide container of named capability
bindings before the remoting runtime starts serving requests.

Key Components:
    - **DefaultContainer**: Ordered, string-keyed, last-write-wins binding table
    - **Setting / Instance**: Tagged binding values
    - **Configurator**: Interface of every configuration source
    - **ConfigurationOrchestrator**: Applies configurators in order and isolates
      custom configurator failures
    - **bootstrap_container**: The full startup sequence for a hosted component

Configuration Order:
    1. Built-in defaults
    2. Init parameters, copied verbatim
    3. Caller-supplied configurators
    4. Declarative resources named by ``config*`` init parameters
    5. The custom configurator named by ``customConfigurator``

Later sources override earlier ones for the same name.

Examples:
    Bootstrapping a hosted component::

        >>> from ajaxwire.container import bootstrap_container
        >>> from ajaxwire.hosting import HostConfig
        >>>
        >>> container = bootstrap_container(HostConfig("remoting", {"debug": "true"}))
        >>> container.get_bean("debug")
        'true'

.. seealso::
   :mod:`ajaxwire.container.orchestrator` : Ordering and failure policy
   :mod:`ajaxwire.container.configurators` : Declarative resource format
"""

from .base import BindingValue, Configurator, Instance, Setting, as_binding
from .bootstrap import bootstrap_container
from .configurators import (
    CustomConfiguratorLoader,
    DeclarativeFileConfigurator,
    DefaultBeanConfigurator,
    InitParamConfigurator,
)
from .container import DefaultContainer
from .directives import (
    INIT_CONFIG,
    INIT_CUSTOM_CONFIGURATOR,
    INIT_LOGLEVEL,
    INIT_PUBLISH_CONTAINER,
    INIT_SKIP_DEFAULT,
    LoadFile,
    PassThroughSetting,
    UseCustomConfigurator,
    classify_init_params,
)
from .introspection import (
    ContainerDump,
    debug_config,
    describe_container,
    log_startup,
    prepare_for_web_context_filter,
    publish_container,
)
from .orchestrator import ConfigurationOrchestrator
from .plugins import load_plugin

__all__ = [
    # Container and values
    "DefaultContainer",
    "Setting",
    "Instance",
    "BindingValue",
    "as_binding",
    # Configurators
    "Configurator",
    "DefaultBeanConfigurator",
    "InitParamConfigurator",
    "DeclarativeFileConfigurator",
    "CustomConfiguratorLoader",
    "ConfigurationOrchestrator",
    # Init parameters
    "INIT_CONFIG",
    "INIT_SKIP_DEFAULT",
    "INIT_LOGLEVEL",
    "INIT_PUBLISH_CONTAINER",
    "INIT_CUSTOM_CONFIGURATOR",
    "LoadFile",
    "UseCustomConfigurator",
    "PassThroughSetting",
    "classify_init_params",
    # Publishing and introspection
    "ContainerDump",
    "describe_container",
    "debug_config",
    "publish_container",
    "prepare_for_web_context_filter",
    "log_startup",
    # Bootstrap and plugins
    "bootstrap_container",
    "load_plugin",
]
