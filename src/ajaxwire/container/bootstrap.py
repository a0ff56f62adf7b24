"""Container bootstrap.

One-shot startup sequence that builds the container for a hosted component:

1. Log startup diagnostics and apply the ``logLevel`` hint
2. Seed built-in defaults, then copy init parameters over them
3. Apply caller-supplied configurators
4. Publish the bootstrap objects on the host context
5. Apply declarative resources and the custom configurator named by init
   parameters; fall back to the default resource when none were named
6. Publish the container under ``publishContainerAs``, mark setup finished
   and dump the result when DEBUG logging is on

The whole pass is synchronous and single-threaded. Request workers may read
the container once :func:`bootstrap_container` returns.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import Any

from ajaxwire.hosting import HostConfig
from ajaxwire.utils.config import get_config_value
from ajaxwire.utils.logger import ComponentLogger, get_logger

from .base import Configurator
from .capabilities import WEB_CONTEXT_BUILDER
from .configurators import DeclarativeFileConfigurator
from .container import DefaultContainer
from .directives import INIT_LOGLEVEL, INIT_SKIP_DEFAULT, parse_bool
from .introspection import debug_config, log_startup, prepare_for_web_context_filter, publish_container
from .orchestrator import ConfigurationOrchestrator

logger = get_logger(name="BOOTSTRAP", color="green")
_default_logger = logger

DEFAULT_CONFIG_RESOURCE = "ajaxwire.yml"


def apply_log_level(level_name: str | None, logger: ComponentLogger) -> bool:
    """Apply a ``logLevel`` init parameter such as "debug" or "WARNING".

    :return: True if the name was a known logging level and was applied
    """
    if not level_name:
        return False
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        logger.warning(f"Ignoring unknown {INIT_LOGLEVEL} '{level_name}'")
        return False
    logger.setLevel(level)
    return True


def configure_from_default_resource(
    container: DefaultContainer,
    orchestrator: ConfigurationOrchestrator,
    resource_name: str | None = None,
) -> bool:
    """Load the default declarative resource if it exists.

    A missing default resource is not an error; the container keeps the
    defaults and init parameters only.

    :return: True if the default resource was found and applied
    """
    resource_name = resource_name or get_config_value(
        "container.default_config_resource", DEFAULT_CONFIG_RESOURCE
    )
    configurator = DeclarativeFileConfigurator(
        resource_name, resource_root=orchestrator.resource_root, logger=orchestrator.logger
    )
    if not configurator.resource_path.is_file():
        orchestrator.logger.info(
            f"No config named and no default '{resource_name}' found, using built-in defaults only"
        )
        return False

    orchestrator.configure(container, [configurator])
    return True


def bootstrap_container(
    host_config: HostConfig,
    servlet: Any = None,
    configurators: Iterable[Configurator] | None = None,
    logger: ComponentLogger | None = None,
) -> DefaultContainer:
    """Build and publish the container for a hosted component.

    :param host_config: Init parameters and host context of the hosted component
    :param servlet: The hosting object, published on the host context for filters
    :param configurators: Extra configurators applied after init parameters
    :param logger: Explicit logger for the whole pass
    :return: The configured container, marked setup finished
    :raises ConfigurationError: If a named declarative resource cannot be loaded
    """
    logger = logger or _default_logger
    start_time = time.perf_counter()

    log_startup(host_config, logger)
    apply_log_level(host_config.get_init_parameter(INIT_LOGLEVEL), logger)

    params = host_config.init_params
    resource_root = host_config.context.resource_root or get_config_value("container.resource_root")
    orchestrator = ConfigurationOrchestrator(logger=logger, resource_root=resource_root)

    container = DefaultContainer()
    orchestrator.setup_defaults(container)
    orchestrator.setup_from_init_params(container, params)
    orchestrator.configure(container, list(configurators or []))

    prepare_for_web_context_filter(host_config, container, container.get_bean(WEB_CONTEXT_BUILDER), servlet)

    found_config = orchestrator.configure_using_init_params(container, params)
    if not found_config:
        if parse_bool(host_config.get_init_parameter(INIT_SKIP_DEFAULT)):
            logger.info(f"No config named and {INIT_SKIP_DEFAULT} set, using built-in defaults only")
        else:
            configure_from_default_resource(container, orchestrator)

    publish_container(container, host_config, logger)
    container.setup_finished()

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.timing(f"Container configured with {len(container)} bindings in {elapsed_ms:.1f} ms")

    debug_config(container, logger)
    return container

