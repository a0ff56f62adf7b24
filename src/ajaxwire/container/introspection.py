"""Publishing and introspection of a configured container.

Once configuration finishes, the container can be exposed on the host context
so components without access to the bootstrap code can find it, and dumped
for diagnostics. Nothing here writes to the container.
"""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass, field
from typing import Any

from ajaxwire import __version__
from ajaxwire.hosting import HostConfig
from ajaxwire.utils.logger import ComponentLogger, get_logger

from .base import Instance, Setting
from .capabilities import (
    CONTAINER,
    CREATOR_MANAGER,
    DEBUG_CAPABILITIES,
    HOST_CONFIG,
    HOSTING_SERVLET,
    WEB_CONTEXT_BUILDER,
)
from .container import DefaultContainer
from .directives import INIT_PUBLISH_CONTAINER

logger = get_logger(name="CONTAINER", color="sky_blue2")
_default_logger = logger


def _type_name(obj: Any) -> str:
    cls = type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass(frozen=True)
class BindingReport:
    """One container binding. ``kind`` is "param" for settings, "bean" for instances."""

    kind: str
    name: str
    value: str
    type_name: str


@dataclass(frozen=True)
class CreatorReport:
    name: str
    type_name: str


@dataclass(frozen=True)
class CapabilityReport:
    """The implementation bound to a well-known capability; type_name is None when unbound."""

    name: str
    type_name: str | None
    creators: list[CreatorReport] = field(default_factory=list)


@dataclass(frozen=True)
class ContainerDump:
    container_type: str
    bindings: list[BindingReport]
    capabilities: list[CapabilityReport]

    def lines(self) -> list[str]:
        """Render the dump in fixed order, one log line per entry."""
        out = ["Container", f"  Type: {self.container_type}"]
        for binding in self.bindings:
            label = "Param" if binding.kind == "param" else "Bean"
            out.append(f"  {label}: {binding.name} = {binding.value} ({binding.type_name})")
        for capability in self.capabilities:
            out.append(capability.name)
            out.append(f"  Type: {capability.type_name or 'not bound'}")
            for creator in capability.creators:
                out.append(f"  Creator: {creator.name} ({creator.type_name})")
        return out


def _describe_creators(creator_manager: Any) -> list[CreatorReport]:
    get_names = getattr(creator_manager, "get_creator_names", None)
    get_creator = getattr(creator_manager, "get_creator", None)
    if not callable(get_names) or not callable(get_creator):
        return []
    reports = []
    for creator_name in get_names():
        reports.append(CreatorReport(creator_name, _type_name(get_creator(creator_name))))
    return reports


def describe_container(container: DefaultContainer) -> ContainerDump:
    """Build a structured, read-only dump of the container.

    Reports every binding in enumeration order, then each debug capability's
    bound implementation type. For the creator manager, every registered
    creator is listed when the bound instance exposes ``get_creator_names``
    and ``get_creator``.
    """
    bindings = []
    for name, binding in container.items():
        match binding:
            case Setting(value=value):
                bindings.append(BindingReport("param", name, value, _type_name(value)))
            case Instance(obj=obj):
                bindings.append(BindingReport("bean", name, repr(obj), _type_name(obj)))

    capabilities = []
    for capability in DEBUG_CAPABILITIES:
        bound = container.get_bean(capability)
        if bound is None:
            capabilities.append(CapabilityReport(capability, None))
            continue
        creators = _describe_creators(bound) if capability == CREATOR_MANAGER else []
        capabilities.append(CapabilityReport(capability, _type_name(bound), creators))

    return ContainerDump(_type_name(container), bindings, capabilities)


def debug_config(container: DefaultContainer, logger: ComponentLogger | None = None) -> ContainerDump | None:
    """Log a debug dump of the container when DEBUG logging is enabled.

    :return: The dump that was logged, or None when DEBUG is disabled
    """
    logger = logger or _default_logger
    if not logger.isEnabledFor(logging.DEBUG):
        return None

    dump = describe_container(container)
    for line in dump.lines():
        logger.debug(line)
    return dump


def publish_container(
    container: DefaultContainer,
    host_config: HostConfig,
    logger: ComponentLogger | None = None,
) -> str | None:
    """Expose the container on the host context under the name given by ``publishContainerAs``.

    :return: The attribute name used, or None when publishing is not requested
    """
    logger = logger or _default_logger
    publish_name = host_config.get_init_parameter(INIT_PUBLISH_CONTAINER)
    if publish_name is None or not publish_name.strip():
        return None

    publish_name = publish_name.strip()
    host_config.context.set_attribute(publish_name, container)
    logger.debug(f"Published container as '{publish_name}'")
    return publish_name


def prepare_for_web_context_filter(
    host_config: HostConfig,
    container: DefaultContainer,
    web_context_builder: Any,
    servlet: Any,
) -> None:
    """Publish the bootstrap objects under their well-known host context keys."""
    context = host_config.context
    context.set_attribute(CONTAINER, container)
    context.set_attribute(WEB_CONTEXT_BUILDER, web_context_builder)
    context.set_attribute(HOST_CONFIG, host_config)
    context.set_attribute(HOSTING_SERVLET, servlet)


def log_startup(host_config: HostConfig, logger: ComponentLogger | None = None) -> None:
    """Some logging so we have a good clue what we are working with."""
    logger = logger or _default_logger
    logger.key_info(f"ajaxwire version {__version__} starting.")
    logger.info(f"- Host:           {host_config.context.server_info} ({host_config.name})")
    logger.info(f"- Python Version: {platform.python_version()}")
    logger.info(f"- Implementation: {platform.python_implementation()}")

