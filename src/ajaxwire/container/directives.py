"""Init-parameter names and their classification into directives.

The hosting environment hands over a flat mapping of init parameters. Two
kinds of names drive configuration behaviour:

- names starting with ``config`` list declarative resources to load;
- the name ``customConfigurator`` names a programmatic configurator class.

Every other name is an opaque setting. Classification happens once, up front,
so the dispatch code can pattern-match on directive types instead of repeating
string comparisons.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

# Init parameter: declarative config resources. A prefix, so several
# parameters (config, config-admin, config2, ...) may each list resources.
INIT_CONFIG = "config"

# Init parameter: skip the default config resource when none are named.
INIT_SKIP_DEFAULT = "skipDefaultConfig"

# Init parameter: startup log verbosity.
INIT_LOGLEVEL = "logLevel"

# Init parameter: host context attribute name to publish the container under.
INIT_PUBLISH_CONTAINER = "publishContainerAs"

# Init parameter: import path of a custom Configurator class.
INIT_CUSTOM_CONFIGURATOR = "customConfigurator"

_RESOURCE_SEPARATORS = re.compile(r"[,\n]")


@dataclass(frozen=True)
class LoadFile:
    """Load one declarative resource."""

    resource: str
    param_name: str


@dataclass(frozen=True)
class UseCustomConfigurator:
    """Instantiate and apply a custom configurator class."""

    class_id: str


@dataclass(frozen=True)
class PassThroughSetting:
    """An init parameter with no configuration behaviour of its own."""

    name: str
    value: str


Directive = LoadFile | UseCustomConfigurator | PassThroughSetting


def split_resource_list(value: str) -> list[str]:
    """Split a comma/newline separated resource list, dropping blank entries."""
    tokens = (token.strip() for token in _RESOURCE_SEPARATORS.split(value or ""))
    return [token for token in tokens if token]


def classify_init_params(params: Mapping[str, str]) -> list[Directive]:
    """Classify init parameters into directives, in encounter order.

    A ``config*`` parameter expands to one :class:`LoadFile` per listed
    resource, keeping the listed order.
    """
    directives: list[Directive] = []
    for name, value in params.items():
        if name.startswith(INIT_CONFIG):
            directives.extend(LoadFile(resource, name) for resource in split_resource_list(value))
        elif name == INIT_CUSTOM_CONFIGURATOR:
            directives.append(UseCustomConfigurator(value.strip()))
        else:
            directives.append(PassThroughSetting(name, value))
    return directives


def is_config_directive_name(name: str) -> bool:
    """True for names that count as explicit configuration."""
    return name.startswith(INIT_CONFIG) or name == INIT_CUSTOM_CONFIGURATOR


def parse_bool(value: str | None) -> bool:
    """Interpret a setting string as a boolean; only "true" (any case) is true."""
    return value is not None and value.strip().lower() == "true"
