"""Built-in configurators.

Four configuration sources feed the container, normally in this order:

1. :class:`DefaultBeanConfigurator` - the framework's hardcoded defaults
2. :class:`InitParamConfigurator` - init parameters copied verbatim
3. :class:`DeclarativeFileConfigurator` - YAML resources named by ``config*`` parameters
4. :class:`CustomConfiguratorLoader` - a programmatic configurator named by
   ``customConfigurator``

Each configurator only writes bindings; ordering and failure isolation are
the orchestrator's concern.

Declarative resource format::

    settings:
      debug: true
      activeReverseAjax: "${REVERSE_AJAX:-false}"
    beans:
      ajaxwire.AccessControl: myapp.security:StrictAccessControl

``settings`` values become :class:`Setting` strings, ``beans`` entries are
instantiated and bound as :class:`Instance` objects.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ajaxwire.base.errors import ConfigurationError, PluginError
from ajaxwire.utils.config import load_yaml_file, resolve_env_vars
from ajaxwire.utils.logger import ComponentLogger, get_logger

from .base import Configurator, Instance, Setting
from .capabilities import DEFAULT_IMPLEMENTATIONS, DEFAULT_SETTINGS
from .directives import INIT_CUSTOM_CONFIGURATOR
from .plugins import load_plugin

if TYPE_CHECKING:
    from .container import DefaultContainer

logger = get_logger(name="CONFIGURATORS", color="medium_purple")
_default_logger = logger

ScalarValue = str | bool | int | float | None


class DefaultBeanConfigurator(Configurator):
    """Seeds every well-known capability and default setting."""

    def __init__(self, logger: ComponentLogger | None = None):
        self.logger = logger or _default_logger

    def configure(self, container: DefaultContainer) -> None:
        for name, identifier in DEFAULT_IMPLEMENTATIONS.items():
            container.set_binding(name, Setting(identifier))
        for name, value in DEFAULT_SETTINGS.items():
            container.set_binding(name, Setting(value))
        self.logger.debug(
            f"Seeded {len(DEFAULT_IMPLEMENTATIONS)} default capabilities and "
            f"{len(DEFAULT_SETTINGS)} default settings"
        )


class InitParamConfigurator(Configurator):
    """Copies init parameters into the container as settings.

    No filtering: reserved and unknown names alike are stored verbatim, so a
    parameter named like a capability overrides that capability's default.
    """

    def __init__(self, params: Mapping[str, str], logger: ComponentLogger | None = None):
        self.params = dict(params)
        self.logger = logger or _default_logger

    def configure(self, container: DefaultContainer) -> None:
        for name, value in self.params.items():
            container.set_binding(name, Setting(value))
        if self.params:
            self.logger.debug(f"Copied {len(self.params)} init parameters: {list(self.params)}")

    def __str__(self) -> str:
        return f"InitParamConfigurator({len(self.params)} params)"


class DeclarativeConfig(BaseModel):
    """Schema of a declarative configuration resource."""

    model_config = ConfigDict(extra="forbid")

    settings: dict[str, ScalarValue] = Field(
        default_factory=dict, description="Setting name to raw value"
    )
    beans: dict[str, str] = Field(
        default_factory=dict, description="Capability name to implementation identifier"
    )

    @field_validator("settings", "beans", mode="before")
    @classmethod
    def empty_section_is_empty_mapping(cls, value):
        # "settings:" with no entries parses as null
        return {} if value is None else value


def _as_setting_string(value: ScalarValue) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class DeclarativeFileConfigurator(Configurator):
    """Loads bindings from one YAML resource.

    Every failure (missing resource, unreadable file, bad YAML, schema
    violation, bean that cannot be created) raises :class:`ConfigurationError`.
    A resource the operator named explicitly is never skipped silently.
    """

    def __init__(
        self,
        resource_name: str,
        resource_root: str | Path | None = None,
        logger: ComponentLogger | None = None,
    ):
        """
        Args:
            resource_name: Resource path, relative to resource_root. A leading
                "/" is also relative to the root, as with web-app resources.
            resource_root: Directory resources resolve against; defaults to the
                current working directory.
            logger: Explicit logger; defaults to the module logger.
        """
        self.resource_name = resource_name
        self.resource_root = Path(resource_root) if resource_root is not None else None
        self.logger = logger or _default_logger

    @property
    def resource_path(self) -> Path:
        root = self.resource_root if self.resource_root is not None else Path.cwd()
        return root / self.resource_name.lstrip("/")

    def load(self) -> DeclarativeConfig:
        """Read and validate the resource without touching any container."""
        path = self.resource_path
        if not path.is_file():
            raise ConfigurationError(
                f"Missing config file: '{self.resource_name}' (looked in {path})",
                self.resource_name,
            )

        try:
            raw = load_yaml_file(path)
        except (OSError, yaml.YAMLError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to read config file '{self.resource_name}': {e}", self.resource_name
            ) from e

        try:
            return DeclarativeConfig.model_validate(resolve_env_vars(raw))
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid config file '{self.resource_name}': {e}", self.resource_name
            ) from e

    def configure(self, container: DefaultContainer) -> None:
        config = self.load()

        for name, value in config.settings.items():
            container.set_binding(name, Setting(_as_setting_string(value)))

        for name, identifier in config.beans.items():
            try:
                bean = load_plugin(identifier, object)
            except PluginError as e:
                raise ConfigurationError(
                    f"Config file '{self.resource_name}' declares bean '{name}' that cannot be created: {e}",
                    self.resource_name,
                ) from e
            container.set_binding(name, Instance(bean))

        self.logger.info(
            f"Loaded config from '{self.resource_name}': "
            f"{len(config.settings)} settings, {len(config.beans)} beans"
        )

    def __str__(self) -> str:
        return f"DeclarativeFileConfigurator({self.resource_name})"


class CustomConfiguratorLoader(Configurator):
    """Loads a :class:`Configurator` subclass by import path and applies it.

    Failures propagate as :class:`PluginError` or as whatever the custom
    configurator raised; the init-parameter pass decides whether to isolate them.
    """

    def __init__(self, class_id: str, logger: ComponentLogger | None = None):
        self.class_id = class_id
        self.logger = logger or _default_logger

    def configure(self, container: DefaultContainer) -> None:
        configurator = load_plugin(self.class_id, Configurator, INIT_CUSTOM_CONFIGURATOR)
        configurator.configure(container)
        self.logger.debug(f"Loaded config from: {self.class_id}")

    def __str__(self) -> str:
        return f"CustomConfiguratorLoader({self.class_id})"
