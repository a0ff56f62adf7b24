"""Configuration orchestrator.

Applies configuration sources to a container in a strict order and owns the
failure policy of the init-parameter pass.

Override semantics come entirely from ordering: configurators run one after
another and the last writer of a name wins, whatever kind of source it is.

Failure policy:

- A declarative resource named by a ``config*`` parameter that cannot be
  loaded aborts startup. :class:`ConfigurationError` propagates to the caller.
- A custom configurator named by ``customConfigurator`` that cannot be loaded
  or fails while configuring is logged as a warning and skipped, so the
  framework starts with whatever configuration succeeded.

.. seealso::
   :mod:`ajaxwire.container.bootstrap` : Full startup sequence built on this class
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from ajaxwire.utils.logger import ComponentLogger, get_logger

from .base import Configurator
from .configurators import (
    CustomConfiguratorLoader,
    DeclarativeFileConfigurator,
    DefaultBeanConfigurator,
    InitParamConfigurator,
)
from .container import DefaultContainer
from .directives import (
    LoadFile,
    PassThroughSetting,
    UseCustomConfigurator,
    classify_init_params,
    is_config_directive_name,
)

logger = get_logger(name="CONTAINER", color="sky_blue2")
_default_logger = logger


class ConfigurationOrchestrator:
    """Runs configurators against a container.

    :param logger: Logger used for every message of the pass, and handed to
        the configurators this orchestrator constructs
    :param resource_root: Directory declarative resources resolve against
    """

    def __init__(
        self,
        logger: ComponentLogger | None = None,
        resource_root: str | Path | None = None,
    ):
        self.logger = logger or _default_logger
        self.resource_root = Path(resource_root) if resource_root is not None else None

    def setup_defaults(self, container: DefaultContainer) -> None:
        """Seed the framework's built-in bindings."""
        DefaultBeanConfigurator(logger=self.logger).configure(container)

    def setup_from_init_params(self, container: DefaultContainer, params: Mapping[str, str]) -> None:
        """Copy every init parameter into the container verbatim."""
        InitParamConfigurator(params, logger=self.logger).configure(container)

    def configure(self, container: DefaultContainer, configurators: Iterable[Configurator]) -> None:
        """Allow all the configurators to have a go at the container in turn.

        Failures are not isolated here; a configurator that raises stops the pass.
        """
        for configurator in configurators:
            self.logger.debug(f"** Adding config from {configurator}")
            configurator.configure(container)

    def configure_using_init_params(self, container: DefaultContainer, params: Mapping[str, str]) -> bool:
        """Apply the declarative resources and custom configurator named by init parameters.

        :param container: The container to configure
        :param params: Init parameters, in declaration order
        :return: True if any ``config*`` or ``customConfigurator`` parameter was present
        :raises ConfigurationError: If a named declarative resource cannot be loaded
        """
        found_config = any(is_config_directive_name(name) for name in params)

        for directive in classify_init_params(params):
            match directive:
                case LoadFile(resource=resource):
                    configurator = DeclarativeFileConfigurator(
                        resource, resource_root=self.resource_root, logger=self.logger
                    )
                    self.logger.debug(f"** Adding config from {configurator}")
                    configurator.configure(container)

                case UseCustomConfigurator(class_id=class_id):
                    self._run_custom_configurator(container, class_id)

                case PassThroughSetting():
                    # Already copied by setup_from_init_params
                    pass

        return found_config

    def _run_custom_configurator(self, container: DefaultContainer, class_id: str) -> None:
        try:
            CustomConfiguratorLoader(class_id, logger=self.logger).configure(container)
        except Exception as e:
            self.logger.warning(f"Failed to start custom configurator '{class_id}': {e}", exc_info=True)
