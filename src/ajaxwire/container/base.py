"""Container Binding Values and Configurator Interface.

This module defines the shared vocabulary of the container system: the tagged
binding values stored under each name, and the abstract interface every
configuration source implements.

A binding is always one of two kinds:

1. **Setting**: a raw configuration string, such as ``debug = "false"`` or a
   default implementation identifier that the runtime resolves later.
2. **Instance**: a resolved capability implementation object, created by a
   declarative file or a programmatic configurator.

Keeping the two kinds distinct lets the debug dump and the runtime tell raw
parameters from live beans without inspecting payload types.

.. note::
   Binding values are immutable. Replacing a value means registering a new
   binding under the same name, which the container treats as last write wins.

Examples:
    Writing a configurator::

        >>> from ajaxwire.container import Configurator, Setting
        >>>
        >>> class CompressionOn(Configurator):
        ...     def configure(self, container):
        ...         container.set_binding("scriptCompressed", Setting("true"))

.. seealso::
   :class:`ajaxwire.container.container.DefaultContainer` : Stores the bindings
   :mod:`ajaxwire.container.configurators` : Built-in configurators
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .container import DefaultContainer


@dataclass(frozen=True)
class Setting:
    """A raw configuration string binding.

    :param value: The configuration text exactly as supplied
    :type value: str
    """

    value: str

    @property
    def payload(self) -> str:
        return self.value


@dataclass(frozen=True)
class Instance:
    """A resolved capability implementation binding.

    :param obj: The implementation object
    :type obj: Any
    """

    obj: Any

    @property
    def payload(self) -> Any:
        return self.obj


BindingValue = Setting | Instance


def as_binding(value: Any) -> BindingValue:
    """Wrap a plain value in its binding tag.

    Strings become :class:`Setting`, existing binding values pass through
    unchanged and everything else becomes an :class:`Instance`.
    """
    if isinstance(value, (Setting, Instance)):
        return value
    if isinstance(value, str):
        return Setting(value)
    return Instance(value)


class Configurator(ABC):
    """A unit of configuration logic that mutates a container when applied.

    Configurators are applied in list order; a later configurator overrides
    any binding written by an earlier one. Custom configurators named by the
    ``customConfigurator`` init parameter must subclass this class and be
    constructible without arguments.
    """

    @abstractmethod
    def configure(self, container: DefaultContainer) -> None:
        """Apply this configuration source to the container.

        :param container: The container to write bindings into
        :type container: DefaultContainer
        """

    def __str__(self) -> str:
        return type(self).__name__
