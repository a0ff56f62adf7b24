"""The process-wide container of named bindings.

The container is a flat, string-keyed table: one live value per name, last
write wins, names enumerated in first-insertion order. It is built once by the
bootstrap pass and read by request-handling workers afterwards.
"""

from __future__ import annotations

from collections.abc import ItemsView, KeysView
from typing import Any

from ajaxwire.utils.logger import get_logger

from .base import BindingValue, Instance, Setting, as_binding

logger = get_logger(name="CONTAINER", color="sky_blue2")


class DefaultContainer:
    """Ordered table of :class:`Setting` and :class:`Instance` bindings.

    No dependency graph is resolved here; values are stored exactly as
    configurators supply them.

    Writes are expected only during the single-threaded configuration pass.
    After :meth:`setup_finished` the container is read-only by convention:
    late writes still succeed but are logged as warnings, because readers on
    other threads may already be consulting it.
    """

    def __init__(self):
        self._bindings: dict[str, BindingValue] = {}
        self._setup_finished = False

    def set_binding(self, name: str, value: Any) -> None:
        """Bind ``value`` under ``name``, replacing any previous binding.

        :param name: Capability name or setting name
        :param value: A :class:`Setting`, an :class:`Instance`, or a plain value
            wrapped with :func:`as_binding`
        """
        if self._setup_finished:
            logger.warning(f"Binding '{name}' changed after container setup finished")
        self._bindings[name] = as_binding(value)

    def add_parameter(self, name: str, value: str) -> None:
        """Bind a raw configuration string."""
        self.set_binding(name, Setting(value))

    def add_bean(self, name: str, obj: Any) -> None:
        """Bind a resolved implementation object."""
        self.set_binding(name, Instance(obj))

    def get_binding(self, name: str) -> BindingValue | None:
        """Look up the binding for ``name``.

        :return: The bound value, or None when nothing is bound under that name
        """
        return self._bindings.get(name)

    def get_bean(self, name: str) -> Any | None:
        """Look up the unwrapped payload for ``name``.

        :return: The setting string or instance object, or None when unbound
        """
        binding = self._bindings.get(name)
        if binding is None:
            return None
        return binding.payload

    def all_names(self) -> KeysView[str]:
        """Live, insertion-ordered view of every bound name."""
        return self._bindings.keys()

    def items(self) -> ItemsView[str, BindingValue]:
        return self._bindings.items()

    def setup_finished(self) -> None:
        """Mark the end of the configuration pass."""
        self._setup_finished = True
        logger.debug(f"Container setup finished with {len(self._bindings)} bindings")

    @property
    def is_setup_finished(self) -> bool:
        return self._setup_finished

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} bindings={len(self._bindings)}>"
