"""Hosting environment abstractions.

The container bootstrap runs inside some hosting process (a WSGI/ASGI app,
a worker, a test). The host supplies two things:

- :class:`HostConfig`: the init parameters for this deployment, read once;
- :class:`HostContext`: a shared attribute store other components can reach
  without a reference to the bootstrap code, plus the directory declarative
  resources resolve against.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any


class HostContext:
    """Application-wide attribute store shared by hosted components."""

    def __init__(self, server_info: str = "ajaxwire", resource_root: str | Path | None = None):
        self.server_info = server_info
        self.resource_root = Path(resource_root) if resource_root is not None else None
        self._attributes: dict[str, Any] = {}

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def get_attribute(self, name: str) -> Any | None:
        return self._attributes.get(name)

    def remove_attribute(self, name: str) -> None:
        self._attributes.pop(name, None)

    def attribute_names(self) -> Iterator[str]:
        return iter(list(self._attributes))


class HostConfig:
    """Read-only snapshot of the init parameters for one hosted component.

    :param name: Name of the hosted component, used in log messages
    :param init_params: Init parameter name to string value, in declaration order
    :param context: Shared host context; a fresh one is created when omitted
    """

    def __init__(
        self,
        name: str,
        init_params: Mapping[str, str] | None = None,
        context: HostContext | None = None,
    ):
        self.name = name
        self._init_params = dict(init_params or {})
        self.context = context if context is not None else HostContext()

    def get_init_parameter(self, name: str) -> str | None:
        return self._init_params.get(name)

    def init_parameter_names(self) -> Iterator[str]:
        return iter(self._init_params)

    @property
    def init_params(self) -> Mapping[str, str]:
        return MappingProxyType(self._init_params)

    def __repr__(self) -> str:
        return f"HostConfig(name={self.name!r}, params={list(self._init_params)})"
