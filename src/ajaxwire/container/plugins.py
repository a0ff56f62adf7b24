"""String-identified plugin loading.

Turns an identifier such as ``"myapp.config:StrictSetup"`` (or the dotted form
``"myapp.config.StrictSetup"``) into an instance of a known capability type.

Failure modes are declared rather than left to arbitrary runtime faults:

- :class:`PluginNotFoundError` when the module or class does not exist;
- :class:`PluginTypeError` when the identifier names something other than a
  subclass of the expected type;
- :class:`PluginError` when the module raises while importing, or the class
  exists but its constructor raises.
"""

from __future__ import annotations

import importlib
import inspect
from typing import TypeVar

from ajaxwire.base.errors import PluginError, PluginNotFoundError, PluginTypeError

T = TypeVar("T")


def _split_identifier(identifier: str) -> tuple[str, str]:
    if ":" in identifier:
        module_path, _, attr_name = identifier.partition(":")
    else:
        module_path, _, attr_name = identifier.rpartition(".")
    return module_path.strip(), attr_name.strip()


def resolve_class(identifier: str, param_name: str | None = None) -> type:
    """Import the class named by ``identifier``.

    :param identifier: ``module:Class`` or ``module.Class``
    :param param_name: Init parameter that supplied the identifier, for messages
    :raises PluginNotFoundError: If the module cannot be imported or lacks the attribute
    :raises PluginTypeError: If the attribute is not a class
    :raises PluginError: If importing the module raises anything else
    """
    module_path, attr_name = _split_identifier(identifier)
    if not module_path or not attr_name:
        raise PluginNotFoundError(
            f"Invalid implementation identifier '{identifier}': expected 'module:Class' or 'module.Class'",
            identifier,
            param_name,
        )

    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise PluginNotFoundError(
            f"Cannot import module '{module_path}' for '{identifier}': {e}",
            identifier,
            param_name,
        ) from e
    except Exception as e:
        raise PluginError(
            f"Module '{module_path}' failed while importing for '{identifier}': {e}",
            identifier,
            param_name,
        ) from e

    try:
        obj = getattr(module, attr_name)
    except AttributeError as e:
        raise PluginNotFoundError(
            f"Module '{module_path}' has no attribute '{attr_name}'",
            identifier,
            param_name,
        ) from e

    if not inspect.isclass(obj):
        raise PluginTypeError(f"'{identifier}' is not a class", identifier, param_name)
    return obj


def load_plugin(identifier: str, expected_type: type[T], param_name: str | None = None) -> T:
    """Resolve ``identifier`` and construct it with no arguments.

    :param identifier: ``module:Class`` or ``module.Class``
    :param expected_type: Capability type the class must subclass
    :param param_name: Init parameter that supplied the identifier, for messages
    :return: A new instance of the named class
    :raises PluginNotFoundError: If the class cannot be found
    :raises PluginTypeError: If the class is not a subclass of ``expected_type``
    :raises PluginError: If importing the module or construction fails
    """
    cls = resolve_class(identifier, param_name)

    if not issubclass(cls, expected_type):
        raise PluginTypeError(
            f"'{identifier}' is not a {expected_type.__name__} implementation",
            identifier,
            param_name,
        )

    try:
        return cls()
    except Exception as e:
        raise PluginError(f"Failed to instantiate '{identifier}': {e}", identifier, param_name) from e
