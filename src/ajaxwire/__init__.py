"""ajaxwire container bootstrap.

Startup-time assembly of the process-wide container of named capability
bindings consulted by the remoting runtime.

This package contains:
- The container and its tagged binding values
- Configurators and the configuration orchestrator
- Publishing and introspection of the finished container
- Settings and logging infrastructure
"""

# Version information
__version__ = "0.3.2"

__all__ = ["__version__"]

# Import submodules directly: from ajaxwire.container import DefaultContainer
