"""
Component Logger Framework

Provides colored logging for ajaxwire components with:
- Unified API for the container, configurators and bootstrap
- Rich terminal output with component-specific colors
- Graceful fallbacks when settings are unavailable
- Explicit logger objects that can be handed to orchestrators and configurators

Usage:
    logger = get_logger("bootstrap")
    logger.key_info("Configuring container")
    logger.info("Processing init parameters")
    logger.debug("Detailed trace")
    logger.success("Container ready")
    logger.warning("Something to note")
    logger.error("Something went wrong")
    logger.timing("Configuration took 12.5 ms")

    # Custom loggers with explicit parameters
    logger = get_logger(name="CONTAINER", color="sky_blue2")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from ajaxwire.utils.config import get_config_value


class ComponentLogger:
    """
    Rich-formatted logger for ajaxwire components with color coding and message hierarchy.

    Message Types:
    - key_info: Important operational information
    - info: Normal operational messages
    - debug: Detailed tracing information
    - warning: Warning messages
    - error: Error messages
    - success: Success messages
    - timing: Timing information
    """

    def __init__(
        self,
        base_logger: logging.Logger,
        component_name: str,
        color: str = "white",
    ):
        """
        Initialize component logger.

        Args:
            base_logger: Underlying Python logger
            component_name: Name of the component (e.g., 'container', 'bootstrap')
            color: Rich color name for this component
        """
        self.base_logger = base_logger
        self.component_name = component_name
        self.color = color

    def _format_message(self, message: str, style: str, emoji: str = "") -> str:
        """Format message with Rich markup and emoji prefix."""
        prefix = f"{emoji}{self.component_name.title()}: "
        if style:
            return f"[{style}]{prefix}{message}[/{style}]"
        return f"{prefix}{message}"

    def key_info(self, message: str) -> None:
        """Important operational information."""
        style = f"bold {self.color}" if self.color != "white" else "bold white"
        self.base_logger.info(self._format_message(message, style))

    def info(self, message: str) -> None:
        """Info message."""
        self.base_logger.info(self._format_message(message, self.color))

    def debug(self, message: str) -> None:
        """Debug message.

        Debug messages are detailed technical info, only emitted when the
        underlying logger is enabled for DEBUG.
        """
        style = f"dim {self.color}" if self.color != "white" else "dim white"
        self.base_logger.debug(self._format_message(message, style, "🔍 "))

    def warning(self, message: str, exc_info: bool = False) -> None:
        """Warning message.

        Args:
            message: Warning message
            exc_info: Whether to include the active exception traceback
        """
        formatted = self._format_message(message, "bold yellow", "⚠️  ")
        self.base_logger.warning(formatted, exc_info=exc_info)

    def error(self, message: str, exc_info: bool = False) -> None:
        """Error message.

        Args:
            message: Error message
            exc_info: Whether to include exception traceback
        """
        formatted = self._format_message(message, "bold red", "❌ ")
        self.base_logger.error(formatted, exc_info=exc_info)

    def success(self, message: str) -> None:
        """Success message."""
        self.base_logger.info(self._format_message(message, "bold green", "✅ "))

    def timing(self, message: str) -> None:
        """Timing information."""
        self.base_logger.info(self._format_message(message, "bold white", "🕒 "))

    # Passthroughs to the base logger
    @property
    def level(self) -> int:
        return self.base_logger.level

    @property
    def name(self) -> str:
        return self.base_logger.name

    def setLevel(self, level: int) -> None:
        self.base_logger.setLevel(level)

    def isEnabledFor(self, level: int) -> bool:
        return self.base_logger.isEnabledFor(level)


def _setup_rich_logging(level: int = logging.INFO) -> None:
    """Configure Rich logging for the root logger (called once)."""
    root_logger = logging.getLogger()

    # Prevent duplicate handler registration
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            return

    root_logger.setLevel(level)

    # Load user-configurable display preferences from settings
    try:
        # Hide locals by default to prevent sensitive data exposure
        rich_tracebacks = get_config_value("logging.rich_tracebacks", True)
        show_traceback_locals = get_config_value("logging.show_traceback_locals", False)
        show_full_paths = get_config_value("logging.show_full_paths", False)

    except Exception:
        # Secure defaults when the settings file cannot be read
        rich_tracebacks = True
        show_traceback_locals = False
        show_full_paths = False

    console = Console(
        stderr=True,
        width=120,  # Prevent line wrapping in standard terminal sizes
    )

    handler = RichHandler(
        console=console,
        rich_tracebacks=rich_tracebacks,
        markup=True,  # Enable [bold], [green], etc. in log messages
        show_path=show_full_paths,
        show_time=True,
        show_level=True,
        tracebacks_show_locals=show_traceback_locals,
    )

    root_logger.addHandler(handler)


def get_logger(
    component_name: str = None,
    level: int = logging.INFO,
    *,
    name: str = None,
    color: str = None,
) -> ComponentLogger:
    """
    Get a component logger.

    Convention API:
        component_name: Component name (e.g., 'bootstrap'); the color is read
            from the settings key logging.logging_colors.{component_name}
        level: Logging level for the root logger on first setup

    Explicit API (for custom loggers or module-level usage):
        name: Direct logger name (keyword-only)
        color: Direct color specification (keyword-only)

    Returns:
        ComponentLogger instance

    Examples:
        logger = get_logger("bootstrap")
        logger.info("Starting")

        logger = get_logger(name="CONTAINER", color="sky_blue2")
    """
    _setup_rich_logging(level)

    # Direct logger creation bypasses convention-based color assignment
    if name is not None:
        base_logger = logging.getLogger(name)
        return ComponentLogger(base_logger, name, color or "white")

    if component_name is None:
        raise ValueError(
            "Component name is required. Usage: get_logger('component_name') or "
            "get_logger(name='custom_name', color='blue')"
        )

    base_logger = logging.getLogger(component_name)

    try:
        color = get_config_value(f"logging.logging_colors.{component_name}") or "white"
    except Exception:
        # Logging continues even with a broken settings file
        color = "white"

    return ComponentLogger(base_logger, component_name, color)
