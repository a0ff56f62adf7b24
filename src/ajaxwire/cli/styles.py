"""Color and style management for the ajaxwire CLI.

Semantic style names (success, error, header) map onto one Rich theme so
every command renders with the same look.
"""

from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme


@dataclass
class ColorTheme:
    """Colors used by the CLI. Error stays fixed; the rest define the look."""

    error: str = "#ff0000"

    primary: str = "#5f87af"
    success: str = "#87af87"
    accent: str = "#87d7ff"

    text_dim: str = "#666666"
    border_default: str = "#555555"


def _build_rich_theme(theme: ColorTheme) -> Theme:
    return Theme(
        {
            "success": f"bold {theme.success}",
            "error": f"bold {theme.error}",
            "dim": theme.text_dim,
            "header": f"bold {theme.primary}",
            "value": theme.success,
            "accent": theme.accent,
            "border": theme.border_default,
        }
    )


AJAXWIRE_THEME = ColorTheme()

console = Console(theme=_build_rich_theme(AJAXWIRE_THEME))


class Styles:
    """Style names defined in the Rich theme, for use in markup and tables."""

    SUCCESS = "success"
    ERROR = "error"

    DIM = "dim"
    HEADER = "header"
    VALUE = "value"
    ACCENT = "accent"
    BORDER = "border"


class Messages:
    """Pre-formatted message helpers."""

    @staticmethod
    def success(text: str) -> str:
        return f"[success]✓ {text}[/success]"

    @staticmethod
    def error(text: str) -> str:
        return f"[error]✗ {text}[/error]"
