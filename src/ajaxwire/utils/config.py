"""
Settings System

Framework-level settings for ajaxwire, read from a single YAML file:
- Single-file YAML loading with environment resolution
- Dot-notation access to nested values
- Optional file: the framework starts with built-in defaults when no settings exist
- Shared YAML helpers reused by the declarative-file configurator

The settings file is located through the AJAXWIRE_CONFIG environment variable,
falling back to ajaxwire-settings.yml in the current working directory.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

# Use standard logging (not get_logger) to avoid circular imports with logger.py
# The short name 'CONFIG' enables easy filtering of settings messages
logger = logging.getLogger("CONFIG")

CONFIG_ENV_VAR = "AJAXWIRE_CONFIG"
DEFAULT_SETTINGS_FILE = "ajaxwire-settings.yml"

# Pattern matches ${VAR_NAME:-default}, ${VAR_NAME}, or $VAR_NAME
_ENV_PATTERN = re.compile(r"\$\{([^}:]+)(?::-(.*?))?\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """Load and validate a YAML mapping file.

    Args:
        file_path: Path of the YAML file to read

    Returns:
        The parsed mapping, or an empty dict for an empty file

    Raises:
        OSError: If the file cannot be read
        yaml.YAMLError: If the file is not valid YAML
        ValueError: If the document is not a mapping
    """
    try:
        with open(file_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        error_msg = f"Error parsing YAML file {file_path}: {e}"
        logger.error(error_msg)
        raise yaml.YAMLError(error_msg) from e

    if data is None:
        logger.warning(f"YAML file is empty: {file_path}")
        return {}

    if not isinstance(data, dict):
        error_msg = f"YAML file must contain a dictionary/mapping: {file_path}"
        logger.error(error_msg)
        raise ValueError(error_msg)

    logger.debug(f"Loaded YAML from {file_path}")
    return data


def resolve_env_vars(data: Any) -> Any:
    """Recursively resolve environment variables in loaded YAML data.

    Supports both simple and bash-style default value syntax:
    - ${VAR_NAME} - simple substitution
    - ${VAR_NAME:-default_value} - with default value
    - $VAR_NAME - simple substitution without braces

    Unknown variables without a default keep their original text.
    """
    if isinstance(data, dict):
        return {key: resolve_env_vars(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [resolve_env_vars(item) for item in data]
    elif isinstance(data, str):

        def replace_env_var(match):
            if match.group(1):  # ${VAR_NAME:-default} or ${VAR_NAME}
                var_name = match.group(1)
                default_value = match.group(2)
            else:  # $VAR_NAME (simple form)
                var_name = match.group(3)
                default_value = None

            env_value = os.environ.get(var_name)
            if env_value is None:
                if default_value is not None:
                    return default_value
                logger.info(f"Environment variable '{var_name}' not found, keeping original value")
                return match.group(0)
            return env_value

        return _ENV_PATTERN.sub(replace_env_var, data)
    else:
        return data


class ConfigBuilder:
    """
    Settings builder for ajaxwire.

    Features:
    - Single-file YAML loading with validation and error handling
    - Environment variable resolution
    - Empty settings when no file is given (defaults apply everywhere)
    """

    def __init__(self, config_path: str | Path | None = None):
        """
        Initialize the settings builder.

        Args:
            config_path: Path to the settings file. None means no settings file,
                in which case every lookup returns its default.

        Raises:
            FileNotFoundError: If an explicit config_path does not exist.
        """
        if config_path is None:
            self.config_path = None
            self.raw_config: dict[str, Any] = {}
            logger.debug("No settings file, using framework defaults")
            return

        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Settings file not found: {self.config_path}")

        self.raw_config = resolve_env_vars(load_yaml_file(self.config_path))
        logger.info(f"Loaded settings from {self.config_path}")

    def get(self, path: str, default: Any = None) -> Any:
        """Get a settings value using dot notation path."""
        keys = path.split(".")
        value = self.raw_config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default


# =============================================================================
# GLOBAL SETTINGS
# =============================================================================

_default_config: ConfigBuilder | None = None


def _locate_settings_file() -> Path | None:
    config_file = os.environ.get(CONFIG_ENV_VAR)
    if config_file:
        return Path(config_file)

    cwd_config = Path.cwd() / DEFAULT_SETTINGS_FILE
    if cwd_config.exists():
        return cwd_config
    return None


def get_config_builder(config_path: str | Path | None = None) -> ConfigBuilder:
    """Get the settings builder.

    With no argument the process-wide default is returned, created on first
    use from AJAXWIRE_CONFIG or ./ajaxwire-settings.yml. An explicit path
    always builds a fresh ConfigBuilder for that file.

    Examples:
        >>> settings = get_config_builder()
        >>> resource = settings.get("container.default_config_resource", "ajaxwire.yml")
    """
    global _default_config

    if config_path is not None:
        return ConfigBuilder(config_path)

    if _default_config is None:
        _default_config = ConfigBuilder(_locate_settings_file())
    return _default_config


def get_config_value(path: str, default: Any = None) -> Any:
    """
    Get a specific settings value by dot-separated path.

    Args:
        path: Dot-separated settings path (e.g., "logging.rich_tracebacks")
        default: Default value to return if path is not found

    Returns:
        The settings value at the specified path, or default if not found

    Raises:
        ValueError: If path is empty or None
    """
    if not path:
        raise ValueError("Settings path cannot be empty or None")

    return get_config_builder().get(path, default)


def reset_config() -> None:
    """Forget the cached default settings so the next access reloads them."""
    global _default_config
    _default_config = None
