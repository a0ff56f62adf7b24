"""Utility functions for ajaxwire.

Import directly from submodules to avoid circular imports:
    from ajaxwire.utils.config import get_config_value
    from ajaxwire.utils.logger import get_logger
"""
