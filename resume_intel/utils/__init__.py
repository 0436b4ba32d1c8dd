"""
Utility modules for resume-intel.

This package contains shared utilities used across the engine:
- config: Configuration management
- logger: Logging infrastructure
- constants: Extraction vocabulary and gazetteers
"""

from resume_intel.utils.config import (
    AppSettings,
    ExtractionSettings,
    LoggingSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    PACKAGE_DIR,
    LOGS_DIR,
)
from resume_intel.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
)
from resume_intel.utils.logger import (
    setup_logging,
    get_logger,
)

__all__ = [
    # Config
    "AppSettings",
    "ExtractionSettings",
    "LoggingSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "PACKAGE_DIR",
    "LOGS_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    # Logger
    "setup_logging",
    "get_logger",
]
