"""Config module.

This module provides configuration management functionality.
"""

from hospital_records.config.manager import load_config
from hospital_records.config.schema import (
    Config,
    LoggingConfig,
    StoreConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    # Configuration models
    "Config",
    "StoreConfig",
    "LoggingConfig",
]
