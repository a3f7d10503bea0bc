"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Default configuration dictionary
# This is used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "store": {
        # Persisted document in the working directory
        "data_file": "data.json",
        # Ask the operator before discarding an unreadable data file
        "on_corrupt": "prompt",
        # Keep a copy of a discarded data file next to it
        "backup_corrupt": True,
    },
    "logging": {
        "level": "INFO",
        "log_file": "logs/hospital-records.log",
        # Do not redact PII by default (user must opt-in for privacy)
        "redact_pii": False,
    },
}

# Default configuration file path
DEFAULT_CONFIG_PATH = "config/config.json"
