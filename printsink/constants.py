"""
Constants and default values shared across printsink.
"""

import logging

# Seconds a pasteboard output waits for further writes before updating
DEFAULT_DEBOUNCE_INTERVAL: float = 0.1

DEFAULT_ENCODING: str = "utf-8"

# Maximum config file size (10MB)
MAX_CONFIG_SIZE_BYTES = 10 * 1024 * 1024

ENV_PREFIX = "PRINTSINK_"

# ANSI escape sequences
ESCAPE: str = "\x1b["
RESET: str = "\x1b[0m"

# Log level names accepted by LogOutput and OutputConfig
LEVEL_NAMES: dict[str, int] = {
    "critical": logging.CRITICAL,
    "fault": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "default": logging.INFO,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}
