from __future__ import annotations

"""
Runtime Configuration Defaults.

The command line front-end starts from get_default_config(), merges its
overrides on top and passes the result through validate_config(). Nothing is
read from the environment and nothing is persisted.
"""

from typing import Any, Dict

DEFAULT_TOKEN_TYPE = "str"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"

# Keys the CLI is allowed to override
CONFIG_KEYS = (
    "input_path",
    "output_path",
    "token_type",
    "count",
    "encoding",
    "json_output",
    "log_level",
)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO (None means stdin/stdout)
        "input_path": None,
        "output_path": None,
        "encoding": DEFAULT_ENCODING,

        # Token handling
        "token_type": DEFAULT_TOKEN_TYPE,
        "count": None,

        # Output format
        "json_output": False,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
    }
