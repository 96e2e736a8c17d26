from __future__ import annotations

"""
Configuration Domain Management.

Dict-based runtime configuration: domain defaults, optionally overlaid by a
JSON file and then by command-line overrides.
"""

import json
import logging
import os
from typing import Any, Dict, List

from pathtree.errors import ConfigError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
OUTPUT_FORMATS: List[str] = ["text", "json"]
DEFAULT_OUTPUT_FORMAT = "text"
DEFAULT_JSON_INDENT = 2


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "input_files": [],

        # Output
        "output_format": DEFAULT_OUTPUT_FORMAT,
        "json_indent": DEFAULT_JSON_INDENT,

        # Runtime
        "synchronized": False,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: str = "") -> Dict[str, Any]:
    """
    Load configuration from a JSON file merged over the defaults.

    A missing path or file yields the defaults. Unknown keys are kept and
    left for the validator to ignore.

    Args:
        path: Location of the JSON configuration file.

    Returns:
        Dict[str, Any]: Merged configuration.

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object.
    """
    config = get_default_config()

    if not path or not os.path.exists(path):
        logger.debug(f"Config file not found ({path or 'none'}). Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to load config '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config '{path}' must contain a JSON object.")

    config.update(data)
    logger.debug(f"Configuration loaded from {path}")
    return config
