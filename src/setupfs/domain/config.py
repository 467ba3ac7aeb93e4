from __future__ import annotations

"""
Configuration Domain Management.

Dict-based runtime configuration for materialization runs. Values come from
built-in defaults, an optional JSON file and command-line overrides, in that
order of increasing precedence.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_ENCODING = "utf-8"

CONFIG_KEYS = ("root", "encoding", "overwrite", "dry_run", "print_tree")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "root": os.getcwd(),
        "encoding": DEFAULT_ENCODING,
        "overwrite": True,
        "dry_run": False,
        "print_tree": False,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file, merged over defaults.

    A missing path returns the defaults. An unreadable file or a payload
    that is not a JSON object is logged and ignored.

    Args:
        path: Location of the JSON configuration file.

    Returns:
        Dict[str, Any]: The merged configuration (not yet validated).
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{path}' does not hold a JSON object. Using defaults.")
        return config

    config.update(data)
    logger.debug(f"Loaded configuration from {path}")
    return config
