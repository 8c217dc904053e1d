from __future__ import annotations

"""
Configuration Domain Management.

Holds the default scan settings and persists the last used session as JSON
in the user data directory.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from mdnav.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"
DEFAULT_DOC_EXTENSION = ".md"
DEFAULT_JSON_INDENT = 2


def get_config_file() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": os.getcwd(),
        "output_file": "",

        # Discovery
        "extension": DEFAULT_DOC_EXTENSION,
        "prune_hidden": True,
        "sort_entries": True,

        # Output
        "print_tree": False,
        "json_indent": DEFAULT_JSON_INDENT,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the last saved session merged over the defaults.

    Unreadable or malformed files are reported and ignored.

    Args:
        config_file: Optional override of the config file location.

    Returns:
        Dict[str, Any]: Configuration dictionary.
    """
    path = config_file or get_config_file()
    config = get_default_config()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config from '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    config.update(data.get("last_session", {}))
    return config


def save_config(config: Dict[str, Any], config_file: Optional[str] = None) -> None:
    """
    Persist the provided configuration as the last session.

    Args:
        config: Configuration to save.
        config_file: Optional override of the config file location.
    """
    path = config_file or get_config_file()
    state = {"version": CURRENT_CONFIG_VERSION, "last_session": config}
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
