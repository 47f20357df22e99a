from __future__ import annotations

"""
Configuration Domain Management.

Supplies the default session configuration that drives the compile pipeline
and persists user overrides as JSON in the application data directory.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from glslbatch.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
DEFAULT_COMPILER = "glslc"
COMPILE_ONLY_FLAG = "-c"


def default_config_path() -> str:
    """Location of the persisted configuration inside the user data dir."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    The root directory defaults to the current working directory; every
    other key mirrors the behavior of a plain ``glslc -c`` over all
    vertex and fragment shaders below it.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Discovery
        "root_path": os.getcwd(),
        "extensions": [".vert", ".frag"],
        "exclude_patterns": [],
        "case_sensitive": False,
        "sort_files": False,

        # Invocation
        "compiler": DEFAULT_COMPILER,
        "extra_args": [],
        "output_dir": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the persisted configuration, merged over the defaults.

    A missing file is not an error. A corrupted or unreadable file is
    logged and ignored.

    Args:
        path: Explicit JSON file to read. Defaults to the user data dir.

    Returns:
        Dict[str, Any]: The effective configuration dictionary.
    """
    config = get_default_config()
    config_path = path or default_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{config_path}'. Using defaults.")
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {config_path}")
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> str:
    """
    Persist the provided configuration to disk.

    This is the only place the user data directory gets created.

    Args:
        config: The configuration dictionary to save.
        path: Explicit target file. Defaults to the user data dir.

    Returns:
        str: The written file, or an empty string if writing failed.
    """
    config_path = path or default_config_path()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration to '{config_path}': {e}")
        return ""
    logger.debug(f"Configuration saved to {config_path}")
    return config_path
