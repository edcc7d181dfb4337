from __future__ import annotations

"""
Configuration Domain Management.

Builds the default runtime configuration and merges an optional per-project
JSON file over it. The file lives in the working directory so that the tool
picks up the settings of the repository it is run against.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from localesweep.domain.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_EXTENSIONS,
    DEFAULT_PRIMARY_EXPORT,
    DEFAULT_PRIMARY_LOCALE,
    DEFAULT_SECONDARY_EXPORT,
    DEFAULT_SECONDARY_LOCALE,
    DEFAULT_SRC_DIR,
    DEFAULT_TYPE_IMPORT,
    DEFAULT_TYPE_NAME,
    DEFAULT_TYPES_FILE,
    TOP_LEVEL_SECTIONS,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Paths are relative and resolved later against the working directory
    (or the --root override).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "root_dir": "",
        "src_dir": DEFAULT_SRC_DIR,
        "primary_locale": DEFAULT_PRIMARY_LOCALE,
        "secondary_locale": DEFAULT_SECONDARY_LOCALE,
        "types_file": DEFAULT_TYPES_FILE,

        # Corpus selection
        "extensions": list(DEFAULT_EXTENSIONS),

        # Reference detection
        "sections": list(TOP_LEVEL_SECTIONS),
        "trim_member_access": False,

        # Code generation
        "type_name": DEFAULT_TYPE_NAME,
        "type_import": DEFAULT_TYPE_IMPORT,
        "primary_export": DEFAULT_PRIMARY_EXPORT,
        "secondary_export": DEFAULT_SECONDARY_EXPORT,
    }


def default_config_path() -> str:
    """Location of the project configuration file in the working directory."""
    return os.path.join(os.getcwd(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the project configuration, falling back to defaults.

    Unknown keys are kept so the validator can report them; a missing file
    is not an error, a corrupted one is logged and ignored.

    Args:
        path: Explicit config file. Defaults to '.localesweep.json' in the CWD.

    Returns:
        Dict[str, Any]: Defaults updated with the file contents.
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
