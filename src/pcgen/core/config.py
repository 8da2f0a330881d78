#!/usr/bin/env python3
"""
pcgen configuration loader.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Final

from pcgen.core.constants import DEFAULT_PREFIX
from pcgen.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "prefix": DEFAULT_PREFIX,
    "output_dir": ".",
    "logging": {"level": "INFO"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "pcgen" / "config.json"

PROJECT_CONFIG_NAME: Final[str] = "pcgen.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load pcgen configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/pcgen/config.json)
        3. Project config (./pcgen.json)
        4. Environment overrides:
           - PCGEN_PREFIX
           - PCGEN_OUTPUT_DIR
           - PCGEN_LOG_LEVEL

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    config = merge_dicts(config, load_json_file(Path.cwd() / PROJECT_CONFIG_NAME))

    # 4) environment overrides
    prefix_env = os.getenv("PCGEN_PREFIX")
    if prefix_env:
        config["prefix"] = os.path.expanduser(prefix_env)

    output_dir_env = os.getenv("PCGEN_OUTPUT_DIR")
    if output_dir_env:
        config["output_dir"] = str(Path(output_dir_env).expanduser())

    log_level_env = os.getenv("PCGEN_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    return config
