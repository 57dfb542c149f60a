import json
import os
from datetime import datetime

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "default_input": "example.in",
    "input_suffix": ".in",
    "output_suffix": ".out",
    "enable_logging": True,
    "output_directory": "logs/",
    "log_file_prefix": "tapeconv_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "default_input": str,
    "input_suffix": str,
    "output_suffix": str,
    "enable_logging": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    for key in ("input_suffix", "output_suffix"):
        suffix = config[key]
        if len(suffix) < 2 or not suffix.startswith("."):
            raise ValueError(f"Config key '{key}' must be a file extension such as '.in', got {suffix!r}.")
    if config["input_suffix"] == config["output_suffix"]:
        raise ValueError("Input and output suffixes must differ, or the output would overwrite the input.")

def load_config(path=None, verbose=False):
    """Merge a JSON override file over DEFAULT_CONFIG.

    With no path the default location is used if present; an explicit path
    that does not exist is an error.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not os.path.exists(path):
            config = DEFAULT_CONFIG.copy()
            validate_config(config)
            return config
    elif not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)
    if not isinstance(user_config, dict):
        raise TypeError(f"Configuration file {path} must contain a JSON object.")

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    if verbose:
        print(f"[{datetime.now()}] Loaded config from {path}:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config
