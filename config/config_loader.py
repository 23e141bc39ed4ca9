import json
import os

from rich.console import Console

console = Console()

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "max_steps": 10_000,
    "verbose": False,
    "log_runs": True,
    "output_directory": "logs/",
    "log_file_prefix": "tm_",
    "programs_directory": "programs/",
    "results_directory": "results/"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "max_steps": int,
    "verbose": bool,
    "log_runs": bool,
    "output_directory": str,
    "log_file_prefix": str,
    "programs_directory": str,
    "results_directory": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is a subclass of int, so reject it explicitly for int keys
        if expected_type is int and isinstance(config[key], bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

def load_config(path=DEFAULT_CONFIG_PATH, show=False):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    os.makedirs(config["output_directory"], exist_ok=True)

    if show:
        console.print("[bold]Loaded config:[/bold]")
        for key, value in config.items():
            console.print(f"  {key}: {value}")

    return config

def load_config_or_defaults(path=DEFAULT_CONFIG_PATH):
    """Like load_config, but fall back to DEFAULT_CONFIG when the file is absent."""
    if not os.path.exists(path):
        return DEFAULT_CONFIG.copy()
    return load_config(path)

def save_config(config, path=DEFAULT_CONFIG_PATH):
    validate_config(config)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
