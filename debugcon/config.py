import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import error_console

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "DEBUGCON_FORCE_CONSOLE": "false",
    "DEBUGCON_TIMESTAMPS": "false",
}

# File Paths
DEBUGCON_DIR = Path(os.getenv("DEBUGCON_DIR", str(Path.home() / ".debugcon")))
CONFIG_FILE = Path(os.getenv("DEBUGCON_CONFIG_FILE", str(DEBUGCON_DIR / "config.json")))


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from file"""
    config_path = path or CONFIG_FILE
    if config_path.exists():
        try:
            with open(config_path) as f:
                config = json.load(f)
            if isinstance(config, dict):
                return config
            error_console.print(
                f"[yellow]Warning: Ignoring config file {config_path}: expected a JSON object[/yellow]"
            )
        except Exception as e:
            error_console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val is not None:
        return env_val

    # 2. Config File
    config = load_config()
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_bool_setting(key: str, default: bool) -> bool:
    """Get boolean setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default).lower())
    return value.strip().lower() in ("true", "1", "yes", "on")


# Initialize Configuration. These are read once, at import, and never change
# for the lifetime of the process.
FORCE_CONSOLE_ALLOCATION = get_bool_setting(
    "DEBUGCON_FORCE_CONSOLE", DEFAULT_CONFIG["DEBUGCON_FORCE_CONSOLE"] == "true"
)
TIMESTAMPS_ENABLED = get_bool_setting(
    "DEBUGCON_TIMESTAMPS", DEFAULT_CONFIG["DEBUGCON_TIMESTAMPS"] == "true"
)
