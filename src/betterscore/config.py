"""
BetterScore Configuration Management

Loads settings from config/default.json with environment variable overrides.
"""

import os
import json
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


DEFAULT_OUTPUT_DIR = Path.home() / "Documents" / "BetterScore"


@dataclass
class OutputConfig:
    directory: Path = DEFAULT_OUTPUT_DIR


@dataclass
class WebConfig:
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False


@dataclass
class ClockConfig:
    period_seconds: int = 1200  # 20 minutes
    power_play_seconds: int = 120  # 2 minutes
    tick_interval: float = 1.0


@dataclass
class Config:
    output: OutputConfig = field(default_factory=OutputConfig)
    web: WebConfig = field(default_factory=WebConfig)
    clock: ClockConfig = field(default_factory=ClockConfig)
    debug: bool = False


def _as_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from JSON file with environment variable overrides.

    Priority (highest to lowest):
    1. Environment variables (BETTERSCORE_*)
    2. Config file values
    3. Default values
    """
    config = Config()

    # Determine config file path
    if config_path is None:
        base_dir = Path(__file__).parent.parent.parent
        config_path = base_dir / "config" / "default.json"
    else:
        config_path = Path(config_path)

    # Load from JSON if exists
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if "output" in data:
            directory = data["output"].get("directory")
            if directory:
                config.output.directory = Path(directory).expanduser()

        if "web" in data:
            config.web.host = data["web"].get("host", config.web.host)
            config.web.port = data["web"].get("port", config.web.port)
            config.web.debug = data["web"].get("debug", config.web.debug)

        if "clock" in data:
            config.clock.period_seconds = data["clock"].get("period_seconds", config.clock.period_seconds)
            config.clock.power_play_seconds = data["clock"].get("power_play_seconds", config.clock.power_play_seconds)
            config.clock.tick_interval = data["clock"].get("tick_interval", config.clock.tick_interval)

        config.debug = data.get("debug", config.debug)

    # Environment variable overrides
    if os.environ.get("BETTERSCORE_OUTPUT_DIR"):
        config.output.directory = Path(os.environ["BETTERSCORE_OUTPUT_DIR"]).expanduser()
    if os.environ.get("BETTERSCORE_WEB_HOST"):
        config.web.host = os.environ["BETTERSCORE_WEB_HOST"]
    if os.environ.get("BETTERSCORE_WEB_PORT"):
        config.web.port = int(os.environ["BETTERSCORE_WEB_PORT"])
    if os.environ.get("BETTERSCORE_DEBUG"):
        config.debug = _as_bool(os.environ["BETTERSCORE_DEBUG"])

    return config


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global config instance, loading it if necessary."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Config) -> None:
    """Set the global config instance."""
    global _config
    _config = config
