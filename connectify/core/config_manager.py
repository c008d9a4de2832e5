# connectify/core/config_manager.py

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import DataLoadingError

# A dedicated logger for the module that manages the application's config file.
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("config.json")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """App-wide values that are not user preferences."""
    log_level: str = "INFO"
    user_prefs_file_path: Path = Path("preferences.json")


def read_config(config_path: Path) -> Optional[Config]:
    """
    Reads the config file.

    Returns:
        The Config, or None if the file does not exist.

    Raises:
        DataLoadingError: If the file exists but is not a valid config.
    """
    if not config_path.exists():
        return None
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        log_level = str(data.get("log_level", "INFO")).upper()
        if log_level not in VALID_LOG_LEVELS:
            logger.warning(f"Unknown log level '{log_level}' in {config_path}. Falling back to INFO.")
            log_level = "INFO"
        return Config(
            log_level=log_level,
            user_prefs_file_path=Path(data.get("user_prefs_file_path", "preferences.json")),
        )
    # ValueError covers both JSONDecodeError and UnicodeDecodeError
    except (OSError, ValueError, AttributeError, TypeError) as e:
        raise DataLoadingError(f"Could not read config file {config_path}: {e}") from e


def save_config(config: Config, config_path: Path):
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump({
            "log_level": config.log_level,
            "user_prefs_file_path": str(config.user_prefs_file_path),
        }, f, indent=2)
    logger.info(f"Configuration saved to: {config_path}")


def load_or_create_config(config_path: Path = DEFAULT_CONFIG_FILE) -> Config:
    """Reads the config, writing the defaults first if there is no config file yet."""
    config = read_config(config_path)
    if config is None:
        logger.info(f"Config file not found at {config_path}. Creating one with default values.")
        config = Config()
        save_config(config, config_path)
    return config
