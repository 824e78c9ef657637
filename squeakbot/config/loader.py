"""Configuration loading utilities."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..constants import CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE
from ..errors import ConfigError
from ..logs.logger import logger
from .model import BotConfig


class ConfigLoader:
    """Loads the bot configuration from a JSON file once at startup."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        """Initialize ConfigLoader.

        Args:
            path: Path to the configuration file. Defaults to the file named
                by the ``SQUEAKBOT_CONF_FILE`` environment variable.
        """
        if path is None:
            path = os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE)
        self.path = Path(path)

    def load_raw(self) -> dict[str, Any] | None:
        """Return the decoded JSON object, or None when the file is absent.

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object.
        """
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            raise ConfigError(
                f"Configuration load error: {e}", data={"path": str(self.path)}
            ) from e
        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration root must be a JSON object",
                data={"path": str(self.path)},
            )
        return data

    def load(self) -> BotConfig:
        """Load and validate the configuration.

        A missing file yields the default configuration.

        Raises:
            ConfigError: If the file is unreadable or fails validation.
        """
        raw = self.load_raw()
        if raw is None:
            logger.log_event(
                "config", "missing", level=logging.WARNING, path=str(self.path)
            )
            return BotConfig()
        try:
            config = BotConfig.from_dict(raw)
        except ValidationError as e:
            logger.log_event(
                "config",
                "invalid",
                level=logging.ERROR,
                path=str(self.path),
                error=e.error_count(),
            )
            raise ConfigError(
                f"Invalid configuration: {e}", data={"path": str(self.path)}
            ) from e
        logger.log_event(
            "config",
            "loaded",
            path=str(self.path),
            blacklist_size=len(config.dispatch_blacklist),
        )
        return config


def load_config(path: str | os.PathLike[str] | None = None) -> BotConfig:
    return ConfigLoader(path).load()
