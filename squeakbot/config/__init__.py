"""Configuration package exports."""

from .loader import ConfigLoader, load_config
from .model import BotConfig

__all__ = ["BotConfig", "ConfigLoader", "load_config"]
