"""Event logging for the command core: the template catalog and ``BotLogger``."""

from .event_catalog import EVENT_TEMPLATES, load_event_templates, reload_event_templates
from .logger import BotLogger, logger

__all__ = [
    "BotLogger",
    "EVENT_TEMPLATES",
    "load_event_templates",
    "logger",
    "reload_event_templates",
]
