"""Structured event logger used across the command core."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

import colorlog

from ..logging_config import LEVEL_COLORS

EVENT_COLUMN_WIDTH = 32
ACTOR_COLUMN_WIDTH = 24


def debug_enabled() -> bool:
    return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")


def _actor(user: object, channel: object) -> str:
    """Render the ``[nick@#channel]`` column; ``system`` without a user."""
    nick = user if isinstance(user, str) and user else "system"
    label = f"{nick}@{channel}" if isinstance(channel, str) and channel else nick
    return f"[{label.ljust(ACTOR_COLUMN_WIDTH)[:ACTOR_COLUMN_WIDTH]}]"


def _event_column(event_name: str) -> str:
    if len(event_name) <= EVENT_COLUMN_WIDTH:
        return event_name.ljust(EVENT_COLUMN_WIDTH)
    return event_name[: EVENT_COLUMN_WIDTH - 1] + "…"


class BotLogger:
    """Event logger keyed by ``(domain, action)`` pairs.

    The human readable text of an event comes from the template catalog,
    filled from the context keyword arguments. ``user`` and ``channel``
    select the actor column. With ``DEBUG`` set, every line also carries
    the event name and the remaining context verbatim.
    """

    def __init__(self, name: str = "squeakbot") -> None:
        self.logger = logging.getLogger(name)
        self.logger.handlers.clear()
        self.logger.setLevel(logging.DEBUG if debug_enabled() else logging.INFO)

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            colorlog.ColoredFormatter(
                "%(log_color)s%(levelname)-8s%(reset)s %(message)s", log_colors=LEVEL_COLORS
            )
        )
        self.logger.addHandler(handler)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **context: object,
    ) -> None:
        text = human if human is not None else self.describe(domain, action, context)
        actor = _actor(context.pop("user", None), context.pop("channel", None))
        if debug_enabled():
            line = f"{_event_column(f'{domain}_{action}'.lower())} {actor} {text}"
            if context:
                line += " (" + ", ".join(f"{k}={v}" for k, v in context.items()) + ")"
        else:
            line = f"{actor} {text}"
        self.logger.log(level, line, exc_info=exc_info)

    @staticmethod
    def describe(domain: str, action: str, context: Mapping[str, object]) -> str:
        """Human text for an event, filled from ``context`` where possible.

        Unknown events fall back to ``domain: action``; a template whose
        placeholders are not all supplied is returned unformatted.
        """
        # Local import avoids a cycle during package init
        from .event_catalog import EVENT_TEMPLATES

        template = EVENT_TEMPLATES.get((domain, action))
        if template is None:
            return f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
        try:
            return template.format(**context)
        except (KeyError, IndexError, ValueError):
            return template


logger = BotLogger()
