"""Event template catalog, loaded from the co-located ``event_templates.json``.

The JSON maps ``domain -> action -> template``. Entries that are not
strings are skipped. An unreadable catalog yields a single
``("app", "load_error")`` entry describing the failure.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

CATALOG_PATH = Path(__file__).with_name("event_templates.json")

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}


def load_event_templates(path: Path | None = None) -> dict[tuple[str, str], str]:
    path = path or CATALOG_PATH
    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {("app", "load_error"): f"Event templates file missing: {path.name}"}
    except (OSError, ValueError) as e:
        return {("app", "load_error"): f"Failed to load event templates: {e}"[:200]}
    if not isinstance(raw, Mapping):
        return {}
    return {
        (domain, action): template
        for domain, actions in raw.items()
        if isinstance(actions, Mapping)
        for action, template in actions.items()
        if isinstance(template, str)
    }


def reload_event_templates() -> None:
    """Re-read the catalog at ``CATALOG_PATH``; running loggers use it at once."""
    global EVENT_TEMPLATES  # noqa: PLW0603
    EVENT_TEMPLATES = load_event_templates()


reload_event_templates()

__all__ = ["CATALOG_PATH", "EVENT_TEMPLATES", "load_event_templates", "reload_event_templates"]
