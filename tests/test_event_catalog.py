"""Tests for event catalog loading and basic integrity."""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from squeakbot.logs import event_catalog
from squeakbot.logs.logger import BotLogger


def test_event_templates_loads() -> None:
    assert event_catalog.EVENT_TEMPLATES, "EVENT_TEMPLATES should not be empty"
    assert ("app", "load_error") not in event_catalog.EVENT_TEMPLATES


def test_reload_idempotent() -> None:
    before = set(event_catalog.EVENT_TEMPLATES.keys())
    event_catalog.reload_event_templates()
    after = set(event_catalog.EVENT_TEMPLATES.keys())
    assert before == after


def test_logged_events_have_templates() -> None:
    # Every log_event("domain", "action", ...) call in the package is catalogued
    package = Path(event_catalog.__file__).parents[1]
    pattern = re.compile(r'log_event\(\s*"(\w+)",\s*"(\w+)"')
    used: set[tuple[str, str]] = set()
    for path in package.rglob("*.py"):
        used.update(pattern.findall(path.read_text(encoding="utf-8")))
    assert used
    missing = used - set(event_catalog.EVENT_TEMPLATES)
    assert not missing, f"Missing templates: {sorted(missing)}"


def test_event_catalog_missing_file(tmp_path) -> None:  # type: ignore[no-untyped-def]
    templates = event_catalog.load_event_templates(tmp_path / "absent.json")
    assert ("app", "load_error") in templates


def test_event_catalog_skips_non_string_entries(tmp_path) -> None:  # type: ignore[no-untyped-def]
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"a": {"x": "text", "y": 3}, "b": "flat"}), encoding="utf-8")
    assert event_catalog.load_event_templates(path) == {("a", "x"): "text"}


def test_event_catalog_invalid_json(tmp_path) -> None:  # type: ignore[no-untyped-def]
    path = tmp_path / "events.json"
    path.write_text("{oops", encoding="utf-8")
    (message,) = event_catalog.load_event_templates(path).values()
    assert message.startswith("Failed to load event templates")


@pytest.fixture
def restore_catalog():  # type: ignore[no-untyped-def]
    saved = event_catalog.EVENT_TEMPLATES
    yield
    event_catalog.EVENT_TEMPLATES = saved


def test_reload_picks_up_edited_catalog(tmp_path, monkeypatch, restore_catalog) -> None:  # type: ignore[no-untyped-def]
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"app": {"start": "Booting {name}"}}), encoding="utf-8")
    monkeypatch.setattr(event_catalog, "CATALOG_PATH", path)
    event_catalog.reload_event_templates()
    assert event_catalog.EVENT_TEMPLATES == {("app", "start"): "Booting {name}"}
    assert BotLogger.describe("app", "start", {"name": "squeakbot"}) == "Booting squeakbot"
    assert BotLogger.describe("app", "shutdown", {}) == "app: shutdown"
