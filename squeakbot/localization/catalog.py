"""String table loader and renderer.

Tables are JSON files named ``<locale>.json`` in the ``strings`` directory,
nested by dotted key segments (``{"command": {"toofewparams": "..."}}``
resolves ``command.toofewparams``). Lookups fall back to the default locale
and finally to the key itself.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ..constants import DEFAULT_LOCALE
from ..logs.logger import logger

_STRINGS_DIR = Path(__file__).with_name("strings")


def _flatten(prefix: str, node: Mapping[str, Any], out: dict[str, str]) -> None:
    for key, value in node.items():
        if not isinstance(key, str):
            continue
        full_key = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            _flatten(full_key, value, out)
        elif isinstance(value, str):
            out[full_key] = value


def _load_table(path: Path) -> dict[str, str]:
    table: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as f:
            raw: Any = json.load(f)
    except (OSError, ValueError) as e:
        logger.log_event(
            "localization",
            "load_error",
            level=logging.WARNING,
            path=str(path),
            error=str(e),
        )
        return table
    if isinstance(raw, Mapping):
        _flatten("", raw, table)
    return table


def english_list(items: Iterable[str]) -> str:
    """Join items as ``a, b and c``."""
    values = list(items)
    if not values:
        return ""
    if len(values) == 1:
        return values[0]
    return f"{', '.join(values[:-1])} and {values[-1]}"


class Localizer:
    """Resolves localization keys to rendered reply text."""

    def __init__(
        self,
        default_locale: str = DEFAULT_LOCALE,
        strings_dir: str | Path | None = None,
        tables: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        self.default_locale = default_locale
        self._strings_dir = Path(strings_dir) if strings_dir else _STRINGS_DIR
        self._tables: dict[str, dict[str, str]] = {
            locale: dict(table) for locale, table in (tables or {}).items()
        }

    def _table(self, locale: str) -> dict[str, str]:
        table = self._tables.get(locale)
        if table is None:
            path = self._strings_dir / f"{locale}.json"
            table = _load_table(path) if path.exists() else {}
            self._tables[locale] = table
        return table

    def template(self, key: str, locale: str | None = None) -> str | None:
        locale = locale or self.default_locale
        template = self._table(locale).get(key)
        if template is None and locale != self.default_locale:
            template = self._table(self.default_locale).get(key)
        return template

    def render(
        self,
        key: str,
        mapping: Mapping[str, object] | None = None,
        locale: str | None = None,
    ) -> str:
        """Render ``key`` with ``mapping`` substituted into its placeholders.

        A missing key renders as the key itself; a template referencing a
        placeholder absent from ``mapping`` is returned unformatted.
        """
        template = self.template(key, locale)
        if template is None:
            logger.log_event(
                "localization",
                "missing_key",
                level=logging.WARNING,
                key=key,
                locale=locale or self.default_locale,
            )
            return key
        try:
            return template.format_map(dict(mapping or {}))
        except (KeyError, IndexError, ValueError) as e:
            logger.log_event(
                "localization",
                "missing_placeholder",
                level=logging.WARNING,
                key=key,
                error=str(e),
            )
            return template
