"""Locale keyed string tables for user-facing replies."""

from .catalog import Localizer, english_list

__all__ = ["Localizer", "english_list"]
