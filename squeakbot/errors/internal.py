"""Centralized internal error hierarchy.

Classes:
  InternalError        – Base for all internal errors.
  ConfigError          – Configuration file could not be read or validated.
  DeclarationError     – A command declaration violates its own invariants.
  RegistryFrozenError  – Registration attempted after startup completed.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy so later caller mutations do not leak in
        self.data = dict(data) if data else {}


class ConfigError(InternalError):
    """Raised when the configuration file is unreadable or fails validation."""


class DeclarationError(InternalError):
    """Raised when a command declaration is internally inconsistent.

    Examples are an empty keyword list, a minimum parameter count above
    the maximum, or a short option that is not a single character.
    """


class RegistryFrozenError(InternalError):
    """Raised when a command is registered after the registry was frozen."""


__all__ = [
    "InternalError",
    "ConfigError",
    "DeclarationError",
    "RegistryFrozenError",
]
