"""Command validation error hierarchy.

Each validation failure raised by the dispatch pipeline carries the
localization key of the user-facing error and the substitution map used
to render it. The dispatcher catches these, sends exactly one error reply
and stops processing the invocation; they never escape the pipeline.
"""

from __future__ import annotations

from collections.abc import Mapping


class CommandValidationError(Exception):
    """Base exception for a rejected command invocation.

    Args:
        key: Localization key of the error reply.
        mapping: Placeholder substitutions for the reply template.

    Example:
        >>> raise TooFewParametersError(mapping={"command": "shorten"})
    """

    key: str = "command.error"
    reason: str = "invalid"

    def __init__(
        self, key: str | None = None, mapping: Mapping[str, str] | None = None
    ) -> None:
        self.key = key or self.key
        self.mapping: dict[str, str] = dict(mapping) if mapping else {}
        super().__init__(self.key)


class IllegalNamedOptionError(CommandValidationError):
    """Raised when a ``--named`` option is not allowed by the declaration."""

    key = "command.illegalnamedoptions"
    reason = "illegal_named_option"


class IllegalShortOptionError(CommandValidationError):
    """Raised when a ``-x`` option is not allowed by the declaration."""

    key = "command.illegaloptions"
    reason = "illegal_short_option"


class WrongDestinationError(CommandValidationError):
    """Raised when a command is sent to a channel type it does not accept.

    The key is ``command.publiconly`` or ``command.privateonly`` depending
    on the direction of the violation.
    """

    key = "command.publiconly"
    reason = "wrong_destination"


class TooFewParametersError(CommandValidationError):
    key = "command.toofewparams"
    reason = "too_few_parameters"


class TooManyParametersError(CommandValidationError):
    key = "command.toomanyparams"
    reason = "too_many_parameters"


class PermissionDeniedError(CommandValidationError):
    key = "board.nopermission"
    reason = "permission_denied"


__all__ = [
    "CommandValidationError",
    "IllegalNamedOptionError",
    "IllegalShortOptionError",
    "WrongDestinationError",
    "TooFewParametersError",
    "TooManyParametersError",
    "PermissionDeniedError",
]
