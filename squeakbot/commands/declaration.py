"""Command declarations: the static contract of one command family."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..errors import DeclarationError
from ..permissions import AccountPermission

if TYPE_CHECKING:  # pragma: no cover
    from .invocation import Invocation

CommandHandler = Callable[["Invocation"], Awaitable[Any] | None]


class AllowedCommandDestination(Enum):
    CHANNEL = "channel"
    PRIVATE_MESSAGE = "private_message"
    ALL = "all"


class HelpCategory(str, Enum):
    BOARD = "board"
    RESCUES = "rescues"
    QUEUE = "queue"
    UTILITY = "utility"
    ACCOUNT = "account"
    MANAGEMENT = "management"

    @classmethod
    def lookup(cls, name: str) -> HelpCategory | None:
        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None


DISPATCHING_PERMISSIONS = frozenset(
    {AccountPermission.RESCUE_WRITE, AccountPermission.RESCUE_WRITE_OWN}
)


def _ordered_unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True)
class CommandDeclaration:
    """Immutable description of a command family.

    Attributes:
        commands: Keywords (aliases) that invoke the command, lowercase.
        on_command: Handler called with the validated invocation. May be a
            plain function or a coroutine function.
        min_parameters: Fewest parameters the command accepts.
        max_parameters: Most parameters accepted, unbounded when None.
        last_parameter_is_continuous: Collapse every token from the last
            parameter slot to the end of the line into that slot.
        options: Allowed single-character options, in display order.
        named_options: Allowed ``--named`` options, in display order.
        permission: Permission the sender must hold, if any.
        allowed_destinations: Channel-only, private-only or anywhere.
        category: Help category the command is listed under.
        description: One-line help text.
        param_text: Parameter placeholder shown in usage text.
        example: Example arguments shown in help and error replies.
    """

    commands: tuple[str, ...]
    on_command: CommandHandler | None
    min_parameters: int = 0
    max_parameters: int | None = None
    last_parameter_is_continuous: bool = False
    options: tuple[str, ...] = ()
    named_options: tuple[str, ...] = ()
    permission: AccountPermission | None = None
    allowed_destinations: AllowedCommandDestination = AllowedCommandDestination.ALL
    category: HelpCategory | None = None
    description: str = ""
    param_text: str | None = None
    example: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.commands, str):
            raise DeclarationError("commands must be a collection of keywords")
        commands = _ordered_unique(c.strip().lower() for c in self.commands)
        if not commands or not all(commands):
            raise DeclarationError(
                "a command needs at least one non-empty keyword",
                data={"commands": self.commands},
            )
        if self.min_parameters < 0:
            raise DeclarationError(
                "min_parameters must not be negative",
                data={"command": commands[0], "min_parameters": self.min_parameters},
            )
        if self.max_parameters is not None and self.max_parameters < self.min_parameters:
            raise DeclarationError(
                "max_parameters must not be below min_parameters",
                data={
                    "command": commands[0],
                    "min_parameters": self.min_parameters,
                    "max_parameters": self.max_parameters,
                },
            )
        if isinstance(self.options, str):
            raise DeclarationError("options must be a collection of single characters")
        options = _ordered_unique(self.options)
        if any(len(option) != 1 for option in options):
            raise DeclarationError(
                "short options must be single characters",
                data={"command": commands[0], "options": options},
            )
        if isinstance(self.named_options, str):
            raise DeclarationError("named_options must be a collection of names")
        named = _ordered_unique(n.lstrip("-") for n in self.named_options)
        if not all(named):
            raise DeclarationError(
                "named options must not be empty",
                data={"command": commands[0]},
            )
        object.__setattr__(self, "commands", commands)
        object.__setattr__(self, "options", options)
        object.__setattr__(self, "named_options", named)

    @property
    def name(self) -> str:
        return self.commands[0]

    @property
    def aliases(self) -> tuple[str, ...]:
        return self.commands[1:]

    @property
    def is_dispatching_command(self) -> bool:
        """Whether the command mutates rescue board state for dispatch."""
        return (
            self.category is HelpCategory.BOARD
            and self.permission in DISPATCHING_PERMISSIONS
        )

    def matches(self, keyword: str) -> bool:
        return keyword in self.commands
