"""Structured representation of one command-bearing chat message."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..chat.models import ChatMessage


@dataclass
class Invocation:
    """A command recognized in a chat message.

    ``parameters`` is rewritten in place by continuation collapsing during
    dispatch, so handlers always see the validated parameter list.
    """

    command: str
    message: ChatMessage
    parameters: list[str] = field(default_factory=list)
    options: set[str] = field(default_factory=set)
    named_options: set[str] = field(default_factory=set)

    @property
    def sender(self) -> str:
        return self.message.user.nickname

    def parameter(self, index: int, default: str | None = None) -> str | None:
        if 0 <= index < len(self.parameters):
            return self.parameters[index]
        return default
