"""Turn chat text into command invocations."""

from __future__ import annotations

from ..chat.models import ChatMessage
from ..constants import COMMAND_PREFIX
from .invocation import Invocation

# Playback of historical messages arrives inside a batch
BATCH_TAG = "batch"


def is_playback(message: ChatMessage) -> bool:
    return BATCH_TAG in message.tags


def split_tokens(
    tokens: list[str],
) -> tuple[list[str], set[str], set[str]]:
    """Separate option tokens from parameters.

    ``--name`` adds ``name`` to the named options and ``-abc`` adds ``a``,
    ``b`` and ``c`` to the short options. A lone ``-`` or ``--`` is an
    ordinary parameter. Remaining tokens keep their order.
    """
    parameters: list[str] = []
    options: set[str] = set()
    named_options: set[str] = set()
    for token in tokens:
        if token.startswith("--") and len(token) > 2:
            named_options.add(token[2:])
        elif token.startswith("-") and len(token) > 1 and token != "--":
            options.update(token[1:])
        else:
            parameters.append(token)
    return parameters, options, named_options


def parse_invocation(
    message: ChatMessage, prefix: str = COMMAND_PREFIX
) -> Invocation | None:
    """Build an invocation from ``message`` or return None.

    Messages from playback batches and text that does not start with
    ``prefix`` followed by a keyword produce no invocation.
    """
    if is_playback(message):
        return None
    text = message.text.strip()
    if not text.startswith(prefix):
        return None
    tokens = text[len(prefix):].split()
    if not tokens or text[len(prefix)].isspace():
        return None
    keyword, *rest = tokens
    parameters, options, named_options = split_tokens(rest)
    return Invocation(
        command=keyword.lower(),
        message=message,
        parameters=parameters,
        options=options,
        named_options=named_options,
    )
