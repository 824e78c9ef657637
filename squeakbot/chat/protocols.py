"""Protocol definitions for chat components.

The command core never talks to a socket itself; outbound text leaves
through a ``ChatTransport`` supplied by the embedding application.
"""

from __future__ import annotations

from typing import Protocol


class ChatTransport(Protocol):
    """Protocol for delivering outbound chat text."""

    async def send_message(self, target: str, text: str) -> None:
        """Send ``text`` to a channel or nickname."""
        ...
