"""Line based console transport for running the core locally."""

from __future__ import annotations

import sys
from typing import TextIO


class ConsoleTransport:
    """Writes outbound messages as raw ``PRIVMSG`` lines to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    async def send_message(self, target: str, text: str) -> None:
        self.stream.write(f"PRIVMSG {target} :{text}\r\n")
        self.stream.flush()
