"""Notification bridge between the chat transport and the dispatcher."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..commands.parse import BATCH_TAG
from ..irc.parser import build_privmsg, parse_irc_message
from ..logs.logger import logger
from .client import ChatClient
from .models import ChatMessage

if TYPE_CHECKING:  # pragma: no cover
    from ..commands.dispatcher import CommandDispatcher


class NotificationBridge:
    """Feeds inbound IRC lines to the command dispatcher one at a time.

    Lines are processed strictly in arrival order; each dispatch is awaited
    before the next line is looked at.
    """

    def __init__(self, dispatcher: CommandDispatcher, client: ChatClient) -> None:
        self.dispatcher = dispatcher
        self.client = client

    async def process_incoming_data(self, buffer: str, new_data: str) -> str:
        """Append ``new_data`` and handle every complete line.

        Returns:
            The unterminated remainder to pass in with the next chunk.
        """
        buffer += new_data
        while "\r\n" in buffer:
            line, buffer = buffer.split("\r\n", 1)
            if line.strip():
                await self.handle_line(line.strip())
        return buffer

    async def handle_line(self, raw_line: str) -> None:
        parsed = parse_irc_message(raw_line)
        priv = build_privmsg(parsed)
        if priv is None:
            logger.log_event(
                "bridge",
                "ignored_line",
                level=logging.DEBUG,
                command=parsed.command,
            )
            return
        if BATCH_TAG in priv.tags:
            logger.log_event(
                "bridge",
                "ignored_batch",
                level=logging.DEBUG,
                batch=priv.tags[BATCH_TAG],
            )
            return
        if self.client.nickname and priv.author.lower() == self.client.nickname.lower():
            return
        await self.handle_message(ChatMessage.from_privmsg(priv, self.client))

    async def handle_message(self, message: ChatMessage) -> None:
        logger.log_event(
            "bridge",
            "privmsg",
            level=logging.DEBUG,
            user=message.user.nickname,
            channel=None if message.destination.is_private_message else message.destination.name,
            author=message.user.nickname,
            text=message.text,
        )
        try:
            await self.dispatcher.handle_message(message)
        except Exception as e:  # noqa: BLE001
            logger.log_event(
                "bridge",
                "handler_error",
                level=logging.ERROR,
                user=message.user.nickname,
                command=message.text.split(" ", 1)[0],
                error=str(e),
                error_type=type(e).__name__,
            )
