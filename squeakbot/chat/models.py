"""Inbound chat message models."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..irc.parser import PrivMsg
from ..logs.logger import logger

if TYPE_CHECKING:  # pragma: no cover
    from ..commands.invocation import Invocation
    from .client import ChatClient


@dataclass(frozen=True, slots=True)
class ChatUser:
    nickname: str
    account: str | None = None
    username: str | None = None
    host: str | None = None


@dataclass(frozen=True, slots=True)
class Destination:
    """Where a message was sent: a channel name or the bot's own nick."""

    name: str
    is_private_message: bool


@dataclass
class ChatMessage:
    """A single inbound chat message and the means to answer it.

    Attributes:
        text: Message body.
        user: The sender.
        destination: Channel or private conversation the text arrived in.
        tags: IRCv3 message tags of the raw line.
        client: Outbound client used by ``reply`` and ``error``.
        raw: The raw protocol line.
        locale: Preferred string table for replies, default locale if None.
    """

    text: str
    user: ChatUser
    destination: Destination
    client: ChatClient
    tags: dict[str, str] = field(default_factory=dict)
    raw: str = ""
    locale: str | None = None

    @classmethod
    def from_privmsg(cls, priv: PrivMsg, client: ChatClient) -> ChatMessage:
        user = ChatUser(
            nickname=priv.author,
            account=priv.account,
            username=priv.username,
            host=priv.host,
        )
        destination = Destination(
            name=priv.target, is_private_message=priv.is_private_message
        )
        return cls(
            text=priv.message,
            user=user,
            destination=destination,
            client=client,
            tags=dict(priv.tags),
            raw=priv.raw,
        )

    @property
    def reply_target(self) -> str:
        if self.destination.is_private_message:
            return self.user.nickname
        return self.destination.name

    def _address(self, text: str) -> str:
        # Channel replies are addressed to the sender
        if self.destination.is_private_message:
            return text
        return f"{self.user.nickname}: {text}"

    async def reply(
        self, key: str, mapping: Mapping[str, object] | None = None
    ) -> None:
        text = self.client.localizer.render(key, mapping, self.locale)
        await self.client.send_message(self.reply_target, self._address(text))

    async def error(
        self,
        key: str,
        invocation: Invocation | None = None,
        mapping: Mapping[str, object] | None = None,
    ) -> None:
        """Send a localized error reply for ``invocation``."""
        text = self.client.localizer.render(key, mapping, self.locale)
        logger.log_event(
            "chat",
            "error_reply",
            level=logging.DEBUG,
            user=self.user.nickname,
            key=key,
            command=invocation.command if invocation else None,
        )
        await self.client.send_message(self.reply_target, self._address(text))
