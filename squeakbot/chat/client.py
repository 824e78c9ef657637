"""Outbound side of the chat connection."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..localization import Localizer
from ..logs.logger import logger
from .protocols import ChatTransport


class ChatClient:
    """Couples a transport with the localizer used to render replies."""

    def __init__(
        self,
        transport: ChatTransport,
        localizer: Localizer | None = None,
        nickname: str | None = None,
    ) -> None:
        self.transport = transport
        self.localizer = localizer or Localizer()
        self.nickname = nickname

    async def send_message(self, target: str, text: str) -> None:
        logger.log_event(
            "chat",
            "send",
            level=logging.DEBUG,
            human=f"➡️ {target}: {text}",
            target=target,
        )
        await self.transport.send_message(target, text)

    async def send_localized(
        self,
        target: str,
        key: str,
        mapping: Mapping[str, object] | None = None,
        locale: str | None = None,
    ) -> str:
        """Render ``key`` and send it to ``target``; returns the sent text."""
        text = self.localizer.render(key, mapping, locale)
        await self.send_message(target, text)
        return text
