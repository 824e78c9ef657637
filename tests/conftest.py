from __future__ import annotations

from collections.abc import Callable

import pytest

from squeakbot.chat.client import ChatClient
from squeakbot.chat.models import ChatMessage, ChatUser, Destination
from squeakbot.commands.declaration import (
    AllowedCommandDestination,
    CommandDeclaration,
    HelpCategory,
)
from squeakbot.commands.dispatcher import CommandDispatcher
from squeakbot.commands.registry import CommandRegistry
from squeakbot.localization import Localizer
from squeakbot.permissions import AccountPermission


class FakeTransport:
    """Captures outbound messages instead of writing to a socket."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    async def send_message(self, target: str, text: str) -> None:
        self.sent.append((target, text))

    def texts(self) -> list[str]:
        return [text for _, text in self.sent]


class FakeOracle:
    """Grants permissions per nickname."""

    def __init__(self, grants: dict[str, set[AccountPermission]] | None = None) -> None:
        self.grants = grants or {}
        self.queries: list[tuple[str, AccountPermission]] = []

    def has_permission(self, user: ChatUser, permission: AccountPermission) -> bool:
        self.queries.append((user.nickname, permission))
        return permission in self.grants.get(user.nickname, set())


class Recorder:
    """Command handler recording every invocation it receives."""

    def __init__(self) -> None:
        self.calls: list = []

    def __call__(self, invocation) -> None:  # type: ignore[no-untyped-def]
        self.calls.append(invocation)

    @property
    def parameters(self) -> list[list[str]]:
        return [list(c.parameters) for c in self.calls]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> ChatClient:
    return ChatClient(transport, Localizer(), nickname="squeakbot")


@pytest.fixture
def make_message(client: ChatClient) -> Callable[..., ChatMessage]:
    def _make(
        text: str,
        *,
        nick: str = "SpaceDawg",
        account: str | None = "spacedawg",
        channel: str | None = "#fuelrats",
        tags: dict[str, str] | None = None,
    ) -> ChatMessage:
        destination = (
            Destination(name=channel, is_private_message=False)
            if channel
            else Destination(name="squeakbot", is_private_message=True)
        )
        return ChatMessage(
            text=text,
            user=ChatUser(nickname=nick, account=account),
            destination=destination,
            client=client,
            tags=dict(tags or {}),
        )

    return _make


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()


@pytest.fixture
def oracle() -> FakeOracle:
    return FakeOracle()


@pytest.fixture
def dispatcher(registry: CommandRegistry, oracle: FakeOracle) -> CommandDispatcher:
    return CommandDispatcher(
        registry,
        oracle,
        prefix="!",
        blacklist={"BadRat"},
        moderation_channel="#doersofstuff",
    )


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def shorten(registry: CommandRegistry, recorder: Recorder) -> CommandDeclaration:
    return registry.register(
        CommandDeclaration(
            commands=("shorten", "short", "shortener"),
            on_command=recorder,
            min_parameters=1,
            max_parameters=2,
            category=HelpCategory.UTILITY,
            description="Create a short url to another url.",
            param_text="<url> [custom link]",
            example="https://www.youtube.com/watch?v=dQw4w9WgXcQ importantinfo",
            permission=AccountPermission.RESCUE_WRITE_OWN,
            allowed_destinations=AllowedCommandDestination.PRIVATE_MESSAGE,
        )
    )
