from __future__ import annotations

import pytest

from squeakbot.commands.declaration import CommandDeclaration, HelpCategory
from squeakbot.commands.help import HelpModule, example_description, usage_description
from squeakbot.commands.invocation import Invocation
from squeakbot.permissions import AccountPermission


def _decl(**kwargs) -> CommandDeclaration:  # type: ignore[no-untyped-def]
    base = {"commands": ("rescue", "r"), "on_command": None}
    base.update(kwargs)
    return CommandDeclaration(**base)


def test_usage_with_everything() -> None:
    decl = _decl(options=("i", "s"), named_options=("quiet", "all"), param_text="<id>")
    assert usage_description(decl) == "rescue [-is] [--quiet] [--all] <id>"


def test_usage_bare_keyword() -> None:
    assert usage_description(_decl()) == "rescue"


def test_usage_and_example_use_invoked_alias(make_message) -> None:
    decl = _decl(param_text="<id>", example="4")
    inv = Invocation(command="r", message=make_message("!r"))
    assert usage_description(decl, inv) == "r <id>"
    assert example_description(decl, inv) == "r 4"
    assert example_description(decl) == "rescue 4"


def test_example_without_example_text() -> None:
    assert example_description(_decl()) == "rescue "


@pytest.fixture
def help_module(registry):  # type: ignore[no-untyped-def]
    module = HelpModule(registry, prefix="!")
    registry.register(
        CommandDeclaration(
            commands=("go", "assign"),
            on_command=None,
            min_parameters=2,
            param_text="<case> <rats...>",
            example="4 SpaceDawg",
            category=HelpCategory.BOARD,
            permission=AccountPermission.RESCUE_WRITE,
            description="Assign rats to a case.",
        )
    )
    registry.register(CommandDeclaration(commands=("hidden",), on_command=None))
    return module


async def _help(help_module, make_message, text: str) -> None:  # type: ignore[no-untyped-def]
    message = make_message(text, channel=None)
    params = text.split()[1:]
    await help_module.did_receive_help_command(
        Invocation(command="help", message=message, parameters=params)
    )


@pytest.mark.asyncio
async def test_help_lists_categories(help_module, make_message, transport) -> None:  # type: ignore[no-untyped-def]
    await _help(help_module, make_message, "!help")
    assert transport.texts() == [
        "Commands are grouped in the categories: utility and board.",
        "Use !help <category> to list the commands in a category, "
        "or !help !<command> for details about a command.",
    ]


@pytest.mark.asyncio
async def test_help_lists_category_commands(help_module, make_message, transport) -> None:  # type: ignore[no-untyped-def]
    await _help(help_module, make_message, "!help BOARD")
    assert transport.texts() == ["Commands in board: !go"]


@pytest.mark.asyncio
async def test_help_describes_command_by_alias(help_module, make_message, transport) -> None:  # type: ignore[no-untyped-def]
    await _help(help_module, make_message, "!help !assign")
    assert transport.texts() == [
        "Usage: !assign <case> <rats...>",
        "Assign rats to a case.",
        "Example: !assign 4 SpaceDawg",
        "Requires permission: rescue.write",
        "Aliases: !go and !assign",
    ]


@pytest.mark.asyncio
async def test_help_without_prefix_and_unknown(help_module, make_message, transport) -> None:  # type: ignore[no-untyped-def]
    await _help(help_module, make_message, "!help hidden")
    await _help(help_module, make_message, "!help !nothing")
    assert transport.texts() == [
        "Usage: !hidden",
        "Could not find a command or category named !nothing.",
    ]
