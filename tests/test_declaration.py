from __future__ import annotations

import pytest

from squeakbot.commands.declaration import (
    AllowedCommandDestination,
    CommandDeclaration,
    HelpCategory,
)
from squeakbot.errors import DeclarationError
from squeakbot.permissions import AccountPermission


def _noop(invocation) -> None:  # type: ignore[no-untyped-def]  # noqa: ARG001
    return None


def test_defaults_and_normalization() -> None:
    decl = CommandDeclaration(
        commands=("Shorten", "short", "SHORT"),
        on_command=_noop,
        options=("a", "b", "a"),
        named_options=("--force", "all"),
    )
    assert decl.commands == ("shorten", "short")
    assert decl.name == "shorten"
    assert decl.aliases == ("short",)
    assert decl.options == ("a", "b")
    assert decl.named_options == ("force", "all")
    assert decl.min_parameters == 0
    assert decl.max_parameters is None
    assert decl.allowed_destinations is AllowedCommandDestination.ALL
    assert decl.matches("short")
    assert not decl.matches("shortener")


def test_declaration_is_immutable() -> None:
    decl = CommandDeclaration(commands=("help",), on_command=_noop)
    with pytest.raises(AttributeError):
        decl.min_parameters = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"commands": ()},
        {"commands": ("",)},
        {"commands": "help"},
        {"commands": ("x",), "min_parameters": -1},
        {"commands": ("x",), "min_parameters": 3, "max_parameters": 2},
        {"commands": ("x",), "options": ("ab",)},
        {"commands": ("x",), "options": "ab"},
        {"commands": ("x",), "named_options": "force"},
        {"commands": ("x",), "named_options": ("--",)},
    ],
)
def test_invalid_declarations_rejected(kwargs) -> None:  # type: ignore[no-untyped-def]
    with pytest.raises(DeclarationError):
        CommandDeclaration(on_command=_noop, **kwargs)


@pytest.mark.parametrize(
    ("category", "permission", "expected"),
    [
        (HelpCategory.BOARD, AccountPermission.RESCUE_WRITE, True),
        (HelpCategory.BOARD, AccountPermission.RESCUE_WRITE_OWN, True),
        (HelpCategory.BOARD, AccountPermission.RESCUE_READ, False),
        (HelpCategory.BOARD, None, False),
        (HelpCategory.UTILITY, AccountPermission.RESCUE_WRITE, False),
        (None, AccountPermission.RESCUE_WRITE_OWN, False),
    ],
)
def test_dispatching_command_flag(category, permission, expected) -> None:  # type: ignore[no-untyped-def]
    decl = CommandDeclaration(
        commands=("go",), on_command=_noop, category=category, permission=permission
    )
    assert decl.is_dispatching_command is expected


def test_help_category_lookup() -> None:
    assert HelpCategory.lookup(" Board ") is HelpCategory.BOARD
    assert HelpCategory.lookup("nope") is None
