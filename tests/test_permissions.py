from __future__ import annotations

import pytest

from squeakbot.chat.models import ChatUser
from squeakbot.permissions import (
    GENERAL_WRITE_PERMISSION,
    AccountPermission,
    ConfigPermissionOracle,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("rescue.write", AccountPermission.RESCUE_WRITE),
        (" Rescue.Write.Own ", AccountPermission.RESCUE_WRITE_OWN),
        ("nickname_read", AccountPermission.NICKNAME_READ),
    ],
)
def test_parse(value: str, expected: AccountPermission) -> None:
    assert AccountPermission.parse(value) is expected


def test_parse_unknown() -> None:
    with pytest.raises(ValueError):
        AccountPermission.parse("rescue.delete")


def test_general_write_permission() -> None:
    assert GENERAL_WRITE_PERMISSION is AccountPermission.RESCUE_WRITE


def test_oracle_unions_groups_case_insensitively() -> None:
    oracle = ConfigPermissionOracle(
        groups={"Rat": [AccountPermission.RESCUE_READ], "Admin": [AccountPermission.USER_WRITE]},
        accounts={"Dawg": ["rat", "ADMIN", "missing"]},
    )
    assert oracle.permissions_for("dawg") == frozenset(
        {AccountPermission.RESCUE_READ, AccountPermission.USER_WRITE}
    )
    assert oracle.permissions_for(None) == frozenset()
    assert oracle.permissions_for("stranger") == frozenset()
    assert oracle.has_permission(ChatUser("x", account="DAWG"), AccountPermission.USER_WRITE)
    assert not oracle.has_permission(ChatUser("Dawg"), AccountPermission.RESCUE_READ)
