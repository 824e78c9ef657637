"""Account permissions and the permission oracle."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from .chat.models import ChatUser


class AccountPermission(str, Enum):
    RESCUE_READ = "rescue.read"
    RESCUE_READ_OWN = "rescue.read.own"
    RESCUE_WRITE = "rescue.write"
    RESCUE_WRITE_OWN = "rescue.write.own"
    USER_READ = "user.read"
    USER_WRITE = "user.write"
    NICKNAME_READ = "nickname.read"
    NICKNAME_WRITE = "nickname.write"

    @classmethod
    def parse(cls, value: str) -> AccountPermission:
        """Resolve a permission from its dotted value or enum name."""
        normalized = value.strip()
        for member in cls:
            if normalized.lower() == member.value or normalized.upper() == member.name:
                return member
        raise ValueError(f"unknown permission: {value!r}")


# Holding this permission lifts channel/private-only restrictions
GENERAL_WRITE_PERMISSION = AccountPermission.RESCUE_WRITE


class PermissionOracle(Protocol):
    """Answers whether a chat user holds a named permission."""

    def has_permission(self, user: ChatUser, permission: AccountPermission) -> bool:
        ...


class ConfigPermissionOracle:
    """Permission oracle backed by the static configuration.

    Accounts are mapped to permission groups; a user holds the union of
    the permissions of every group of its account. Users that are not
    identified with services (no account) hold no permissions.
    """

    def __init__(
        self,
        groups: Mapping[str, Iterable[AccountPermission]],
        accounts: Mapping[str, Iterable[str]],
    ) -> None:
        self._groups = {
            name.lower(): frozenset(perms) for name, perms in groups.items()
        }
        self._accounts = {
            account.lower(): tuple(g.lower() for g in group_names)
            for account, group_names in accounts.items()
        }

    def permissions_for(self, account: str | None) -> frozenset[AccountPermission]:
        if not account:
            return frozenset()
        granted: set[AccountPermission] = set()
        for group in self._accounts.get(account.lower(), ()):
            granted.update(self._groups.get(group, ()))
        return frozenset(granted)

    def has_permission(self, user: ChatUser, permission: AccountPermission) -> bool:
        return permission in self.permissions_for(user.account)
