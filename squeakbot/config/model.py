from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..constants import COMMAND_PREFIX, DEFAULT_LOCALE, MODERATION_CHANNEL
from ..permissions import AccountPermission, ConfigPermissionOracle


def _normalize_names(values: list[str] | Any) -> list[str]:
    """Strip, lowercase and deduplicate a list of names, preserving order."""
    if not isinstance(values, list):
        raise ValueError("expected a list of strings")
    cleaned = (v.strip().lower() for v in values if isinstance(v, str))
    return list(dict.fromkeys(v for v in cleaned if v))


class BotConfig(BaseModel):
    """Startup configuration of the command core.

    Attributes:
        command_prefix: Text that marks a chat message as a command.
        moderation_channel: Channel receiving dispatch blacklist warnings.
        locale: Default string table used for replies.
        dispatch_blacklist: Nicknames/accounts flagged when they invoke
            rescue-board dispatching commands.
        permission_groups: Group name -> permissions granted by the group.
        accounts: Account name -> group names the account belongs to.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    command_prefix: str = Field(default=COMMAND_PREFIX, min_length=1, max_length=3)
    moderation_channel: str = MODERATION_CHANNEL
    locale: str = DEFAULT_LOCALE
    dispatch_blacklist: frozenset[str] = Field(default_factory=frozenset)
    permission_groups: dict[str, list[AccountPermission]] = Field(default_factory=dict)
    accounts: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("command_prefix", mode="before")
    @classmethod
    def validate_prefix(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("command_prefix must be a non-empty string")
        if any(ch.isspace() for ch in v.strip()):
            raise ValueError("command_prefix must not contain whitespace")
        return v.strip()

    @field_validator("moderation_channel", mode="before")
    @classmethod
    def validate_moderation_channel(cls, v: Any) -> str:
        """Ensure the moderation channel carries a single leading '#'."""
        if not isinstance(v, str) or not v.strip().lstrip("#"):
            raise ValueError("moderation_channel must name a channel")
        return "#" + v.strip().lstrip("#").lower()

    @field_validator("dispatch_blacklist", mode="before")
    @classmethod
    def validate_blacklist(cls, v: Any) -> frozenset[str]:
        return frozenset(_normalize_names(v))

    @field_validator("permission_groups", mode="before")
    @classmethod
    def validate_groups(cls, v: Any) -> dict[str, list[AccountPermission]]:
        if not isinstance(v, Mapping):
            raise ValueError("permission_groups must be an object")
        groups: dict[str, list[AccountPermission]] = {}
        for name, perms in v.items():
            if not isinstance(perms, list):
                raise ValueError(f"permissions of group {name!r} must be a list")
            groups[str(name).strip().lower()] = [
                p if isinstance(p, AccountPermission) else AccountPermission.parse(str(p))
                for p in perms
            ]
        return groups

    @field_validator("accounts", mode="before")
    @classmethod
    def validate_accounts(cls, v: Any) -> dict[str, list[str]]:
        if not isinstance(v, Mapping):
            raise ValueError("accounts must be an object")
        return {str(k).strip().lower(): _normalize_names(g) for k, g in v.items()}

    @model_validator(mode="after")
    def validate_account_groups(self) -> BotConfig:
        """Every group referenced by an account must be declared."""
        for account, group_names in self.accounts.items():
            unknown = [g for g in group_names if g not in self.permission_groups]
            if unknown:
                raise ValueError(
                    f"account {account!r} references unknown groups: {', '.join(unknown)}"
                )
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BotConfig:
        return cls.model_validate(dict(data))

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump(mode="json")
        data["dispatch_blacklist"] = sorted(self.dispatch_blacklist)
        return data

    def build_permission_oracle(self) -> ConfigPermissionOracle:
        return ConfigPermissionOracle(self.permission_groups, self.accounts)
