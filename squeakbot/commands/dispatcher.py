"""Command dispatch: lookup, validation pipeline and handler invocation."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable

from ..chat.models import ChatMessage
from ..constants import COMMAND_PREFIX, MODERATION_CHANNEL
from ..errors import (
    CommandValidationError,
    IllegalNamedOptionError,
    IllegalShortOptionError,
    PermissionDeniedError,
    TooFewParametersError,
    TooManyParametersError,
    WrongDestinationError,
)
from ..localization import english_list
from ..logs.logger import logger
from ..permissions import GENERAL_WRITE_PERMISSION, PermissionOracle
from .declaration import AllowedCommandDestination, CommandDeclaration
from .help import example_description, usage_description
from .invocation import Invocation
from .parse import parse_invocation
from .registry import CommandRegistry

HELP_OPTION = "h"
HELP_KEYWORD = "help"


def collapse_continuous_parameters(
    parameters: list[str], max_parameters: int
) -> list[str]:
    """Keep the first ``max_parameters - 1`` tokens and join the rest.

    With fewer tokens than ``max_parameters`` the list is returned as is.
    """
    if max_parameters < 1 or len(parameters) <= max_parameters:
        return list(parameters)
    head = parameters[: max_parameters - 1]
    remainder = " ".join(parameters[max_parameters - 1 :])
    return [*head, remainder]


class CommandDispatcher:
    """Validates invocations against the registry and runs their handlers.

    Each validation step either passes or raises a
    ``CommandValidationError``; the first failure produces exactly one
    localized error reply and ends processing. Handler exceptions are not
    caught here.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        permission_oracle: PermissionOracle,
        *,
        prefix: str = COMMAND_PREFIX,
        blacklist: Iterable[str] = (),
        moderation_channel: str = MODERATION_CHANNEL,
    ) -> None:
        self.registry = registry
        self.permission_oracle = permission_oracle
        self.prefix = prefix
        self.blacklist = frozenset(entry.lower() for entry in blacklist if entry)
        self.moderation_channel = moderation_channel

    async def handle_message(self, message: ChatMessage) -> None:
        invocation = parse_invocation(message, self.prefix)
        if invocation is None:
            return
        await self.handle_invocation(invocation)

    async def handle_invocation(self, invocation: Invocation) -> None:
        message = invocation.message
        declaration = self.registry.find(invocation.command)
        if declaration is None:
            logger.log_event(
                "command",
                "unknown",
                level=logging.DEBUG,
                user=invocation.sender,
                command=invocation.command,
            )
            return

        logger.log_event(
            "command",
            "received",
            level=logging.DEBUG,
            nick=invocation.sender,
            command=invocation.command,
            destination=message.destination.name,
        )

        if HELP_OPTION in invocation.options:
            await self._redirect_to_help(invocation)
            return

        try:
            self.validate(declaration, invocation)
        except CommandValidationError as e:
            logger.log_event(
                "command",
                "rejected",
                nick=invocation.sender,
                command=invocation.command,
                reason=e.reason,
            )
            await message.error(e.key, invocation, e.mapping)
            return

        if declaration.is_dispatching_command and self.is_blacklisted(message):
            await self._warn_blacklisted(invocation)

        await self._invoke(declaration, invocation)

    def validate(self, declaration: CommandDeclaration, invocation: Invocation) -> None:
        """Run every validation step in order, collapsing parameters in place.

        Raises:
            CommandValidationError: The first failing check.
        """
        self._check_named_options(declaration, invocation)
        self._check_options(declaration, invocation)
        self._check_destination(declaration, invocation)
        self._check_minimum_parameters(declaration, invocation)
        self._collapse_parameters(declaration, invocation)
        self._check_maximum_parameters(declaration, invocation)
        self._check_permission(declaration, invocation)

    @staticmethod
    def _usage_mapping(
        declaration: CommandDeclaration, invocation: Invocation
    ) -> dict[str, str]:
        return {
            "command": invocation.command,
            "usage": f"Usage: {usage_description(declaration, invocation)}.",
            "example": f"Example: {example_description(declaration, invocation)}.",
        }

    def _check_named_options(
        self, declaration: CommandDeclaration, invocation: Invocation
    ) -> None:
        illegal = invocation.named_options - set(declaration.named_options)
        if illegal:
            raise IllegalNamedOptionError(
                mapping={
                    "options": english_list(sorted(illegal)),
                    **self._usage_mapping(declaration, invocation),
                }
            )

    def _check_options(
        self, declaration: CommandDeclaration, invocation: Invocation
    ) -> None:
        illegal = invocation.options - set(declaration.options)
        if illegal:
            raise IllegalShortOptionError(
                mapping={
                    "options": "".join(sorted(illegal)),
                    **self._usage_mapping(declaration, invocation),
                }
            )

    def _check_destination(
        self, declaration: CommandDeclaration, invocation: Invocation
    ) -> None:
        allowed = declaration.allowed_destinations
        if allowed is AllowedCommandDestination.ALL:
            return
        message = invocation.message
        is_private = message.destination.is_private_message
        if allowed is AllowedCommandDestination.CHANNEL and is_private:
            key = "command.publiconly"
        elif allowed is AllowedCommandDestination.PRIVATE_MESSAGE and not is_private:
            key = "command.privateonly"
        else:
            return
        if self.permission_oracle.has_permission(message.user, GENERAL_WRITE_PERMISSION):
            return
        raise WrongDestinationError(key, {"command": invocation.command})

    def _check_minimum_parameters(
        self, declaration: CommandDeclaration, invocation: Invocation
    ) -> None:
        if len(invocation.parameters) < declaration.min_parameters:
            raise TooFewParametersError(
                mapping=self._usage_mapping(declaration, invocation)
            )

    @staticmethod
    def _collapse_parameters(
        declaration: CommandDeclaration, invocation: Invocation
    ) -> None:
        # Only collapse when more than one token was supplied
        if (
            declaration.max_parameters is not None
            and declaration.last_parameter_is_continuous
            and len(invocation.parameters) > 1
        ):
            invocation.parameters = collapse_continuous_parameters(
                invocation.parameters, declaration.max_parameters
            )

    def _check_maximum_parameters(
        self, declaration: CommandDeclaration, invocation: Invocation
    ) -> None:
        maximum = declaration.max_parameters
        if maximum is not None and len(invocation.parameters) > maximum:
            raise TooManyParametersError(
                mapping=self._usage_mapping(declaration, invocation)
            )

    def _check_permission(
        self, declaration: CommandDeclaration, invocation: Invocation
    ) -> None:
        permission = declaration.permission
        if permission is None:
            return
        if not self.permission_oracle.has_permission(invocation.message.user, permission):
            raise PermissionDeniedError()

    def is_blacklisted(self, message: ChatMessage) -> bool:
        nickname = message.user.nickname.lower()
        account = (message.user.account or "").lower()
        return any(
            entry in nickname or account == entry for entry in self.blacklist
        )

    async def _warn_blacklisted(self, invocation: Invocation) -> None:
        message = invocation.message
        logger.log_event(
            "command",
            "blacklist_warning",
            level=logging.WARNING,
            nick=invocation.sender,
            command=invocation.command,
        )
        await message.client.send_localized(
            self.moderation_channel,
            "command.blacklist",
            {"command": invocation.command, "nick": invocation.sender},
        )

    async def _redirect_to_help(self, invocation: Invocation) -> None:
        logger.log_event(
            "command",
            "help_redirect",
            level=logging.DEBUG,
            command=invocation.command,
        )
        help_declaration = self.registry.find(HELP_KEYWORD)
        if help_declaration is None:
            return
        help_invocation = Invocation(
            command=HELP_KEYWORD,
            message=invocation.message,
            parameters=[f"{self.prefix}{invocation.command}"],
        )
        await self._invoke(help_declaration, help_invocation)

    @staticmethod
    async def _invoke(declaration: CommandDeclaration, invocation: Invocation) -> None:
        if declaration.on_command is None:
            return
        logger.log_event(
            "command",
            "invoke",
            level=logging.DEBUG,
            nick=invocation.sender,
            command=invocation.command,
        )
        result = declaration.on_command(invocation)
        if inspect.isawaitable(result):
            await result
