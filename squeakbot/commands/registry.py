"""Command registry populated by feature modules during startup."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from ..errors import RegistryFrozenError
from ..logs.logger import logger
from ..permissions import AccountPermission
from .declaration import (
    AllowedCommandDestination,
    CommandDeclaration,
    CommandHandler,
    HelpCategory,
)


class CommandRegistry:
    """Ordered, append-only collection of command declarations.

    Lookup walks declarations in registration order and the first one
    claiming a keyword wins. Registering a keyword that is already claimed
    is allowed but logged. After ``freeze`` the registry is read-only.
    """

    def __init__(self) -> None:
        self._declarations: list[CommandDeclaration] = []
        self._frozen = False

    def __iter__(self) -> Iterator[CommandDeclaration]:
        return iter(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True
        logger.log_event("registry", "frozen", count=len(self._declarations))

    def register(self, declaration: CommandDeclaration) -> CommandDeclaration:
        if self._frozen:
            raise RegistryFrozenError(
                "commands can only be registered during startup",
                data={"command": declaration.name},
            )
        for keyword in declaration.commands:
            if self.find(keyword) is not None:
                logger.log_event(
                    "registry",
                    "duplicate_keyword",
                    level=logging.WARNING,
                    keyword=keyword,
                )
        self._declarations.append(declaration)
        logger.log_event(
            "registry",
            "register",
            level=logging.DEBUG,
            command=declaration.name,
            aliases=",".join(declaration.aliases),
        )
        return declaration

    def command(
        self,
        commands: Iterable[str],
        *,
        min_parameters: int = 0,
        max_parameters: int | None = None,
        last_parameter_is_continuous: bool = False,
        options: Iterable[str] = (),
        named_options: Iterable[str] = (),
        category: HelpCategory | None,
        description: str,
        param_text: str | None = None,
        example: str | None = None,
        permission: AccountPermission | None = None,
        allowed_destinations: AllowedCommandDestination = AllowedCommandDestination.ALL,
    ) -> Callable[[CommandHandler], CommandHandler]:
        """Decorator registering the decorated function as a command handler.

        Example:
            >>> @registry.command(["shorten", "short"], min_parameters=1,
            ...     max_parameters=2, category=HelpCategory.UTILITY,
            ...     description="Shorten a URL")
            ... async def shorten(invocation): ...
        """

        def decorator(handler: CommandHandler) -> CommandHandler:
            self.register(
                CommandDeclaration(
                    commands=commands,  # type: ignore[arg-type]
                    on_command=handler,
                    min_parameters=min_parameters,
                    max_parameters=max_parameters,
                    last_parameter_is_continuous=last_parameter_is_continuous,
                    options=options,  # type: ignore[arg-type]
                    named_options=named_options,  # type: ignore[arg-type]
                    permission=permission,
                    allowed_destinations=allowed_destinations,
                    category=category,
                    description=description,
                    param_text=param_text,
                    example=example,
                )
            )
            return handler

        return decorator

    def find(self, keyword: str) -> CommandDeclaration | None:
        keyword = keyword.lower()
        for declaration in self._declarations:
            if declaration.matches(keyword):
                return declaration
        return None

    def duplicate_keywords(self) -> dict[str, list[CommandDeclaration]]:
        """Keywords claimed by more than one declaration, in claim order."""
        claims: dict[str, list[CommandDeclaration]] = {}
        for declaration in self._declarations:
            for keyword in declaration.commands:
                claims.setdefault(keyword, []).append(declaration)
        return {k: v for k, v in claims.items() if len(v) > 1}

    def by_category(self) -> dict[HelpCategory, list[CommandDeclaration]]:
        """Declarations grouped by help category, uncategorized ones omitted."""
        grouped: dict[HelpCategory, list[CommandDeclaration]] = {}
        for declaration in self._declarations:
            if declaration.category is not None:
                grouped.setdefault(declaration.category, []).append(declaration)
        return grouped
