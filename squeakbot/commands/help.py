"""Help text formatting and the built-in help command."""

from __future__ import annotations

from ..constants import COMMAND_PREFIX, HELP_MAX_COMMANDS_PER_LINE
from ..localization import english_list
from .declaration import CommandDeclaration, HelpCategory
from .invocation import Invocation
from .registry import CommandRegistry


def _keyword(
    declaration: CommandDeclaration, invocation: Invocation | str | None
) -> str:
    if invocation is None:
        return declaration.name
    if isinstance(invocation, str):
        return invocation
    return invocation.command


def usage_description(
    declaration: CommandDeclaration, invocation: Invocation | str | None = None
) -> str:
    """Render ``<keyword> [-<options>] [--named]... <param_text>``.

    The keyword is the alias the user typed when an invocation (or the
    alias itself) is given, otherwise the declaration's primary keyword.
    """
    usage = _keyword(declaration, invocation)
    if declaration.options:
        usage += f" [-{''.join(declaration.options)}]"
    if declaration.named_options:
        usage += " " + " ".join(f"[--{name}]" for name in declaration.named_options)
    if declaration.param_text:
        usage += f" {declaration.param_text}"
    return usage


def example_description(
    declaration: CommandDeclaration, invocation: Invocation | str | None = None
) -> str:
    return f"{_keyword(declaration, invocation)} {declaration.example or ''}"


def _chunks(items: list[str], size: int) -> list[list[str]]:
    size = max(size, 1)
    return [items[i : i + size] for i in range(0, len(items), size)]


class HelpModule:
    """Built-in ``help`` command.

    ``help`` lists the categories, ``help <category>`` the commands of a
    category and ``help <prefix><command>`` the details of one command.
    The dispatcher routes ``-h`` on any command here.
    """

    name = "Help"

    def __init__(self, registry: CommandRegistry, prefix: str = COMMAND_PREFIX) -> None:
        self.registry = registry
        self.prefix = prefix
        self.declaration = registry.register(
            CommandDeclaration(
                commands=("help",),
                on_command=self.did_receive_help_command,
                min_parameters=0,
                max_parameters=1,
                category=HelpCategory.UTILITY,
                description="Get help about a category or a command.",
                param_text="[category or command]",
                example=HelpCategory.UTILITY.value,
            )
        )

    async def did_receive_help_command(self, invocation: Invocation) -> None:
        message = invocation.message
        requested = invocation.parameter(0)
        if requested is None:
            await self._list_categories(invocation)
            return

        subject = requested.lower()
        keyword = subject[len(self.prefix):] if subject.startswith(self.prefix) else subject

        declaration = self.registry.find(keyword)
        if declaration is not None:
            await self._describe_command(invocation, declaration, keyword)
            return

        category = HelpCategory.lookup(subject)
        if category is not None:
            await self._list_category(invocation, category)
            return

        await message.reply("help.nocommand", {"command": requested})

    async def _list_categories(self, invocation: Invocation) -> None:
        categories = [c.value for c in self.registry.by_category()]
        await invocation.message.reply(
            "help.categories", {"categories": english_list(categories)}
        )
        await invocation.message.reply("help.howto", {"prefix": self.prefix})

    async def _list_category(
        self, invocation: Invocation, category: HelpCategory
    ) -> None:
        declarations = self.registry.by_category().get(category, [])
        names = [f"{self.prefix}{d.name}" for d in declarations]
        if not names:
            await invocation.message.reply(
                "help.nocommand", {"command": category.value}
            )
            return
        for chunk in _chunks(names, HELP_MAX_COMMANDS_PER_LINE):
            await invocation.message.reply(
                "help.categorycommands",
                {"category": category.value, "commands": ", ".join(chunk)},
            )

    async def _describe_command(
        self, invocation: Invocation, declaration: CommandDeclaration, keyword: str
    ) -> None:
        message = invocation.message
        usage = usage_description(declaration, keyword)
        await message.reply("help.commandtitle", {"usage": f"{self.prefix}{usage}"})
        if declaration.description:
            await message.reply(
                "help.commanddescription", {"description": declaration.description}
            )
        if declaration.example:
            await message.reply(
                "help.commandexample",
                {"example": f"{self.prefix}{keyword} {declaration.example}"},
            )
        if declaration.permission is not None:
            await message.reply(
                "help.commandpermission", {"permission": declaration.permission.value}
            )
        if declaration.aliases:
            await message.reply(
                "help.commandaliases",
                {
                    "aliases": english_list(
                        f"{self.prefix}{alias}" for alias in declaration.commands
                    )
                },
            )
