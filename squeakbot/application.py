"""Central application context wiring the command core together."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .chat.bridge import NotificationBridge
from .chat.client import ChatClient
from .chat.protocols import ChatTransport
from .commands.dispatcher import CommandDispatcher
from .commands.help import HelpModule
from .commands.registry import CommandRegistry
from .config.model import BotConfig
from .localization import Localizer
from .logs.logger import logger
from .permissions import PermissionOracle

ModuleSetup = Callable[[CommandRegistry], object]


@dataclass
class ApplicationContext:
    """Holds the single registry instance and everything reading from it."""

    config: BotConfig
    registry: CommandRegistry
    client: ChatClient
    dispatcher: CommandDispatcher
    bridge: NotificationBridge
    help: HelpModule

    @classmethod
    def create(
        cls,
        config: BotConfig,
        transport: ChatTransport,
        *,
        modules: Iterable[ModuleSetup] = (),
        permission_oracle: PermissionOracle | None = None,
        nickname: str | None = None,
    ) -> ApplicationContext:
        """Build the context and run the startup registration phase.

        Each entry of ``modules`` is called with the registry so feature
        modules can register their commands. The registry is frozen once
        all modules ran.
        """
        registry = CommandRegistry()
        help_module = HelpModule(registry, prefix=config.command_prefix)
        for setup in modules:
            setup(registry)
        registry.freeze()
        logger.log_event("app", "modules_registered", count=len(registry))

        client = ChatClient(
            transport, Localizer(default_locale=config.locale), nickname=nickname
        )
        dispatcher = CommandDispatcher(
            registry,
            permission_oracle or config.build_permission_oracle(),
            prefix=config.command_prefix,
            blacklist=config.dispatch_blacklist,
            moderation_channel=config.moderation_channel,
        )
        bridge = NotificationBridge(dispatcher, client)
        return cls(
            config=config,
            registry=registry,
            client=client,
            dispatcher=dispatcher,
            bridge=bridge,
            help=help_module,
        )
