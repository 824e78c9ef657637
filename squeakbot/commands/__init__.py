"""Command declarations, registry, parsing and dispatch."""

from .declaration import (
    AllowedCommandDestination,
    CommandDeclaration,
    CommandHandler,
    HelpCategory,
)
from .dispatcher import CommandDispatcher, collapse_continuous_parameters
from .help import HelpModule, example_description, usage_description
from .invocation import Invocation
from .parse import parse_invocation
from .registry import CommandRegistry

__all__ = [
    "AllowedCommandDestination",
    "CommandDeclaration",
    "CommandDispatcher",
    "CommandHandler",
    "CommandRegistry",
    "HelpCategory",
    "HelpModule",
    "Invocation",
    "collapse_continuous_parameters",
    "example_description",
    "parse_invocation",
    "usage_description",
]
