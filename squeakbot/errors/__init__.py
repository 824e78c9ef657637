"""Error hierarchy exports."""

from .commands import (
    CommandValidationError,
    IllegalNamedOptionError,
    IllegalShortOptionError,
    PermissionDeniedError,
    TooFewParametersError,
    TooManyParametersError,
    WrongDestinationError,
)
from .internal import ConfigError, DeclarationError, InternalError, RegistryFrozenError

__all__ = [
    "InternalError",
    "ConfigError",
    "DeclarationError",
    "RegistryFrozenError",
    "CommandValidationError",
    "IllegalNamedOptionError",
    "IllegalShortOptionError",
    "WrongDestinationError",
    "TooFewParametersError",
    "TooManyParametersError",
    "PermissionDeniedError",
]
