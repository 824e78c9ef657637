"""
Configuration constants for the squeakbot command core

Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_str(name: str, default: str) -> str:
    """Retrieve a string value from an environment variable.

    Blank values are treated as unset.

    Args:
        name: The name of the environment variable to read.
        default: The value to return if the variable is unset or blank.

    Returns:
        The stripped environment value, or the default.
    """
    value = os.getenv(name)
    if value is not None and value.strip():
        return value.strip()
    return default


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, logs a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


# Command recognition
COMMAND_PREFIX = _get_env_str("COMMAND_PREFIX", "!")  # Prefix marking a command

# Moderation
MODERATION_CHANNEL = _get_env_str(
    "MODERATION_CHANNEL", "#doersofstuff"
)  # Receives dispatch blacklist warnings

# Localization
DEFAULT_LOCALE = _get_env_str("DEFAULT_LOCALE", "en")  # Fallback string table

# Configuration file location
CONFIG_FILE_ENV = "SQUEAKBOT_CONF_FILE"  # Env var naming the JSON config file
DEFAULT_CONFIG_FILE = _get_env_str(
    "SQUEAKBOT_DEFAULT_CONF_FILE", "squeakbot.conf"
)  # Used when CONFIG_FILE_ENV is unset

# Help output
HELP_MAX_COMMANDS_PER_LINE = _get_env_int(
    "HELP_MAX_COMMANDS_PER_LINE", 15
)  # Command names listed per help reply line
