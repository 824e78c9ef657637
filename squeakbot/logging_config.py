r"""
Root logging setup for the squeakbot console entry point.

Records from the project ``BotLogger`` propagate to the root handler
configured here, which renders them through colorlog.
"""

import logging
import os
import sys

import colorlog

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


class LoggerConfigurator:
    """Configures the root logger once at startup.

    Args:
        config: Optional mapping. ``quiet_loggers`` names loggers clamped to
            INFO even in debug mode (default ``asyncio``); ``project_loggers``
            names loggers whose own console handlers are dropped so their
            records are printed once, by the root handler (default
            ``squeakbot``).
    """

    def __init__(self, config=None):
        self.config = config or {}

    @staticmethod
    def resolve_level() -> int:
        """DEBUG when the DEBUG env var is 'true', '1' or 'yes', else INFO."""
        debug_env = os.environ.get("DEBUG", "").lower()
        return logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors=LEVEL_COLORS,
            secondary_log_colors={"message": {"ERROR": "red", "CRITICAL": "magenta"}},
            reset=True,
        )

    def configure(self):
        log_level = self.resolve_level()
        formatter = self.build_formatter()

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logging.basicConfig(level=log_level, handlers=[handler], format="%(message)s")

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        for h in root_logger.handlers:
            h.setFormatter(formatter)

        for name in self.config.get("quiet_loggers", ("asyncio",)):
            logging.getLogger(name).setLevel(logging.INFO)

        for name in self.config.get("project_loggers", ("squeakbot",)):
            logging.getLogger(name).handlers.clear()
