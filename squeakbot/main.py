#!/usr/bin/env python3
"""
Console entry point: feeds raw IRC lines from stdin through the command core
"""

import asyncio
import logging
import sys

from .application import ApplicationContext
from .chat.console import ConsoleTransport
from .config import load_config
from .errors import ConfigError
from .logging_config import LoggerConfigurator
from .logs.logger import logger


async def read_lines(context: ApplicationContext, stream=None) -> None:
    """Dispatch every line of ``stream`` (stdin by default) until EOF."""
    stream = stream or sys.stdin
    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, stream.readline)
        if not line:
            break
        await context.bridge.handle_line(line.rstrip("\r\n"))


async def main() -> None:
    """Load configuration, wire the core to the console and process input.

    Raises:
        SystemExit: If the configuration cannot be loaded.
    """
    logger.log_event("app", "start")
    try:
        config = load_config()
    except ConfigError as e:
        logging.error(f"❌ {e}")
        sys.exit(1)
    context = ApplicationContext.create(config, ConsoleTransport(), nickname="squeakbot")
    try:
        await read_lines(context)
    finally:
        logger.log_event("app", "shutdown")


def run() -> None:
    """Synchronous entry point for the application."""
    LoggerConfigurator().configure()
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    run()
