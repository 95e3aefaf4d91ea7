"""Send a few sample logs using the config file named by ASTRID_CONFIG_FILE."""

import asyncio
from pathlib import Path

from astrid_logger import Logger
from astrid_logger.config import settings
from astrid_logger.logging_setup import configure_logging


async def main():
    configure_logging()

    config_path = Path(settings.CONFIG_FILE)
    log = Logger.from_file(config_path) if config_path.is_file() else Logger()

    async with log:
        # Send a success message
        await log.success("Successfully fetched data")
        # Send an error message
        await log.error("Could not fetch api, status code: 500")
        # Send a named success message
        await log.success("This is a named message", title="Hello world")


if __name__ == "__main__":
    asyncio.run(main())
