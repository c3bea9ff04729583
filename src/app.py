from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

import settings

logger = logging.getLogger("LiveuStatsBot")

if __debug__:
    logger.setLevel(logging.DEBUG)
    settings.logger.setLevel(logging.DEBUG)
else:
    logger.setLevel(logging.INFO)
    settings.logger.setLevel(logging.INFO)

config_file = Path(settings.CONFIG_FILE_NAME)


def load_or_ask_for_settings(console: Console, file: Path) -> settings.Config:
    try:
        config = settings.load(file)
    except settings.ModelFileIOError:
        logger.info("No readable settings at %s, starting setup", file)
        return settings.ask_for_settings(console, file)
    except settings.ModelFileParseError:
        logger.exception("Settings file %s is invalid. Fix or delete it and restart.", file.absolute())
        raise

    logger.info("Settings loaded from %s", file.absolute())
    return config


if __name__ == "__main__":
    console = Console()

    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        log_time_format="%H:%M:%S",
        show_path=__debug__,
        enable_link_path=__debug__,
    )
    handler.setFormatter(logging.Formatter("%(name)-22s - %(message)s"))

    logger.addHandler(handler)
    settings.logger.addHandler(handler)

    config = load_or_ask_for_settings(console, config_file)
    logger.debug("Using %s", config)
