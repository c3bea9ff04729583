import logging
from pathlib import Path

from utils.model_file import ModelFile

from .config import Config

CONFIG_FILE_NAME = "config.json"

logger = logging.getLogger("Settings")


def load(path: Path | str) -> Config:
    """Read a persisted config.

    Raises:
        ModelFileIOError: the file is missing or unreadable.
        ModelFileParseError: the content is not a valid config document.

    """
    return ModelFile(Config, Path(path), logger).load()


def save(config: Config, file: Path | str = CONFIG_FILE_NAME) -> Path:
    """Write ``config`` to ``file``, replacing it, and return the absolute path."""
    return ModelFile(Config, Path(file), logger).save(config)
