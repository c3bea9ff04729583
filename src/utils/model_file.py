import logging
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError


class ModelFileError(RuntimeError):
    pass


class ModelFileIOError(ModelFileError):
    pass


class ModelFileParseError(ModelFileError):
    pass


class ModelFileSerializationError(ModelFileError):
    pass


T = TypeVar("T", bound=BaseModel)


class ModelFile(Generic[T]):
    def __init__(self, model_type: type[T], file: Path, logger: logging.Logger, indent: int = 2) -> None:
        self.model_type = model_type
        self._file = file
        self._indent = indent
        self._logger = logger.getChild(self.__class__.__name__)

    def save(self, data: T) -> Path:
        self._logger.debug("Saving data to %s", self._file)

        try:
            text = data.model_dump_json(indent=self._indent, by_alias=True)
        except (ValueError, TypeError) as e:
            msg = f"Failed to serialize data for {self._file!s}"
            self._logger.exception(msg)
            raise ModelFileSerializationError(msg) from e

        try:
            with self._file.open("w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            msg = f"Failed to save data to {self._file!s}"
            self._logger.exception(msg)
            raise ModelFileIOError(msg) from e

        return self._file.absolute()

    def load(self) -> T:
        self._logger.debug("Loading data from %s", self._file)

        try:
            with self._file.open("r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Failed to read data from {self._file!s}"
            self._logger.debug(msg)
            raise ModelFileIOError(msg) from e

        try:
            model = self.model_type.model_validate_json(text)
        except ValidationError as e:
            msg = f"Failed to parse data from {self._file!s}"
            self._logger.exception(msg)
            raise ModelFileParseError(msg) from e

        self._logger.debug("Loaded data: %s", model)
        return model
