from utils.model_file import ModelFileError, ModelFileIOError, ModelFileParseError, ModelFileSerializationError

from .config import DEFAULT_COMMANDS, Config, CustomUnitNames, Liveu, Rtmp, Twitch
from .loader import CONFIG_FILE_NAME, load, logger, save
from .wizard import SettingsWizard, ask_for_settings

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_COMMANDS",
    "Config",
    "CustomUnitNames",
    "Liveu",
    "ModelFileError",
    "ModelFileIOError",
    "ModelFileParseError",
    "ModelFileSerializationError",
    "Rtmp",
    "SettingsWizard",
    "Twitch",
    "ask_for_settings",
    "load",
    "logger",
    "save",
]
