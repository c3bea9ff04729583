from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .validators import MAX_COMMAND_COOLDOWN, strip_oauth_prefix

# 認証情報はログに出さないよう`Field(repr=False)`で表示を抑制している。

DEFAULT_COMMANDS = ("!lustats", "!liveustats", "!lus")


class BaseSetting(BaseModel, frozen=True, strict=True):
    pass


class Liveu(BaseSetting):
    email: str
    password: str = Field(repr=False)


class Twitch(BaseSetting):
    # 既存の config.json との互換性のため、twitch ブロックだけ camelCase で保存する。
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    bot_username: str
    bot_oauth: str = Field(repr=False)
    channel: str
    commands: tuple[str, ...] = DEFAULT_COMMANDS
    command_cooldown: int = Field(ge=0, le=MAX_COMMAND_COOLDOWN)

    @field_validator("bot_oauth")
    @classmethod
    def _strip_oauth_prefix(cls, value: str) -> str:
        return strip_oauth_prefix(value)


class Rtmp(BaseSetting):
    url: str
    application: str
    key: str = Field(repr=False)


class CustomUnitNames(BaseSetting):
    ethernet: str = "ETH"
    wifi: str = "WiFi"
    usb1: str = "USB1"
    usb2: str = "USB2"


class Config(BaseSetting):
    liveu: Liveu
    twitch: Twitch
    rtmp: Rtmp | None = None
    custom_port_names: CustomUnitNames | None = None
