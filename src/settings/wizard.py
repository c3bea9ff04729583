from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from .config import Config, CustomUnitNames, Liveu, Rtmp, Twitch
from .loader import CONFIG_FILE_NAME, logger, save
from .validators import is_valid_cooldown, is_yes, is_yes_or_no, to_cooldown

if TYPE_CHECKING:
    from collections.abc import Callable

OAUTH_GENERATOR_URL = "https://twitchapps.com/tmi/"

NUMBER_ERROR = "Please enter a number: "
YES_OR_NO_ERROR = "Please enter y or n: "


class SettingsWizard:
    def __init__(self, console: Console, config_file: Path = Path(CONFIG_FILE_NAME)) -> None:
        self._console = console
        self._config_file = config_file
        self._logger = logger.getChild(self.__class__.__name__)

    def run(self) -> Config:
        self._logger.debug("Starting")

        config = Config(
            liveu=self._ask_liveu(),
            twitch=self._ask_twitch(),
            rtmp=self._ask_rtmp(),
            custom_port_names=self._ask_custom_port_names(),
        )

        path = save(config, self._config_file)

        self._console.clear()
        self._console.print(f"Saved settings to {self._config_file.name} in {path}", markup=False, highlight=False)
        self._logger.info("Settings saved to %s", path)

        return config

    def _ask(
        self,
        prompt: str,
        predicate: Callable[[str], bool] | None = None,
        error: str = "",
        *,
        password: bool = False,
    ) -> str:
        """Block until ``predicate`` accepts the answer. Rejected answers re-prompt with ``error``."""
        value = self._console.input(prompt, markup=False, password=password)

        while predicate is not None and not predicate(value):
            self._logger.debug("Rejected input for %r", prompt)
            value = self._console.input(error, markup=False, password=password)

        return value

    def _ask_with_default(self, prompt: str, default: str) -> str:
        return self._ask(prompt) or default

    def _ask_gate(self, prompt: str) -> bool:
        return is_yes(self._ask(prompt, is_yes_or_no, YES_OR_NO_ERROR))

    def _ask_liveu(self) -> Liveu:
        self._console.print("Please enter your Liveu details below")
        return Liveu(
            email=self._ask("Email: "),
            password=self._ask("Password: ", password=True),
        )

    def _ask_twitch(self) -> Twitch:
        self._console.print("\nPlease enter your Twitch details below")
        return Twitch(
            bot_username=self._ask("Bot username: "),
            bot_oauth=self._ask(f"(You can generate an Oauth here: {OAUTH_GENERATOR_URL})\nBot oauth: "),
            channel=self._ask("Channel name: "),
            command_cooldown=to_cooldown(
                self._ask("Command cooldown (seconds): ", is_valid_cooldown, NUMBER_ERROR),
            ),
        )

    def _ask_rtmp(self) -> Rtmp | None:
        if not self._ask_gate("\nAre you using nginx and would you like to display its bitrate as well (y/n): "):
            return None

        return Rtmp(
            url=self._ask("Please enter the stats page URL: "),
            application=self._ask("Application name: "),
            key=self._ask("Stream key: "),
        )

    def _ask_custom_port_names(self) -> CustomUnitNames | None:
        if not self._ask_gate("\nWould you like to use a custom name for each port? (y/n): "):
            return None

        self._console.print("Press enter to keep using the default value")

        defaults = CustomUnitNames()
        return CustomUnitNames(
            ethernet=self._ask_with_default("Ethernet: ", defaults.ethernet),
            wifi=self._ask_with_default("WiFi: ", defaults.wifi),
            usb1=self._ask_with_default("USB1: ", defaults.usb1),
            usb2=self._ask_with_default("USB2: ", defaults.usb2),
        )


def ask_for_settings(console: Console | None = None, config_file: Path | str = CONFIG_FILE_NAME) -> Config:
    """Ask the operator for every setting, save them to ``config_file`` and return the result."""
    return SettingsWizard(console or Console(), Path(config_file)).run()
