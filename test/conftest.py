import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def config_document() -> dict[str, Any]:
    return {
        "liveu": {"email": "streamer@example.com", "password": "hunter2"},
        "twitch": {
            "botUsername": "lustats_bot",
            "botOauth": "abcdef123456",
            "channel": "streamer",
            "commands": ["!lustats", "!liveustats", "!lus"],
            "commandCooldown": 30,
        },
        "rtmp": {"url": "http://localhost/stat", "application": "publish", "key": "live"},
        "custom_port_names": {"ethernet": "LAN", "wifi": "WiFi", "usb1": "Modem A", "usb2": "USB2"},
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Any], Path]:
    def _write(content: Any) -> Path:  # noqa: ANN401
        file = tmp_path / "config.json"
        text = content if isinstance(content, str) else json.dumps(content)
        file.write_text(text, encoding="utf-8")
        return file

    return _write
