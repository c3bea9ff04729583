MAX_COMMAND_COOLDOWN = 65535
OAUTH_PREFIX = "oauth:"


def _cooldown_digits(value: str) -> str | None:
    if not value.isascii() or not value.isdigit():
        return None

    digits = value.lstrip("0") or "0"
    if len(digits) > len(str(MAX_COMMAND_COOLDOWN)):
        return None

    return digits


def is_valid_cooldown(value: str) -> bool:
    digits = _cooldown_digits(value)
    return digits is not None and int(digits) <= MAX_COMMAND_COOLDOWN


def to_cooldown(value: str) -> int:
    """Convert an answer already accepted by ``is_valid_cooldown``."""
    return int(value.lstrip("0") or "0")


def is_yes_or_no(value: str) -> bool:
    return value.lower() in ("y", "n")


def is_yes(value: str) -> bool:
    return value.lower() == "y"


def strip_oauth_prefix(token: str) -> str:
    """Remove every leading ``oauth:`` as pasted from the token generator."""
    while token.startswith(OAUTH_PREFIX):
        token = token.removeprefix(OAUTH_PREFIX)
    return token
