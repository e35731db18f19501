"""Map chat commands onto query adapters."""

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from chatquery import providers
from chatquery.config import Settings
from chatquery.exceptions import UnknownCommandError

logger = logging.getLogger(__name__)


class ProviderKind(str, Enum):
    BING = "bing"
    GOOGLE = "google"
    WEATHER = "weather"
    WOLFRAM = "wolfram"
    GITHUB = "github"
    YOUTUBE = "youtube"


ADAPTERS: Dict[ProviderKind, Callable[[str, Settings], str]] = {
    ProviderKind.BING: providers.bing,
    ProviderKind.GOOGLE: providers.google,
    ProviderKind.WEATHER: providers.weather,
    ProviderKind.WOLFRAM: providers.wolfram,
    ProviderKind.GITHUB: providers.github_stars,
    ProviderKind.YOUTUBE: providers.youtube,
}

COMMANDS: Dict[str, ProviderKind] = {
    "/bing": ProviderKind.BING,
    "/google": ProviderKind.GOOGLE,
    "/weather": ProviderKind.WEATHER,
    "/wolfram": ProviderKind.WOLFRAM,
    "/wa": ProviderKind.WOLFRAM,
    "/stars": ProviderKind.GITHUB,
}

HELP_TEXT = "Commands: " + ", ".join(
    f"{command} <query>" for command in COMMANDS
) + ". YouTube links are titled automatically."


def query(kind: ProviderKind, text: str, settings: Settings) -> str:
    """Run one adapter and return its formatted line."""
    adapter = ADAPTERS[ProviderKind(kind)]
    logger.info(f"Running {ProviderKind(kind).value} adapter", extra={"provider": ProviderKind(kind).value})
    return adapter(text, settings)


def parse_command(message: str) -> tuple[Optional[ProviderKind], str]:
    """
    Split a chat message into (provider, argument).

    Plain messages map to the YouTube adapter with the whole message as
    argument. ``/help`` maps to (None, "").

    Raises:
        UnknownCommandError: for a slash command with no adapter
    """
    msg = message.strip()
    if not msg.startswith("/"):
        return ProviderKind.YOUTUBE, msg

    parts = msg.split(maxsplit=1)
    cmd = parts[0].lower()
    args = parts[1] if len(parts) > 1 else ""
    if cmd == "/help":
        return None, ""
    if cmd not in COMMANDS:
        raise UnknownCommandError(cmd)
    return COMMANDS[cmd], args


def dispatch(message: str, settings: Settings) -> str:
    """Answer a chat message; an empty string means there is nothing to say."""
    kind, args = parse_command(message)
    if kind is None:
        return HELP_TEXT
    return query(kind, args, settings)
