"""Process configuration and the game code registry."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_BASE_URL = "https://liquipedia.net"
USER_AGENT = "LiquipediaApiBot/1.0 (team schedule and results export)"

# Liquipedia wiki code -> display name.
GAME_NAMES: Mapping[str, str] = MappingProxyType({
    "valorant": "Valorant",
    "rocketleague": "Rocket League",
    "leagueoflegends": "League of Legends",
    "tft": "Teamfight Tactics",
    "counterstrike": "Counter-Strike",
    "overwatch": "Overwatch",
    "apexlegends": "Apex Legends",
    "callofduty": "Call of Duty",
    "rainbowsix": "Rainbow Six Siege",
})

# Games queried when a caller asks for "all games".
DEFAULT_GAMES: tuple[str, ...] = ("valorant", "leagueoflegends", "rocketleague", "tft")


@dataclass(frozen=True)
class GameRegistry:
    """Read-only lookup from wiki game code to a human-readable name."""

    names: Mapping[str, str] = field(default_factory=lambda: GAME_NAMES)
    games: tuple[str, ...] = DEFAULT_GAMES

    def display_name(self, code: str | None) -> str | None:
        if not code:
            return None
        return self.names.get(code, code)


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = USER_AGENT
    timeout: float = 30
    max_workers: int = 4
    registry: GameRegistry = field(default_factory=GameRegistry)

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from LIQUIPEDIA_* environment variables."""
        return cls(
            base_url=os.environ.get("LIQUIPEDIA_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            user_agent=os.environ.get("LIQUIPEDIA_USER_AGENT", USER_AGENT),
            timeout=float(os.environ.get("LIQUIPEDIA_TIMEOUT", "30")),
            max_workers=int(os.environ.get("LIQUIPEDIA_MAX_WORKERS", "4")),
        )
