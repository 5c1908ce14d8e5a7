"""Single-value extractors shared by the match, roster and result parsers.

Every function here is total: a missing node or attribute resolves to the
documented default instead of raising.
"""

from __future__ import annotations

from bs4 import Tag

from liquipedia_api import Team, Tournament
from liquipedia_api.config import GameRegistry
from liquipedia_api.dates import timestamp_to_iso
from liquipedia_api.document import attr, text

UNKNOWN_TEAM = "Unknown Team"
UNKNOWN_TAG = "UNK"
UNKNOWN_TOURNAMENT = "Unknown Tournament"


def absolute_url(base_url: str, path: str | None) -> str | None:
    if not path:
        return None
    if path.startswith(("http://", "https://")):
        return path
    return f"{base_url}{path}"


def extract_team(scope: Tag, side: str, base_url: str) -> Team:
    """Team on one side (``.team-left`` / ``.team-right``) of a match table."""
    icon = scope.select_one(f"{side} .team-template-image-icon img")
    link = scope.select_one(f"{side} .team-template-text a")

    name = attr(icon, "title") or attr(icon, "alt") or UNKNOWN_TEAM
    tag = text(link) or UNKNOWN_TAG

    return Team(
        name=name,
        tag=tag,
        icon=absolute_url(base_url, attr(icon, "src")) if icon else None,
    )


def extract_tournament(
    scope: Tag, base_url: str, game: str | None, registry: GameRegistry
) -> Tournament:
    link = scope.select_one(".tournament-text-flex a")
    return Tournament(
        name=text(link) or UNKNOWN_TOURNAMENT,
        game=registry.display_name(game),
        link=absolute_url(base_url, attr(link, "href")),
    )


def extract_timestamp(scope: Tag) -> str | None:
    """ISO-8601 start time from the timer's epoch-seconds attribute."""
    raw = attr(scope.select_one(".timer-object"), "data-timestamp")
    if not raw:
        return None
    try:
        return timestamp_to_iso(int(float(raw.strip())))
    except (ValueError, OverflowError, OSError):
        return None


def extract_format(scope: Tag) -> str | None:
    label = text(scope.select_one(".versus-lower abbr"))
    return label.upper() if label else None
