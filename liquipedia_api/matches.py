"""Upcoming match extraction from a team page's match infobox."""

from __future__ import annotations

import logging

from liquipedia_api import Match
from liquipedia_api.config import DEFAULT_BASE_URL, GameRegistry
from liquipedia_api.document import Document
from liquipedia_api.fields import (
    extract_format,
    extract_team,
    extract_timestamp,
    extract_tournament,
)

logger = logging.getLogger(__name__)

MATCH_TABLE_SELECTOR = (
    ".fo-nttax-infobox.panel "
    "table.wikitable.wikitable-striped.infobox_matches_content"
)


class MatchExtractor:
    def __init__(
        self,
        game: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        registry: GameRegistry | None = None,
    ) -> None:
        self.game = game
        self.base_url = base_url
        self.registry = registry or GameRegistry()

    def extract(self, doc: Document) -> list[Match]:
        """Build a Match per table that carries a start timestamp, in page order."""
        matches: list[Match] = []

        for table in doc.select(MATCH_TABLE_SELECTOR):
            date_time = extract_timestamp(table)
            if date_time is None:
                logger.debug("Skipping match table without a timestamp")
                continue

            matches.append(Match(
                team_left=extract_team(table, ".team-left", self.base_url),
                team_right=extract_team(table, ".team-right", self.base_url),
                tournament=extract_tournament(
                    table, self.base_url, self.game, self.registry
                ),
                date_time=date_time,
                format=extract_format(table),
            ))

        return matches


def parse_matches_from_html(
    html: str | bytes, game: str | None = None, base_url: str = DEFAULT_BASE_URL
) -> list[Match]:
    """Parse matches from raw HTML (used by tests)."""
    return MatchExtractor(game, base_url).extract(Document(html))
