"""Liquipedia client: fetches team pages and runs the extractors."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable

import requests

from liquipedia_api import Match, Player, TournamentResult
from liquipedia_api.config import Settings
from liquipedia_api.dates import filter_by_date
from liquipedia_api.document import Document
from liquipedia_api.matches import MatchExtractor
from liquipedia_api.results import ResultExtractor
from liquipedia_api.roster import RosterExtractor

logger = logging.getLogger(__name__)


class LiquipediaClient:
    """One team on one game's wiki.

    The ``get_*`` methods never raise for transport problems: a failed fetch
    is logged and yields an empty list.
    """

    def __init__(
        self,
        team: str,
        game: str,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.team = team
        self.game = game
        self.settings = settings or Settings()
        self.session = session or requests.Session()

    @property
    def team_url(self) -> str:
        return f"{self.settings.base_url}/{self.game}/{self.team}"

    def fetch_html(self, subpage: str = "") -> str:
        url = f"{self.team_url}/{subpage}" if subpage else self.team_url
        headers = {
            "User-Agent": self.settings.user_agent,
            "Accept-Encoding": "gzip",
        }
        response = self.session.get(url, headers=headers, timeout=self.settings.timeout)
        response.raise_for_status()
        return response.text

    def get_upcoming_matches(self, date: str | None = None) -> list[Match]:
        try:
            html = self.fetch_html()
        except requests.RequestException as e:
            logger.error("Failed to fetch matches for %s (%s): %s", self.team, self.game, e)
            return []
        return self._extract_matches(Document(html), date)

    def get_tournament_results(self, date: str | None = None) -> list[TournamentResult]:
        try:
            html = self.fetch_html("Results")
        except requests.RequestException as e:
            logger.error("Failed to fetch results for %s (%s): %s", self.team, self.game, e)
            return []

        extractor = ResultExtractor(
            self.team, self.game, self.settings.base_url, self.settings.registry
        )
        results = filter_by_date(extractor.extract(Document(html)), date, lambda r: r.date)
        logger.info("Found %d results for %s in %s", len(results), self.team, self.game)
        return results

    def get_players(self) -> list[Player]:
        try:
            html = self.fetch_html()
        except requests.RequestException as e:
            logger.error("Failed to fetch roster for %s (%s): %s", self.team, self.game, e)
            return []
        return self._extract_players(Document(html))

    def get_team_page(self, date: str | None = None) -> tuple[list[Match], list[Player]]:
        """Matches and roster from a single fetch of the team page."""
        try:
            html = self.fetch_html()
        except requests.RequestException as e:
            logger.error("Failed to fetch team page for %s (%s): %s", self.team, self.game, e)
            return [], []

        doc = Document(html)
        return self._extract_matches(doc, date), self._extract_players(doc)

    def _extract_matches(self, doc: Document, date: str | None) -> list[Match]:
        extractor = MatchExtractor(self.game, self.settings.base_url, self.settings.registry)
        matches = filter_by_date(extractor.extract(doc), date, lambda m: m.date_time)
        logger.info("Found %d upcoming matches for %s in %s", len(matches), self.team, self.game)
        return matches

    def _extract_players(self, doc: Document) -> list[Player]:
        players = RosterExtractor().extract(doc)
        logger.info("Found %d players for %s in %s", len(players), self.team, self.game)
        return players


def get_upcoming_matches_for_games(
    team: str,
    games: Iterable[str],
    date: str | None = None,
    settings: Settings | None = None,
    session: requests.Session | None = None,
) -> list[Match]:
    """Fetch every game's page concurrently and flatten the matches.

    Order follows completion, not ``games``.
    """
    settings = settings or Settings()
    games = list(games)
    if not games:
        return []

    clients = [LiquipediaClient(team, game, settings, session) for game in games]
    matches: list[Match] = []
    with ThreadPoolExecutor(max_workers=min(settings.max_workers, len(clients))) as executor:
        futures = [executor.submit(client.get_upcoming_matches, date) for client in clients]
        for future in as_completed(futures):
            matches.extend(future.result())

    return matches


def get_upcoming_matches_for_all_games(
    team: str,
    date: str | None = None,
    settings: Settings | None = None,
    session: requests.Session | None = None,
) -> list[Match]:
    settings = settings or Settings()
    return get_upcoming_matches_for_games(
        team, settings.registry.games, date, settings, session
    )
