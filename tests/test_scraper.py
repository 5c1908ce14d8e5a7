"""Tests for the Liquipedia client and multi-game fan-out."""

from __future__ import annotations

from liquipedia_api.config import GameRegistry, Settings
from liquipedia_api.scraper import (
    LiquipediaClient,
    get_upcoming_matches_for_all_games,
    get_upcoming_matches_for_games,
)

BASE = "https://liquipedia.net"
TEAM_URL = f"{BASE}/valorant/Team_Liquid"


class TestLiquipediaClient:
    def test_team_url(self) -> None:
        client = LiquipediaClient("Team_Liquid", "valorant", session=object())
        assert client.team_url == TEAM_URL

    def test_upcoming_matches(self, make_session, team_page_html: str) -> None:
        session = make_session({TEAM_URL: team_page_html})
        client = LiquipediaClient("Team_Liquid", "valorant", session=session)

        matches = client.get_upcoming_matches()

        assert len(matches) == 2
        assert session.requested == [TEAM_URL]

    def test_upcoming_matches_date_filter(self, make_session, team_page_html: str) -> None:
        client = LiquipediaClient(
            "Team_Liquid", "valorant", session=make_session({TEAM_URL: team_page_html})
        )
        assert [m.date_time for m in client.get_upcoming_matches("01-02-2025")] == [
            "2025-02-01T22:00:00Z"
        ]
        assert client.get_upcoming_matches("02-02-2025") == []

    def test_results_come_from_results_subpage(self, make_session, results_page_html: str) -> None:
        session = make_session({f"{TEAM_URL}/Results": results_page_html})
        client = LiquipediaClient("Team_Liquid", "valorant", session=session)

        results = client.get_tournament_results("10-05-2023")

        assert session.requested == [f"{TEAM_URL}/Results"]
        assert len(results) == 1
        assert results[0].tournament.name == "Example Cup"

    def test_players(self, make_session, team_page_html: str) -> None:
        client = LiquipediaClient(
            "Team_Liquid", "valorant", session=make_session({TEAM_URL: team_page_html})
        )
        assert [p.tag for p in client.get_players()] == ["Keiko", "kamyk", "Emil"]

    def test_team_page_fetched_once(self, make_session, team_page_html: str) -> None:
        session = make_session({TEAM_URL: team_page_html})
        client = LiquipediaClient("Team_Liquid", "valorant", session=session)

        matches, players = client.get_team_page()

        assert len(matches) == 2
        assert [p.tag for p in players] == ["Keiko", "kamyk", "Emil"]
        assert session.requested == [TEAM_URL]

    def test_team_page_failure_returns_empty(self, make_session) -> None:
        client = LiquipediaClient("Team_Liquid", "valorant", session=make_session({TEAM_URL: 503}))
        assert client.get_team_page() == ([], [])

    def test_http_error_returns_empty(self, make_session) -> None:
        client = LiquipediaClient("Team_Liquid", "valorant", session=make_session({TEAM_URL: 404}))
        assert client.get_upcoming_matches() == []
        assert client.get_players() == []

    def test_connection_error_returns_empty(self, make_session) -> None:
        client = LiquipediaClient("Team_Liquid", "valorant", session=make_session({}))
        assert client.get_upcoming_matches() == []
        assert client.get_tournament_results() == []
        assert client.get_players() == []

    def test_custom_base_url(self, make_session, team_page_html: str) -> None:
        settings = Settings(base_url="http://mirror.local")
        session = make_session({"http://mirror.local/valorant/Team_Liquid": team_page_html})
        client = LiquipediaClient("Team_Liquid", "valorant", settings, session)

        matches = client.get_upcoming_matches()

        assert matches[0].team_left.icon == "http://mirror.local/commons/images/thumb/liquid.png"


class TestFanOut:
    def test_failed_game_keeps_other_results(self, make_session, team_page_html: str) -> None:
        session = make_session({
            TEAM_URL: team_page_html,
            f"{BASE}/leagueoflegends/Team_Liquid": 500,
        })

        matches = get_upcoming_matches_for_games(
            "Team_Liquid", ["valorant", "leagueoflegends", "tft"], session=session
        )

        assert len(matches) == 2
        assert sorted(session.requested) == sorted([
            TEAM_URL,
            f"{BASE}/leagueoflegends/Team_Liquid",
            f"{BASE}/tft/Team_Liquid",
        ])

    def test_merges_all_games(self, make_session, team_page_html: str) -> None:
        session = make_session({
            TEAM_URL: team_page_html,
            f"{BASE}/rocketleague/Team_Liquid": team_page_html,
        })

        matches = get_upcoming_matches_for_games(
            "Team_Liquid", ["valorant", "rocketleague"], "31-01-2025", session=session
        )

        assert sorted(m.tournament.game for m in matches) == ["Rocket League", "Valorant"]

    def test_no_games(self, make_session) -> None:
        assert get_upcoming_matches_for_games("Team_Liquid", [], session=make_session({})) == []

    def test_all_games_uses_registry(self, make_session) -> None:
        settings = Settings(registry=GameRegistry(games=("valorant", "overwatch")))
        session = make_session({})

        assert get_upcoming_matches_for_all_games("Team_Liquid", settings=settings, session=session) == []
        assert sorted(session.requested) == [
            f"{BASE}/overwatch/Team_Liquid",
            TEAM_URL,
        ]
