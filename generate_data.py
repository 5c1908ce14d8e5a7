#!/usr/bin/env python3
"""
Liquipedia API — Data Generator

Fetches upcoming matches, tournament results and active rosters from
Liquipedia for the teams in teams.json and writes one JSON file per team
(plus an ICS calendar of upcoming matches) to public/data/.

Usage:
    python generate_data.py                      # All teams, all data
    python generate_data.py --date 10-05-2023    # Only matches/results on that day
    python generate_data.py --teams teams.json --out public/data
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

import requests

from liquipedia_api import Match, TeamConfig
from liquipedia_api.calendar_gen import create_team_calendar
from liquipedia_api.config import Settings
from liquipedia_api.scraper import LiquipediaClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

REQUEST_DELAY = 2  # seconds between requests (be respectful to Liquipedia)


def load_teams(path: str = "teams.json") -> list[TeamConfig]:
    """Load team configurations from JSON file."""
    with open(path) as f:
        data = json.load(f)
    return [TeamConfig(**t) for t in data["teams"]]


def collect_team_data(
    team: TeamConfig,
    settings: Settings,
    date: str | None,
    session: requests.Session | None = None,
    delay: float = REQUEST_DELAY,
) -> tuple[dict, list[Match]]:
    """Run every extractor for one team across its games.

    Each game costs two requests: the team page (matches and roster) and its
    Results sub-page, with ``delay`` seconds before every request but the first.
    """
    games = team.games or list(settings.registry.games)
    session = session or requests.Session()

    matches: list[Match] = []
    results: dict[str, list[dict]] = {}
    players: dict[str, list[dict]] = {}
    for i, game in enumerate(games):
        client = LiquipediaClient(team.slug, game, settings, session)
        if i > 0:
            time.sleep(delay)
        game_matches, game_players = client.get_team_page(date)
        time.sleep(delay)
        game_results = client.get_tournament_results(date)

        matches.extend(game_matches)
        results[game] = [r.to_dict() for r in game_results]
        players[game] = [p.to_dict() for p in game_players]

    return {
        "team": {"name": team.name, "slug": team.slug, "games": games},
        "matches": [m.to_dict() for m in matches],
        "results": results,
        "players": players,
    }, matches


def main() -> int:
    parser = argparse.ArgumentParser(description="Export Liquipedia team data")
    parser.add_argument("--teams", default="teams.json", help="Team list JSON file")
    parser.add_argument("--out", default="public/data", help="Output directory")
    parser.add_argument("--date", default=None, help="Only keep records on DD-MM-YYYY")
    args = parser.parse_args()

    settings = Settings.from_env()
    teams = load_teams(args.teams)
    output_dir = Path(args.out)
    output_dir.mkdir(parents=True, exist_ok=True)

    generated_utc = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    manifest: list[dict] = []
    errors: list[str] = []

    for i, team in enumerate(teams):
        print(f"\nFetching {team.name} from Liquipedia...")
        if i > 0:
            time.sleep(REQUEST_DELAY)

        team_data, matches = collect_team_data(team, settings, args.date)
        team_data["generated_utc"] = generated_utc

        result_count = sum(len(r) for r in team_data["results"].values())
        player_count = sum(len(p) for p in team_data["players"].values())
        print(f"  Found {len(matches)} upcoming matches, {result_count} results, {player_count} players")

        if not matches and not result_count and not player_count:
            error_msg = f"No data for {team.name} (fetch failed or page structure changed)"
            print(f"  Warning: {error_msg}")
            errors.append(error_msg)
            continue

        try:
            key = team.slug.lower()
            json_path = output_dir / f"{key}.json"
            json_path.write_text(json.dumps(team_data, indent=2, ensure_ascii=False), encoding="utf-8")
            print(f"  Saved {json_path}")

            ics_path = output_dir / f"{key}.ics"
            ics_path.write_bytes(create_team_calendar(team, matches).to_ical())
            print(f"  Saved {ics_path}")
        except OSError as e:
            error_msg = f"Failed to write {team.name}: {e}"
            logger.error(error_msg)
            errors.append(error_msg)
            continue

        manifest.append(team_data["team"])

    manifest_path = output_dir / "teams.json"
    manifest_path.write_text(
        json.dumps({"teams": manifest, "generated_utc": generated_utc}, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    print(f"\nSaved {manifest_path} ({len(manifest)} teams)")

    if errors:
        print(f"\nErrors encountered: {len(errors)}")
        for err in errors:
            print(f"  - {err}")
        return 1

    print("\nDone — all data generated successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
