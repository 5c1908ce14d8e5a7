"""ICS calendar generation from upcoming matches."""

from __future__ import annotations

from datetime import datetime, timedelta

from icalendar import Alarm, Calendar, Event

from liquipedia_api import Match, TeamConfig


def create_team_calendar(team: TeamConfig, matches: list[Match]) -> Calendar:
    """Create an ICS calendar for a team's upcoming matches."""
    cal = Calendar()
    cal.add("prodid", f"-//{team.name} Match Calendar//liquipedia.net//")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", f"{team.name} Matches")
    # Refresh interval hint for calendar clients (4 hours)
    cal.add("x-published-ttl", "PT4H")

    for match in matches:
        if match.date_time:
            cal.add_component(_create_event(match))

    return cal


def _create_event(match: Match) -> Event:
    event = Event()
    start = datetime.fromisoformat(match.date_time.replace("Z", "+00:00"))

    summary = f"{match.team_left.tag} vs {match.team_right.tag}"
    if match.format:
        summary += f" ({match.format})"
    event.add("summary", summary)
    event.add("dtstart", start)
    event.add("dtend", start + timedelta(hours=2))

    tournament = match.tournament
    description = f"Tournament: {tournament.name}"
    if tournament.game:
        description += f"\nGame: {tournament.game}"
    if tournament.link:
        description += f"\n\nMore info: {tournament.link}"
        event.add("url", tournament.link)
    event.add("description", description)

    # Stable UID based on start time + both teams
    uid = (
        f"{int(start.timestamp())}-"
        f"{_slugify(match.team_left.name)}-{_slugify(match.team_right.name)}"
        f"@liquipedia.net"
    )
    event.add("uid", uid)

    alarm = Alarm()
    alarm.add("action", "DISPLAY")
    alarm.add("description", f"{summary} starts in 30 minutes!")
    alarm.add("trigger", timedelta(minutes=-30))
    event.add_component(alarm)
    event.add("status", "CONFIRMED")

    return event


def _slugify(name: str | None) -> str:
    return (name or "tbd").replace(" ", "-").replace("_", "-").lower()
