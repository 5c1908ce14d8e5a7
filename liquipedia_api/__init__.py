"""Liquipedia API — shared data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TeamConfig:
    """Configuration for a team to export."""

    name: str
    slug: str
    games: list[str] = field(default_factory=list)


@dataclass
class Team:
    """One side of an upcoming match."""

    name: str | None = None
    tag: str | None = None
    icon: str | None = None

    def to_dict(self) -> dict:
        return {"name": self.name, "tag": self.tag, "icon": self.icon}


@dataclass
class Tournament:
    """Tournament a match belongs to."""

    name: str | None = None
    game: str | None = None
    link: str | None = None

    def to_dict(self) -> dict:
        return {"name": self.name, "game": self.game, "link": self.link}


@dataclass
class Match:
    """An upcoming match. Only built once ``date_time`` is known."""

    team_left: Team
    team_right: Team
    tournament: Tournament
    date_time: str | None = None
    format: str | None = None

    def to_dict(self) -> dict:
        return {
            "teamLeft": self.team_left.to_dict(),
            "teamRight": self.team_right.to_dict(),
            "tournament": self.tournament.to_dict(),
            "dateTime": self.date_time,
            "format": self.format,
        }


@dataclass
class Player:
    """A roster entry."""

    tag: str = "Unknown Player"
    name: str | None = None
    country: str | None = None
    position: str | None = None
    join_date: str | None = None

    def to_dict(self) -> dict:
        return {
            "tag": self.tag,
            "name": self.name,
            "country": self.country,
            "position": self.position,
            "joinDate": self.join_date,
        }


@dataclass
class ResultTournament:
    name: str | None = None
    game: str | None = None
    icon: str | None = None

    def to_dict(self) -> dict:
        return {"name": self.name, "game": self.game, "icon": self.icon}


@dataclass
class ResultTeam:
    name: str | None = None
    icon: str | None = None
    score: str | None = None

    def to_dict(self) -> dict:
        return {"name": self.name, "icon": self.icon, "score": self.score}


@dataclass
class ResultScore:
    team_left: ResultTeam
    team_right: ResultTeam

    def to_dict(self) -> dict:
        return {
            "teamLeft": self.team_left.to_dict(),
            "teamRight": self.team_right.to_dict(),
        }


@dataclass
class TournamentResult:
    """A row of a team's results table.

    ``is_win`` is None when neither the score nor the placement settles it.
    """

    date: str | None
    placement: str
    tier: str
    tournament: ResultTournament
    score: ResultScore
    prize: float | None = None
    is_win: bool | None = None

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "placement": self.placement,
            "tier": self.tier,
            "tournament": self.tournament.to_dict(),
            "score": self.score.to_dict(),
            "prize": self.prize,
            "isWin": self.is_win,
        }
