"""Tournament results extraction from a team's Results page.

The results table is read by fixed column position::

    1 date | 2 placement | 3 tier | 4 icon | 5 tournament | 6 score | 7 opponent | 8 prize

Whether a row was a win is not stated anywhere in the markup. It is inferred
from the score when both sides are numeric, then from the placement cell's
classes and label; anything else stays unknown (None) rather than a loss.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable

from bs4 import Tag

from liquipedia_api import ResultScore, ResultTeam, ResultTournament, TournamentResult
from liquipedia_api.config import DEFAULT_BASE_URL, GameRegistry
from liquipedia_api.dates import wiki_to_api
from liquipedia_api.document import Document, attr, classes, text
from liquipedia_api.fields import absolute_url

logger = logging.getLogger(__name__)

RESULTS_TABLE_SELECTOR = "table.wikitable.sortable"
# Own rows only; tables nested in cells are not results.
ROW_SELECTOR = ":scope > tr, :scope > tbody > tr, :scope > thead > tr"
FOOTER_ROW_CLASS = "sortbottom"

WIN_CLASSES = {"placement-win", "placement-1"}
LOSS_CLASSES = {"placement-lose"}
WIN_LABELS = {"W", "1ST"}
LOSS_LABELS = {"L"}
ORDINAL_RE = re.compile(r"^(\d+)(?:st|nd|rd|th)\b", re.IGNORECASE)


@dataclass
class WinSignals:
    """Everything the win rules may look at for one row."""

    left_score: str | None
    right_score: str | None
    placement: str = ""
    placement_classes: set[str] = field(default_factory=set)


def _as_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _score_rule(signals: WinSignals) -> bool | None:
    left, right = _as_int(signals.left_score), _as_int(signals.right_score)
    if left is None or right is None:
        return None
    return left > right


def _placement_win_rule(signals: WinSignals) -> bool | None:
    if signals.placement_classes & WIN_CLASSES:
        return True
    if signals.placement.upper() in WIN_LABELS:
        return True
    return None


def _placement_loss_rule(signals: WinSignals) -> bool | None:
    # Any placement below first counts as a loss. This is a heuristic: a 3rd
    # place in a round-robin group is not a lost match.
    if signals.placement_classes & LOSS_CLASSES:
        return False
    if signals.placement.upper() in LOSS_LABELS:
        return False
    ordinal = ORDINAL_RE.match(signals.placement)
    if ordinal and int(ordinal.group(1)) != 1:
        return False
    return None


# Evaluated top to bottom; the first rule returning a bool decides.
WIN_RULES: tuple[Callable[[WinSignals], bool | None], ...] = (
    _score_rule,
    _placement_win_rule,
    _placement_loss_rule,
)


def infer_win(signals: WinSignals) -> bool | None:
    for rule in WIN_RULES:
        verdict = rule(signals)
        if verdict is not None:
            return verdict
    return None


def split_score(raw: str | None) -> tuple[str | None, str | None]:
    """'2 : 1' -> ('2', '1'); no colon -> (None, None)."""
    if not raw or ":" not in raw:
        return None, None
    left, right = raw.split(":", 1)
    return left.strip(), right.strip()


def parse_prize(raw: str | None) -> float | None:
    """'$12,345' -> 12345.0; empty, '-' or digit-free text -> None."""
    value = (raw or "").strip()
    if not value or value == "-":
        return None
    digits = re.sub(r"[^\d.]", "", value)
    try:
        return float(digits)
    except ValueError:
        return None


def _is_data_row(row: Tag) -> bool:
    if row.find("th", recursive=False) is not None:
        return False
    if FOOTER_ROW_CLASS in classes(row):
        return False
    first = row.find("td", recursive=False)
    return first is not None and bool(text(first))


class ResultExtractor:
    def __init__(
        self,
        team: str,
        game: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        registry: GameRegistry | None = None,
    ) -> None:
        self.team = team
        self.game = game
        self.base_url = base_url
        self.registry = registry or GameRegistry()

    def extract(self, doc: Document) -> list[TournamentResult]:
        table = doc.select_one(RESULTS_TABLE_SELECTOR)
        if table is None:
            logger.debug("No results table for %s", self.team)
            return []

        rows = [row for row in doc.select(ROW_SELECTOR, table) if _is_data_row(row)]
        return [self._parse_row(row) for row in rows]

    def _parse_row(self, row: Tag) -> TournamentResult:
        cells = row.find_all("td", recursive=False)

        def cell(position: int) -> Tag | None:
            return cells[position - 1] if len(cells) >= position else None

        raw_date = text(cell(1))
        placement_cell = cell(2)
        placement_node = placement_cell.select_one('[class*="placement"]') if placement_cell else None
        placement = text(placement_node) or ""
        tier_link = cell(3).select_one("a") if cell(3) else None

        icon_cell, name_cell = cell(4), cell(5)
        tournament_icon = icon_cell.select_one("img") if icon_cell else None
        tournament_link = name_cell.select_one("a") if name_cell else None

        left_score, right_score = split_score(text(cell(6)))

        opponent_cell = cell(7)
        opponent_link = opponent_cell.select_one("a") if opponent_cell else None
        opponent_icon = opponent_cell.select_one("img") if opponent_cell else None

        signals = WinSignals(
            left_score=left_score,
            right_score=right_score,
            placement=placement,
            placement_classes=set(classes(placement_cell)) | set(classes(placement_node)),
        )

        return TournamentResult(
            date=wiki_to_api(raw_date) if raw_date else None,
            placement=placement,
            tier=text(tier_link) or "",
            tournament=ResultTournament(
                name=text(tournament_link) or text(name_cell) or None,
                game=self.registry.display_name(self.game),
                icon=absolute_url(self.base_url, attr(tournament_icon, "src")),
            ),
            score=ResultScore(
                team_left=ResultTeam(
                    name=self.team.replace("_", " "),
                    icon=None,
                    score=left_score,
                ),
                team_right=ResultTeam(
                    name=attr(opponent_link, "title") or text(opponent_link) or None,
                    icon=absolute_url(self.base_url, attr(opponent_icon, "src")),
                    score=right_score,
                ),
            ),
            prize=parse_prize(text(cell(8))),
            is_win=infer_win(signals),
        )


def parse_results_from_html(
    html: str | bytes,
    team: str,
    game: str | None = None,
    base_url: str = DEFAULT_BASE_URL,
) -> list[TournamentResult]:
    return ResultExtractor(team, game, base_url).extract(Document(html))
