"""Active roster extraction from a team page."""

from __future__ import annotations

import logging
import re
from typing import Callable

from bs4 import Tag

from liquipedia_api import Player
from liquipedia_api.dates import wiki_to_api
from liquipedia_api.document import Document, attr, classes, text

logger = logging.getLogger(__name__)

UNKNOWN_PLAYER = "Unknown Player"
HEADING_TAGS = ("h2", "h3", "h4")
ROSTER_CARD_SELECTOR = ".roster-card"

PARENTHESIZED_RE = re.compile(r"\(([^)]*)\)")
POSITION_LABEL_RE = re.compile(r"^\s*(?:Position|Role)\s*:\s*", re.IGNORECASE)
JOIN_DATE_LABEL_RE = re.compile(r"^\s*Join\s*Date\s*:\s*", re.IGNORECASE)
CITATION_RE = re.compile(r"[<\[].*$", re.DOTALL)


def _heading_by_id(doc: Document) -> Tag | None:
    return doc.select_one("#Active")


def _heading_by_class(doc: Document) -> Tag | None:
    for headline in doc.select(".mw-headline"):
        if text(headline) == "Active":
            return headline
    return None


# Tried in order; the wiki marks the heading differently across pages.
HEADING_STRATEGIES: tuple[Callable[[Document], Tag | None], ...] = (
    _heading_by_id,
    _heading_by_class,
)


def find_active_heading(doc: Document) -> Tag | None:
    for strategy in HEADING_STRATEGIES:
        heading = strategy(doc)
        if heading is not None:
            return heading
    return None


def _enclosing_section(node: Tag) -> Tag:
    """The heading block that owns ``node``: a ``.mw-heading`` wrapper or h2-h4."""
    section = node
    for candidate in (node, *node.parents):
        if "mw-heading" in classes(candidate):
            return candidate
        if candidate.name in HEADING_TAGS:
            section = candidate
    return section


def find_roster_scope(doc: Document) -> Tag | None:
    """Node holding the active players, or the first roster card as a fallback."""
    heading = find_active_heading(doc)
    if heading is not None:
        scope = _enclosing_section(heading).find_next_sibling()
        if scope is not None:
            return scope
        logger.debug("Active heading has no following section")

    fallback = doc.select_one(ROSTER_CARD_SELECTOR)
    if fallback is not None:
        logger.debug("No active roster heading, using first roster card")
    return fallback


def parse_position(raw: str | None) -> str | None:
    """'Position: Coach' -> 'Coach'; '(Substitute)' anywhere wins as a role override."""
    if not raw:
        return None
    override = PARENTHESIZED_RE.search(raw)
    if override:
        return override.group(1).strip() or None
    value = POSITION_LABEL_RE.sub("", raw)
    value = value.split("(", 1)[0].strip()
    return value or None


def parse_join_date(raw: str | None) -> str | None:
    """'Join Date: 2023-01-05[1]' -> '05-01-2023'. Unrecognised dates are kept raw."""
    if raw is None:
        return None
    value = JOIN_DATE_LABEL_RE.sub("", raw)
    value = CITATION_RE.sub("", value).strip()
    if not value:
        return None
    return wiki_to_api(value)


def _player_tag(row: Tag) -> str:
    for link in row.select("td.ID a"):
        tag = text(link)
        if tag:
            return tag
    return UNKNOWN_PLAYER


def _real_name(row: Tag) -> str | None:
    name = text(row.select_one("td.Name"))
    if not name:
        return None
    return name.strip("() ") or None


def _country(row: Tag) -> str | None:
    flag = row.select_one(".flag img[title]") or row.select_one("td.ID img[title]")
    return attr(flag, "title") or None


def parse_player_row(row: Tag) -> Player:
    return Player(
        tag=_player_tag(row),
        name=_real_name(row),
        country=_country(row),
        position=parse_position(text(row.select_one("td.Position"))),
        join_date=parse_join_date(text(row.select_one("td.Date"))),
    )


class RosterExtractor:
    def extract(self, doc: Document) -> list[Player]:
        scope = find_roster_scope(doc)
        if scope is None:
            return []
        return [parse_player_row(row) for row in doc.select("tr.Player", scope)]


def parse_players_from_html(html: str | bytes) -> list[Player]:
    return RosterExtractor().extract(Document(html))
