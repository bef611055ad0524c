"""
Section extractors for a parsed career page.

Every function here is total: a missing container gives an empty result
(or an empty field), never an exception. Deciding that "empty" means
"not found" is engine.py's job.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from bs4 import BeautifulSoup, Tag

from .constants import (
    HERO_SELECT, STAT_SELECT, DISABLED_CLASS, PROGRESS_ATTR, SUMMARY_LABELS,
)
from .models import Achievement, CompetitiveRank, HeroBreakdown, ModeSummary, Stat
from .normalize import to_int, to_float, to_text, is_guid_name, pluralize_stat_name

_STYLE_URL = re.compile(r"url\(\s*['\"]?(.*?)['\"]?\s*\)")


# ── selector index ──────────────────────────────────────────────────
@dataclass(frozen=True)
class SelectorIndex:
    """
    hero_ids: lower-cased hero name → hero hex id
    stat_ids: stat name (as shown) → stat GUID
    The ids are what the page uses as data-category-id on the matching region.
    """
    hero_ids: Mapping[str, str]
    stat_ids: Mapping[str, str]

    def hero_id(self, name: str) -> Optional[str]:
        return self.hero_ids.get(name.lower())

    def stat_id(self, name: str) -> Optional[str]:
        return self.stat_ids.get(name)


def _select_options(soup: BeautifulSoup, selector: str) -> list[tuple[str, str]]:
    select = soup.select_one(selector)
    if select is None:
        return []
    pairs = []
    for option in select.find_all(recursive=False):
        name, value = option.get("option-id"), option.get("value")
        if name is None or value is None:
            continue
        pairs.append((name, value))
    return pairs


def build_selector_index(soup: BeautifulSoup) -> SelectorIndex:
    heroes = {name.lower(): value for name, value in _select_options(soup, HERO_SELECT)}
    stats = dict(_select_options(soup, STAT_SELECT))
    return SelectorIndex(MappingProxyType(heroes), MappingProxyType(stats))


# ── helpers ─────────────────────────────────────────────────────────
def _text(node: Optional[Tag]) -> str:
    return to_text(node.get_text()) if node is not None else ""


def _attr(node: Optional[Tag], name: str) -> str:
    if node is None:
        return ""
    return to_text(node.get(name))


def _mode_scope(soup: BeautifulSoup, mode: str) -> Optional[Tag]:
    return soup.find(id=mode)


# ── profile header ──────────────────────────────────────────────────
@dataclass(frozen=True)
class ProfileHeader:
    username: str
    avatar: str
    level: str
    portrait: str
    rank: Optional[CompetitiveRank]


def level_portrait(style: Optional[str]) -> str:
    """'background-image:url(https://…/border.png)' -> 'https://…/border.png'"""
    m = _STYLE_URL.search(style or "")
    return m.group(1) if m else ""


def profile_header(soup: BeautifulSoup) -> ProfileHeader:
    level = soup.select_one(".player-level")

    rank = None
    rank_block = soup.select_one(".competitive-rank")
    if rank_block is not None:
        rank = CompetitiveRank(
            rank=_text(rank_block.find("div")),
            rank_img=_attr(rank_block.find("img"), "src"),
        )

    return ProfileHeader(
        username=_text(soup.select_one(".header-masthead")),
        avatar=_attr(soup.select_one(".player-portrait"), "src"),
        level=_text(level),
        portrait=level_portrait(level.get("style") if level is not None else None),
        rank=rank,
    )


# ── achievements ────────────────────────────────────────────────────
def _achievement_description(card: Tag) -> str:
    # The card's data-tooltip names the id of a sibling node holding <p>description</p>
    tooltip = card.get("data-tooltip")
    if not tooltip or card.parent is None:
        return ""
    block = card.parent.find(id=tooltip, recursive=False)
    if block is None:
        return ""
    return _text(block.find("p", recursive=False))


def achievements(soup: BeautifulSoup) -> list[Achievement]:
    out = []
    for card in soup.select("#achievements-section .toggle-display .media-card"):
        out.append(Achievement(
            title=_text(card.select_one(":scope > .media-card-caption > .media-card-title")),
            description=_achievement_description(card),
            image_url=_attr(card.find("img", recursive=False), "src"),
            finished=DISABLED_CLASS in (card.get("class") or []),
        ))
    return out


# ── per-mode summary ────────────────────────────────────────────────
def _summary_cell(scope: Tag, label: str) -> Optional[str]:
    for cell in scope.find_all("td"):
        if label in cell.get_text():
            value = cell.find_next_sibling("td")
            text = _text(value)
            return text or None
    return None


def mode_summary(soup: BeautifulSoup, mode: str) -> ModeSummary:
    """Games won / played / time for one mode; missing cells stay unset."""
    scope = _mode_scope(soup, mode)
    if scope is None:
        return ModeSummary()

    raw = {key: _summary_cell(scope, label) for key, label in SUMMARY_LABELS.items()}
    summary = ModeSummary()
    if raw["won"] is not None:
        summary.won = to_int(raw["won"])
    if raw["played"] is not None:
        summary.played = to_int(raw["played"])
    if raw["time"] is not None:
        summary.time = raw["time"]
    if summary.won is not None and summary.played is not None:
        summary.lost = summary.played - summary.won
    return summary


# ── stat tables ─────────────────────────────────────────────────────
def _card_stats(card: Tag) -> list[Stat]:
    section_name = _text(card.select_one(".card-stat-block table thead .stat-title"))
    stats = []
    for row in card.select(".card-stat-block table tbody tr"):
        cells = row.find_all("td", recursive=False)
        if len(cells) < 2:
            continue
        name = _text(cells[0])
        if is_guid_name(name):
            continue
        stats.append(Stat(
            name=pluralize_stat_name(name),
            value=_text(cells[1]),
            section_name=section_name,
        ))
    return stats


def category_stats(soup: BeautifulSoup, mode: str, category_id: Optional[str]) -> list[Stat]:
    """
    All stat cards under the `.row` whose data-category-id is `category_id`.
    ALL_HEROES_ID gives the combined numbers, a hero id gives that hero's.
    """
    scope = _mode_scope(soup, mode)
    if scope is None or not category_id:
        return []

    for row in scope.select(".career-stats-section .row"):
        if row.get("data-category-id") != category_id:
            continue
        stats = []
        for card in row.find_all(recursive=False):
            stats.extend(_card_stats(card))
        return stats
    return []


# ── hero comparison bars ────────────────────────────────────────────
def _bar(bar: Tag) -> HeroBreakdown:
    return HeroBreakdown(
        hero=_text(bar.select_one(".bar-container .bar-text .title")),
        image=_attr(bar.find("img", recursive=False), "src"),
        value=_text(bar.select_one(".bar-container .bar-text .description")),
        percentage=to_float(bar.get(PROGRESS_ATTR)),
    )


def hero_comparison(soup: BeautifulSoup, mode: str, stat_id: Optional[str]) -> list[HeroBreakdown]:
    scope = _mode_scope(soup, mode)
    if scope is None or not stat_id:
        return []
    section = scope.select_one(".hero-comparison-section")
    if section is None:
        return []
    container = section.find(attrs={"data-category-id": stat_id})
    if container is None:
        return []
    return [_bar(bar) for bar in container.find_all(recursive=False)]
