"""
engine.py – response assembler

Glues scrape.py (network) and extract.py (parsing) into the records the
API returns. This is the only layer that turns an empty extraction into
NotFoundError / PlayerNotFoundError.
"""
from __future__ import annotations

import logging
from typing import Optional

from . import extract, scrape
from .constants import ALL_HEROES_ID
from .errors import NotFoundError, PlayerNotFoundError
from .models import (
    Account, Achievement, HeroBreakdown, Level, Modes, Profile, SearchResult, Stat,
)
from .player import Player
from .progression import calculate_stars

logger = logging.getLogger(__name__)


def match_account(player: Player, accounts: list[Account]) -> Account:
    """
    Pick the search candidate whose careerLink is exactly this player's.
    Falls back to the first candidate; an empty list means no such player.
    """
    if not accounts:
        raise PlayerNotFoundError()

    expected = player.career_link
    for account in accounts:
        if account.career_link == expected:
            logger.debug("Matched search candidate %s (level %d)", expected, account.level)
            return account

    logger.info(
        "No candidate with careerLink %s among %d results, using %s",
        expected, len(accounts), accounts[0].career_link,
    )
    return accounts[0]


def get_profile(player: Player) -> Profile:
    account = match_account(player, scrape.search_accounts(player.tag))
    soup = scrape.fetch_profile(player)

    header = extract.profile_header(soup)
    username = header.username
    if player.platform == "pc":
        # pc usernames are the BattleTag; show it with its '#'
        username = player.display_tag

    return Profile(
        username=username,
        avatar=header.avatar,
        level=Level(
            displayed=header.level,
            actual=account.level,
            stars=calculate_stars(account.level),
            portrait=header.portrait,
        ),
        modes=Modes(
            quickplay=extract.mode_summary(soup, "quickplay"),
            competitive=extract.mode_summary(soup, "competitive"),
        ),
        competitive=header.rank,
    )


def get_achievements(player: Player) -> list[Achievement]:
    found = extract.achievements(scrape.fetch_profile(player))
    if not found:
        raise NotFoundError()
    return found


def get_all_hero_stats(player: Player, mode: str) -> list[Stat]:
    soup = scrape.fetch_profile(player)
    stats = extract.category_stats(soup, mode.lower(), ALL_HEROES_ID)
    if not stats:
        raise NotFoundError()
    return stats


def get_hero_stats(player: Player, mode: str, hero: str) -> list[Stat]:
    soup = scrape.fetch_profile(player)
    hero_id = extract.build_selector_index(soup).hero_id(hero)
    if hero_id is None:
        logger.info("Hero %r not listed on %s", hero, player.profile_url)
        raise NotFoundError()

    stats = extract.category_stats(soup, mode.lower(), hero_id)
    if not stats:
        raise NotFoundError()
    return stats


def get_heroes_breakdown(
        player: Player,
        mode: str,
        stat: Optional[str] = None,
) -> dict[str, list[HeroBreakdown]]:
    """
    {stat name: [per-hero bar, ...]} for every comparison stat on the page,
    or only `stat` when given.
    """
    soup = scrape.fetch_profile(player)
    index = extract.build_selector_index(soup)

    if stat is None:
        wanted = dict(index.stat_ids)
    else:
        stat_id = index.stat_id(stat)
        wanted = {stat: stat_id} if stat_id is not None else {}

    breakdown = {}
    for name, stat_id in wanted.items():
        bars = extract.hero_comparison(soup, mode.lower(), stat_id)
        if bars:
            breakdown[name] = bars

    if not breakdown:
        raise NotFoundError()
    return breakdown


def parse_career_link(link: str) -> Optional[SearchResult]:
    # /career/pc/us/Name-1234  or  /career/psn/Name
    parts = link.strip("/").split("/")
    if len(parts) == 4:
        return SearchResult(platform=parts[1], region=parts[2], tag=parts[3])
    if len(parts) == 3:
        return SearchResult(platform=parts[1], tag=parts[2])
    return None


def search(tag: str) -> list[SearchResult]:
    results = []
    for account in scrape.search_accounts(tag):
        parsed = parse_career_link(account.career_link)
        if parsed is None:
            logger.warning("Skipping unrecognised careerLink %r", account.career_link)
            continue
        results.append(parsed)

    if not results:
        raise PlayerNotFoundError()
    return results
