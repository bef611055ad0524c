"""
Pytest configuration and shared fixtures.
Nothing here touches the network: scrape.fetch_profile / search_accounts
are replaced with the local HTML fixture and in-memory accounts.
"""
from pathlib import Path

import pytest

from owstats.career import scrape
from owstats.career.models import Account
from owstats.career.player import Player

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def profile_html() -> str:
    return (DATA_DIR / "profile.html").read_text(encoding="utf-8")


@pytest.fixture
def soup(profile_html):
    return scrape.parse_document(profile_html)


@pytest.fixture
def pc_player() -> Player:
    return Player.from_path("PC", "US", "CoolGuy-1234")


@pytest.fixture
def accounts() -> list[Account]:
    return [
        Account(careerLink="/career/psn/CoolGuy-1234", platformDisplayName="CoolGuy-1234", level=12),
        Account(careerLink="/career/pc/us/CoolGuy-1234", platformDisplayName="CoolGuy#1234", level=737),
    ]


@pytest.fixture
def offline(monkeypatch, soup, accounts):
    """Route every fetch to the fixture page; returns the list of fetched URLs."""
    fetched = []

    def fake_fetch(player):
        fetched.append(player.profile_url)
        return soup

    monkeypatch.setattr(scrape, "fetch_profile", fake_fetch)
    monkeypatch.setattr(scrape, "search_accounts", lambda tag: list(accounts))
    return fetched
