"""
All internet fetches & BeautifulSoup parsing live here.
Keeps engine.py pure – tests swap these two functions for fixtures.
"""
from __future__ import annotations

import logging

import cloudscraper
import requests
from bs4 import BeautifulSoup
from cloudscraper.exceptions import CloudflareException
from pydantic import ValidationError

from .constants import REQUEST_TIMEOUT, SEARCH_URL, USER_AGENT
from .errors import FetchError, PlayerNotFoundError
from .models import Account
from .player import Player, sanitize_tag

logger = logging.getLogger(__name__)


def _get(url: str) -> requests.Response:
    """One GET through a fresh cloudscraper session (polite Cloudflare wait)."""
    logger.debug("GET %s", url)
    with cloudscraper.create_scraper(browser={"custom": USER_AGENT}, delay=2) as scraper:
        try:
            return scraper.get(url, timeout=REQUEST_TIMEOUT)
        except (requests.RequestException, CloudflareException) as exc:
            logger.warning("Fetch failed for %s: %s", url, exc)
            raise FetchError(f"Fetch failed for {url}: {exc}") from exc


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def fetch_profile(player: Player) -> BeautifulSoup:
    """Career page for `player`, parsed. 404 means the account does not exist."""
    url = player.profile_url
    r = _get(url)
    if r.status_code == 404:
        logger.info("No career page at %s", url)
        raise PlayerNotFoundError()
    if r.status_code != 200:
        logger.warning("Career page HTTP %s at %s", r.status_code, url)
        raise FetchError(f"Career page HTTP {r.status_code} at {url}")
    return parse_document(r.text)


def search_accounts(tag: str) -> list[Account]:
    """
    Ask the account-by-name endpoint for every profile sharing `tag`.
    An empty list means there is no such player.
    """
    url = f"{SEARCH_URL}/{sanitize_tag(tag)}"
    r = _get(url)
    if r.status_code != 200:
        logger.warning("Search HTTP %s at %s", r.status_code, url)
        raise FetchError(f"Search HTTP {r.status_code} at {url}")

    try:
        data = r.json()
    except ValueError as exc:
        raise FetchError(f"Search returned invalid JSON at {url}") from exc
    if not isinstance(data, list):
        raise FetchError(f"Search returned {type(data).__name__}, expected a list")

    try:
        return [Account.model_validate(item) for item in data]
    except ValidationError as exc:
        raise FetchError(f"Search returned unexpected account data: {exc}") from exc
