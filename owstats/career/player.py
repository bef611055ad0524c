"""
Player identity: platform / region / tag, plus the URLs built from it.
"""
from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    BASE_URL, SEARCH_URL, PLATFORMS, REGIONS, MODES,
    ERROR_BAD_PLATFORM, ERROR_BAD_REGION, ERROR_BAD_MODE,
)
from .errors import InvalidParameterError


def sanitize_tag(tag: str) -> str:
    """BattleTags carry a '#', which the career site writes as '-'."""
    return tag.replace("#", "-", 1)


def desanitize_tag(tag: str) -> str:
    return tag.replace("-", "#", 1)


@dataclass(frozen=True)
class Player:
    platform: str
    region: str
    tag: str

    @classmethod
    def from_path(cls, platform: str, region: str, tag: str) -> "Player":
        return cls(platform.lower(), region.lower(), tag)

    @property
    def sanitized_tag(self) -> str:
        return sanitize_tag(self.tag)

    @property
    def display_tag(self) -> str:
        return desanitize_tag(self.sanitized_tag)

    @property
    def profile_url(self) -> str:
        # pc:      {BASE_URL}/pc/{region}/{tag}
        # psn/xbl: {BASE_URL}/{platform}/{tag}
        if self.platform == "pc":
            return f"{BASE_URL}/{self.platform}/{self.region}/{self.sanitized_tag}"
        return f"{BASE_URL}/{self.platform}/{self.sanitized_tag}"

    @property
    def search_url(self) -> str:
        return f"{SEARCH_URL}/{self.sanitized_tag}"

    @property
    def career_link(self) -> str:
        """Path the search endpoint reports for this exact account."""
        if self.platform == "pc":
            return f"/career/{self.platform}/{self.region}/{self.sanitized_tag}"
        return f"/career/{self.platform}/{self.sanitized_tag}"

    def validation_errors(self, mode: str | None = None) -> list[str]:
        errors = []
        if self.platform not in PLATFORMS:
            errors.append(ERROR_BAD_PLATFORM)
        if self.region not in REGIONS:
            errors.append(ERROR_BAD_REGION)
        if mode is not None and mode.lower() not in MODES:
            errors.append(ERROR_BAD_MODE)
        return errors

    def validate(self, mode: str | None = None) -> "Player":
        errors = self.validation_errors(mode)
        if errors:
            raise InvalidParameterError(errors)
        return self
