"""
Records returned to API callers, plus the search endpoint's account shape.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Achievement(BaseModel):
    title: str
    description: str
    image_url: str
    # True when the card is greyed out ("m-disabled") on the career page
    finished: bool


class Stat(BaseModel):
    name: str
    value: str
    section_name: str


class HeroBreakdown(BaseModel):
    hero: str
    image: str
    value: str
    percentage: float


class ModeSummary(BaseModel):
    """Fields are left unset when the page has no matching cell."""
    won: Optional[int] = None
    lost: Optional[int] = None
    played: Optional[int] = None
    time: Optional[str] = None


class Modes(BaseModel):
    quickplay: ModeSummary = Field(default_factory=ModeSummary)
    competitive: ModeSummary = Field(default_factory=ModeSummary)


class Level(BaseModel):
    displayed: str
    actual: int
    stars: int
    portrait: str


class CompetitiveRank(BaseModel):
    rank: str
    rank_img: str


class Profile(BaseModel):
    username: str
    avatar: str
    level: Level
    modes: Modes
    competitive: Optional[CompetitiveRank] = None


class Account(BaseModel):
    """One candidate from the account-by-name search."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    career_link: str = Field("", alias="careerLink")
    platform_display_name: str = Field("", alias="platformDisplayName")
    level: int = 0
    portrait: str = ""


class SearchResult(BaseModel):
    platform: str
    region: Optional[str] = None
    tag: str
