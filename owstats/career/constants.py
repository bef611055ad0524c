# Shared "magic numbers" so every module agrees
import os

BASE_URL = os.getenv("OWSTATS_BASE_URL", "https://playoverwatch.com/en-us/career").rstrip("/")
SEARCH_URL = os.getenv(
    "OWSTATS_SEARCH_URL", "https://playoverwatch.com/search/account-by-name"
).rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("OWSTATS_TIMEOUT", 20))
USER_AGENT = os.getenv(
    "OWSTATS_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/126.0.0.0 Safari/537.36",
)

PLATFORMS = frozenset({"pc", "psn", "xbl"})
REGIONS = frozenset({"us", "eu", "cn", "kr", "global"})
MODES = frozenset({"quickplay", "competitive"})

ERROR_NOT_FOUND = "HTTP 404. Not Found."
ERROR_PLAYER_NOT_FOUND = (
    "Could not find a user with that platform, region and username/BattleTag combination."
)
ERROR_BAD_PLATFORM = "Invalid platform supplied. Must be one of the following: [pc, psn, xbl]."
ERROR_BAD_REGION = "Invalid region supplied. Must be one of the following: [us, eu, cn, kr, global]."
ERROR_BAD_MODE = "Invalid mode. Must be one of the following: [quickplay, competitive]."

# Markup hooks on the career page
HERO_SELECT = "select[data-group-id='stats']"
STAT_SELECT = "select[data-group-id='comparisons']"
ALL_HEROES_ID = "0x02E00000FFFFFFFF"
GUID_PREFIX = "overwatch.guid"
DISABLED_CLASS = "m-disabled"
PROGRESS_ATTR = "data-overwatch-progress-percent"

SUMMARY_LABELS = {
    "won": "Games Won",
    "played": "Games Played",
    "time": "Time Played",
}

# Star tiers: 600 levels each, one star per 100 levels, capped past the last tier
TIER_SIZE = 600
TIER_BOUNDS = (1800, 1200, 600)
STAR_CAP_LEVEL = 2400
MAX_STARS = 5
LEVELS_PER_STAR = 100
