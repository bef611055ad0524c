"""
Pure-math helpers (no network, no parsing).
"""
from .constants import TIER_BOUNDS, TIER_SIZE, STAR_CAP_LEVEL, MAX_STARS, LEVELS_PER_STAR


def calculate_stars(level: int) -> int:
    """
    Stars for a raw account level. Stars come every 100 levels and reset
    every 600:

        Bronze   (1-600):     101, 201, 301, 401, 501
        Silver   (601-1200):  701, 801, 901, 1001, 1101
        Gold     (1201-1800): 1301, 1401, 1501, 1601, 1701
        Platinum (1801-2400): 1901, 2001, 2101, 2201, 2301
        2400+:                always 5

    Exact tier multiples fall through to the base case, so 600 and 1200
    both give 6 stars.
    """
    if level > STAR_CAP_LEVEL:
        return MAX_STARS
    for bound in TIER_BOUNDS:
        if bound < level <= bound + TIER_SIZE:
            return calculate_stars(level - bound)
    return max(level, 0) // LEVELS_PER_STAR
