"""
Extractors against the local career page fixture (tests/data/profile.html)
and a few hand-built fragments for the missing-markup cases.
"""
from owstats.career import extract
from owstats.career.constants import ALL_HEROES_ID
from owstats.career.models import Achievement, HeroBreakdown, Stat
from owstats.career.scrape import parse_document

EMPTY = parse_document("<html><body><p>Maintenance</p></body></html>")


class TestSelectorIndex:

    def test_hero_lookup_is_case_insensitive(self, soup):
        index = extract.build_selector_index(soup)
        assert index.hero_id("Genji") == index.hero_id("genji") == "0x02E0000000000029"
        assert index.hero_id("ALL HEROES") == ALL_HEROES_ID

    def test_stat_names_keep_case(self, soup):
        index = extract.build_selector_index(soup)
        assert index.stat_id("Time Played") == "overwatch.guid.0x0860000000000021"
        assert index.stat_id("time played") is None
        assert list(index.stat_ids) == ["Time Played", "Games Won", "Weapon Accuracy"]

    def test_missing_selects_give_empty_index(self):
        index = extract.build_selector_index(EMPTY)
        assert dict(index.hero_ids) == {}
        assert dict(index.stat_ids) == {}
        assert index.hero_id("genji") is None


class TestProfileHeader:

    def test_header_fields(self, soup):
        header = extract.profile_header(soup)
        assert header.username == "CoolGuy"
        assert header.avatar == "https://cdn.example.com/portrait/0x0250000000000EF8.png"
        assert header.level == "37"
        assert header.portrait == "https://cdn.example.com/borders/0x0250000000000974_Border.png"
        assert header.rank.rank == "3,104"
        assert header.rank.rank_img == "https://cdn.example.com/rank-icons/rank-DiamondTier.png"

    def test_header_on_empty_page(self):
        header = extract.profile_header(EMPTY)
        assert (header.username, header.avatar, header.level, header.portrait) == ("", "", "", "")
        assert header.rank is None

    def test_level_portrait_accepts_quoted_url(self):
        style = "background-image: url('https://cdn.example.com/b.png')"
        assert extract.level_portrait(style) == "https://cdn.example.com/b.png"
        assert extract.level_portrait(None) == ""


class TestAchievements:

    def test_cards(self, soup):
        found = extract.achievements(soup)
        assert found == [
            Achievement(
                title="Centenary",
                description="Reach level 100.",
                image_url="https://cdn.example.com/achievements/centenary.png",
                finished=False,
            ),
            Achievement(
                title="Decorated",
                description="",
                image_url="https://cdn.example.com/achievements/decorated.png",
                finished=True,
            ),
        ]

    def test_no_section(self):
        assert extract.achievements(EMPTY) == []


class TestModeSummary:

    def test_quickplay(self, soup):
        summary = extract.mode_summary(soup, "quickplay")
        assert summary.won == 1120
        assert summary.played == 2000
        assert summary.lost == 880
        assert summary.time == "40 hours"

    def test_competitive(self, soup):
        summary = extract.mode_summary(soup, "competitive")
        assert (summary.won, summary.played, summary.lost) == (10, 25, 15)

    def test_lost_needs_both_won_and_played(self):
        page = parse_document(
            '<div id="competitive"><table><tr><td>Games Played</td><td>12</td></tr>'
            '<tr><td>Time Played</td><td>3 hours</td></tr></table></div>'
        )
        summary = extract.mode_summary(page, "competitive")
        assert summary.played == 12
        assert summary.won is None
        assert summary.lost is None
        assert summary.model_dump(exclude_none=True) == {"played": 12, "time": "3 hours"}

    def test_empty_value_cell_counts_as_missing(self):
        page = parse_document('<div id="quickplay"><table><tr><td>Games Won</td><td> </td></tr></table></div>')
        assert extract.mode_summary(page, "quickplay").won is None

    def test_missing_mode(self):
        assert extract.mode_summary(EMPTY, "quickplay").model_dump(exclude_none=True) == {}


class TestCategoryStats:

    def test_all_heroes(self, soup):
        stats = extract.category_stats(soup, "quickplay", ALL_HEROES_ID)
        assert stats[:2] == [
            Stat(name="Elimination(s)", value="1,234", section_name="Combat"),
            Stat(name="Final Blow", value="567", section_name="Combat"),
        ]
        assert [s.section_name for s in stats] == ["Combat"] * 2 + ["Game"] * 3

    def test_guid_named_stats_are_dropped(self, soup):
        for mode in ("quickplay", "competitive"):
            stats = extract.category_stats(soup, mode, ALL_HEROES_ID)
            assert not any(s.name.startswith("overwatch.guid") for s in stats)

    def test_single_hero(self, soup):
        hero_id = extract.build_selector_index(soup).hero_id("GENJI")
        stats = extract.category_stats(soup, "quickplay", hero_id)
        assert stats == [
            Stat(name="Dragonblade Kill(s)", value="88", section_name="Hero Specific"),
            Stat(name="Damage Reflected", value="4,000", section_name="Hero Specific"),
        ]

    def test_hero_without_stats_in_mode(self, soup):
        hero_id = extract.build_selector_index(soup).hero_id("reaper")
        assert extract.category_stats(soup, "quickplay", hero_id) == []

    def test_unknown_category_or_mode(self, soup):
        assert extract.category_stats(soup, "quickplay", None) == []
        assert extract.category_stats(soup, "quickplay", "0xDEADBEEF") == []
        assert extract.category_stats(EMPTY, "competitive", ALL_HEROES_ID) == []


class TestHeroComparison:

    def test_bars(self, soup):
        stat_id = extract.build_selector_index(soup).stat_id("Time Played")
        bars = extract.hero_comparison(soup, "quickplay", stat_id)
        assert bars == [
            HeroBreakdown(hero="Genji", image="https://cdn.example.com/heroes/genji.png",
                          value="12 hours", percentage=1.0),
            HeroBreakdown(hero="Reaper", image="https://cdn.example.com/heroes/reaper.png",
                          value="6 hours", percentage=0.5),
        ]

    def test_stat_without_bars(self, soup):
        stat_id = extract.build_selector_index(soup).stat_id("Weapon Accuracy")
        assert extract.hero_comparison(soup, "quickplay", stat_id) == []

    def test_mode_without_comparison_section(self, soup):
        stat_id = extract.build_selector_index(soup).stat_id("Time Played")
        assert extract.hero_comparison(soup, "competitive", stat_id) == []
        assert extract.hero_comparison(EMPTY, "quickplay", stat_id) == []
