"""
Unit tests for the ADP catalog: tiering, CSV loading, availability and lookup.

Loader tests write throwaway CSV files under pytest's tmp_path.
"""
import logging

import pytest

from app.config import DraftHeuristics
from app.services.adp_catalog import (
    BACKEND_DIR,
    build_catalog_player,
    calculate_tier,
    get_available_players,
    load_adp_catalog,
    resolve_adp_path,
    search_catalog,
)
from conftest import make_player, write_adp_csv


# ===========================================================================
# TestCalculateTier
# ===========================================================================

class TestCalculateTier:
    """Tier breakpoints are inclusive at 12, 36, 72 and 120."""

    @pytest.mark.parametrize("rank,expected", [
        (1, 1), (12, 1),
        (13, 2), (36, 2),
        (37, 3), (72, 3),
        (73, 4), (120, 4),
        (121, 5), (400, 5),
    ])
    def test_boundaries(self, rank, expected):
        assert calculate_tier(rank) == expected

    def test_fractional_rank_just_past_breakpoint(self):
        assert calculate_tier(12.1) == 2

    def test_custom_breakpoints(self):
        heuristics = DraftHeuristics(tier_breakpoints=[10, 20, 30, 40])
        assert calculate_tier(10, heuristics) == 1
        assert calculate_tier(11, heuristics) == 2
        assert calculate_tier(41, heuristics) == 5


# ===========================================================================
# TestBuildCatalogPlayer
# ===========================================================================

class TestBuildCatalogPlayer:

    def test_valid_row(self):
        player = build_catalog_player(["Josh Allen", "BUF", "7", "QB", "22", "26.3"])
        assert player.name == "Josh Allen"
        assert player.team == "BUF"
        assert player.position == "QB"
        assert player.adp_rank == 26.3
        assert player.bye_week == 7
        assert player.tier == 2

    def test_ignored_column_does_not_affect_rank(self):
        player = build_catalog_player(["Josh Allen", "BUF", "7", "QB", "not a number", "26.3"])
        assert player.adp_rank == 26.3

    def test_missing_name_skipped(self):
        assert build_catalog_player(["", "BUF", "7", "QB", "22", "26.3"]) is None

    def test_unparseable_rank_skipped(self):
        assert build_catalog_player(["Josh Allen", "BUF", "7", "QB", "22", "n/a"]) is None

    def test_missing_rank_skipped(self):
        assert build_catalog_player(["Josh Allen", "BUF", "7", "QB", "22", None]) is None

    def test_invalid_position_skipped(self):
        assert build_catalog_player(["Some Linebacker", "BUF", "7", "LB", "22", "99"]) is None

    def test_short_row_skipped(self):
        assert build_catalog_player(["Josh Allen", "BUF", "7", "QB"]) is None

    def test_bad_bye_week_becomes_none(self):
        player = build_catalog_player(["Josh Allen", "BUF", "", "QB", "22", "26.3"])
        assert player.bye_week is None

        player = build_catalog_player(["Josh Allen", "BUF", "0", "QB", "22", "26.3"])
        assert player.bye_week is None

    @pytest.mark.parametrize("bye", ["7.5", "inf", "19"])
    def test_fractional_or_out_of_range_bye_becomes_none(self, bye):
        player = build_catalog_player(["Josh Allen", "BUF", bye, "QB", "22", "26.3"])
        assert player.bye_week is None

    def test_whole_number_float_bye_accepted(self):
        player = build_catalog_player(["Josh Allen", "BUF", "7.0", "QB", "22", "26.3"])
        assert player.bye_week == 7

    def test_position_is_uppercased(self):
        player = build_catalog_player(["Josh Allen", "BUF", "7", "qb", "22", "26.3"])
        assert player.position == "QB"


# ===========================================================================
# TestLoadAdpCatalog
# ===========================================================================

class TestLoadAdpCatalog:

    def test_loads_and_sorts_by_rank(self, adp_csv):
        catalog = load_adp_catalog(adp_csv)

        assert [p.name for p in catalog] == [
            "Ja'Marr Chase", "Brock Bowers", "Josh Allen", "Denver Broncos",
        ]
        assert [p.tier for p in catalog] == [1, 2, 2, 5]

    def test_bad_rows_are_skipped(self, tmp_path):
        path = tmp_path / "adp.csv"
        write_adp_csv(path, [
            '"Josh Allen","BUF","7","QB","22","26.3"',
            '"","BUF","7","QB","22","30"',
            '"No Rank","BUF","7","QB","22",""',
            '"Bad Rank","BUF","7","QB","22","abc"',
            '"Punter","BUF","7","P","22","200"',
            '"Bye Missing","KC","","TE","22","40"',
        ])

        catalog = load_adp_catalog(path)

        assert [p.name for p in catalog] == ["Josh Allen", "Bye Missing"]
        assert catalog[1].bye_week is None

    def test_extra_field_row_is_truncated_not_fatal(self, tmp_path):
        path = tmp_path / "adp.csv"
        write_adp_csv(path, [
            '"Josh Allen","BUF","7","QB","22","26.3"',
            '"Bijan Robinson","ATL","5","RB","2","2.1",""',
            '"Brock Bowers","LV","8","TE","20","19.5"',
        ])

        catalog = load_adp_catalog(path)

        assert [p.name for p in catalog] == ["Bijan Robinson", "Brock Bowers", "Josh Allen"]
        assert catalog[0].adp_rank == 2.1

    def test_unquoted_comma_in_name_only_loses_that_row(self, tmp_path):
        path = tmp_path / "adp.csv"
        write_adp_csv(path, [
            '"Josh Allen","BUF","7","QB","22","26.3"',
            'Marvin Harrison, Jr.,ARI,8,WR,24,22.0',
            '"Brock Bowers","LV","8","TE","20","19.5"',
        ])

        catalog = load_adp_catalog(path)

        assert [p.name for p in catalog] == ["Brock Bowers", "Josh Allen"]

    def test_missing_file_returns_empty_and_warns(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="app.services.adp_catalog"):
            catalog = load_adp_catalog(tmp_path / "does_not_exist.csv")

        assert catalog == []
        assert "Could not load ADP data" in caplog.text

    def test_empty_file_returns_empty(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        assert load_adp_catalog(path) == []

    def test_header_only_returns_empty(self, tmp_path):
        path = tmp_path / "header.csv"
        write_adp_csv(path, [])
        assert load_adp_catalog(path) == []

    def test_bundled_sample_file_loads(self):
        catalog = load_adp_catalog(resolve_adp_path("ppr"))

        assert len(catalog) > 50
        ranks = [p.adp_rank for p in catalog]
        assert ranks == sorted(ranks)
        assert {p.position for p in catalog} == {"QB", "RB", "WR", "TE", "K", "DEF"}


# ===========================================================================
# TestResolveAdpPath
# ===========================================================================

class TestResolveAdpPath:

    def test_ppr_path_is_under_backend_dir(self):
        path = resolve_adp_path("ppr")
        assert path.is_absolute()
        assert path.parent.parent.parent == BACKEND_DIR

    def test_unknown_scoring_type_falls_back_to_default(self):
        assert resolve_adp_path("half") == resolve_adp_path("ppr")
        assert resolve_adp_path("standard") == resolve_adp_path("ppr")


# ===========================================================================
# TestAvailablePlayers
# ===========================================================================

class TestAvailablePlayers:

    def test_drafted_names_removed_case_insensitively(self, sample_catalog):
        available = get_available_players(sample_catalog, ["JOSH ALLEN", "bijan robinson"])

        names = {p.name for p in available}
        assert "Josh Allen" not in names
        assert "Bijan Robinson" not in names
        assert len(available) == len(sample_catalog) - 2

    def test_near_miss_names_stay_available(self, sample_catalog):
        # Exact matching only: punctuation differences do not match
        available = get_available_players(sample_catalog, ["AJ Brown"])
        assert "A.J. Brown" in {p.name for p in available}

    def test_normalized_matching_is_opt_in(self, sample_catalog):
        heuristics = DraftHeuristics(name_matching="normalized")
        available = get_available_players(sample_catalog, ["AJ Brown"], heuristics)
        assert "A.J. Brown" not in {p.name for p in available}

    def test_order_preserved(self, sample_catalog):
        available = get_available_players(sample_catalog, [])
        assert available == sample_catalog


# ===========================================================================
# TestSearchCatalog
# ===========================================================================

class TestSearchCatalog:

    def test_position_filter(self, sample_catalog):
        qbs = search_catalog(sample_catalog, position="QB")
        assert [p.name for p in qbs] == ["Josh Allen", "Lamar Jackson", "Patrick Mahomes"]

    def test_all_position_means_no_filter(self, sample_catalog):
        assert len(search_catalog(sample_catalog, position="ALL")) == len(sample_catalog)

    def test_search_matches_name_or_team(self, sample_catalog):
        phi = search_catalog(sample_catalog, search="phi")
        assert {p.name for p in phi} == {"Saquon Barkley", "A.J. Brown"}

        allen = search_catalog(sample_catalog, search="allen")
        assert [p.name for p in allen] == ["Josh Allen"]

    def test_single_character_search_ignored(self, sample_catalog):
        assert len(search_catalog(sample_catalog, search="j")) == len(sample_catalog)

    def test_limit(self, sample_catalog):
        top = search_catalog(sample_catalog, limit=3)
        assert [p.name for p in top] == ["Ja'Marr Chase", "Bijan Robinson", "Saquon Barkley"]

    def test_filters_combine(self):
        catalog = [
            make_player("Kyren Williams", "RB", 28.4, team="LAR"),
            make_player("Puka Nacua", "WR", 7.6, team="LAR"),
        ]
        result = search_catalog(catalog, position="wr", search="lar")
        assert [p.name for p in result] == ["Puka Nacua"]
