"""
Pytest fixtures for Fantasy Football Draft Assistant tests.
"""
import pytest
from typing import List, Optional

from app.services.adp_catalog import CatalogPlayer, calculate_tier
from app.services.draft_grader import PickRecord


ADP_HEADER = '"Player","Team","Bye","POS","ESPN","Sleeper"\n'


def make_player(
    name: str = "Test Player",
    position: str = "WR",
    adp_rank: float = 50.0,
    team: str = "FA",
    bye_week: Optional[int] = None,
    tier: Optional[int] = None,
) -> CatalogPlayer:
    """Build a catalog player; tier defaults to the one derived from ADP."""
    return CatalogPlayer(
        name=name,
        team=team,
        position=position,
        adp_rank=adp_rank,
        bye_week=bye_week,
        tier=tier if tier is not None else calculate_tier(adp_rank),
    )


def make_pick(
    pick_number: int,
    player_name: str,
    position: str = "WR",
    league_size: int = 12,
) -> PickRecord:
    return PickRecord(
        pick_number=pick_number,
        round=(pick_number - 1) // league_size + 1,
        player_name=player_name,
        position=position,
    )


def write_adp_csv(path, rows: List[str]) -> None:
    """Write an ADP file with the standard header and raw CSV data rows."""
    path.write_text(ADP_HEADER + "\n".join(rows) + "\n", encoding="utf-8")


@pytest.fixture
def player_factory():
    """Factory fixture for creating catalog players with custom attributes."""
    return make_player


@pytest.fixture
def pick_factory():
    """Factory fixture for creating pick records."""
    return make_pick


@pytest.fixture
def sample_catalog() -> List[CatalogPlayer]:
    """Small catalog spanning every position and tier, sorted by ADP."""
    return [
        make_player("Ja'Marr Chase", "WR", 1.2, team="CIN", bye_week=10),
        make_player("Bijan Robinson", "RB", 2.1, team="ATL", bye_week=5),
        make_player("Saquon Barkley", "RB", 3.9, team="PHI", bye_week=9),
        make_player("CeeDee Lamb", "WR", 5.8, team="DAL", bye_week=10),
        make_player("Brock Bowers", "TE", 17.8, team="LV", bye_week=8),
        make_player("A.J. Brown", "WR", 18.4, team="PHI", bye_week=9),
        make_player("Josh Allen", "QB", 26.3, team="BUF", bye_week=7),
        make_player("Lamar Jackson", "QB", 27.0, team="BAL", bye_week=7),
        make_player("Kyren Williams", "RB", 28.4, team="LAR", bye_week=8),
        make_player("Breece Hall", "RB", 47.5, team="NYJ", bye_week=9),
        make_player("Sam LaPorta", "TE", 66.5, team="DET", bye_week=8),
        make_player("Patrick Mahomes", "QB", 92.5, team="KC", bye_week=10),
        make_player("Denver Broncos", "DEF", 158.3, team="DEN", bye_week=12),
        make_player("Brandon Aubrey", "K", 161.0, team="DAL", bye_week=10),
    ]


@pytest.fixture
def catalog_loader(sample_catalog):
    """Catalog loader for DraftAssistant that ignores the scoring type."""
    def _load(scoring_type: str) -> List[CatalogPlayer]:
        return list(sample_catalog)
    return _load


@pytest.fixture
def adp_csv(tmp_path):
    """Valid ADP file with a few players written out of ADP order."""
    path = tmp_path / "adp.csv"
    write_adp_csv(path, [
        '"Josh Allen","BUF","7","QB","22","26.3"',
        '"Ja\'Marr Chase","CIN","10","WR","1","1.2"',
        '"Brock Bowers","LV","8","TE","15","17.8"',
        '"Denver Broncos","DEN","12","DEF","140","158.3"',
    ])
    return path
