"""
ADP (Average Draft Position) catalog.

Loads a season's ADP table into tiered, rank-sorted catalog players and
answers availability / lookup queries against it. The catalog is rebuilt
per request and never mutated.
"""
import bisect
import math
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from app.config import settings, DraftHeuristics
from app.utils import normalize_name

logger = logging.getLogger(__name__)

# Directory that relative ADP paths in settings are resolved against
BACKEND_DIR = Path(__file__).resolve().parent.parent.parent

VALID_POSITIONS = ("QB", "RB", "WR", "TE", "K", "DEF")

# Column order of the ADP source: name, team, bye, position, (unused), PPR rank
NAME_COL, TEAM_COL, BYE_COL, POSITION_COL, RANK_COL = 0, 1, 2, 3, 5
MIN_COLUMNS = 6


@dataclass(frozen=True)
class CatalogPlayer:
    name: str
    team: str
    position: str
    adp_rank: float
    bye_week: Optional[int]
    tier: int


def calculate_tier(adp_rank: float, heuristics: Optional[DraftHeuristics] = None) -> int:
    """
    Map an ADP rank to a tier (1 = elite .. 5 = deep sleeper).

    Breakpoints are inclusive: rank 12 is tier 1, rank 13 is tier 2.
    """
    heuristics = heuristics or settings.heuristics
    return bisect.bisect_left(heuristics.tier_breakpoints, adp_rank) + 1


def resolve_adp_path(scoring_type: Optional[str] = None) -> Path:
    """Pick the ADP file for a scoring type, falling back to the default file."""
    scoring_type = scoring_type or settings.default_scoring_type
    relative = settings.adp_files.get(scoring_type)
    if relative is None:
        logger.debug(
            f"No ADP file for scoring type '{scoring_type}', "
            f"using '{settings.default_scoring_type}'"
        )
        relative = settings.adp_files[settings.default_scoring_type]

    path = Path(relative)
    if not path.is_absolute():
        path = BACKEND_DIR / path
    return path


def _parse_rank(value) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    try:
        rank = float(str(value).replace(",", "").strip())
    except ValueError:
        return None
    if not math.isfinite(rank) or rank <= 0:
        return None
    return rank


def _parse_bye_week(value) -> Optional[int]:
    if value is None or pd.isna(value):
        return None
    try:
        week = float(str(value).strip())
    except ValueError:
        return None
    if not week.is_integer():
        return None
    return int(week) if 1 <= week <= 18 else None


def _clean_text(value) -> str:
    if value is None or pd.isna(value):
        return ""
    return str(value).replace('"', "").strip()


def build_catalog_player(
    row: Iterable,
    heuristics: Optional[DraftHeuristics] = None,
) -> Optional[CatalogPlayer]:
    """Build one catalog player from a raw ADP row, or None if the row is unusable."""
    values = list(row)
    if len(values) < MIN_COLUMNS:
        return None

    name = _clean_text(values[NAME_COL])
    position = _clean_text(values[POSITION_COL]).upper()
    rank = _parse_rank(values[RANK_COL])

    if not name or rank is None or position not in VALID_POSITIONS:
        return None

    return CatalogPlayer(
        name=name,
        team=_clean_text(values[TEAM_COL]),
        position=position,
        adp_rank=rank,
        bye_week=_parse_bye_week(values[BYE_COL]),
        tier=calculate_tier(rank, heuristics),
    )


def load_adp_catalog(
    path: Union[str, Path, None] = None,
    heuristics: Optional[DraftHeuristics] = None,
) -> List[CatalogPlayer]:
    """
    Load the ADP table into catalog players sorted by ADP rank.

    Bad rows are skipped one at a time; over-long rows are truncated to
    the expected columns. A missing or unreadable file yields an empty
    catalog and a warning rather than an error.
    """
    path = Path(path) if path is not None else resolve_adp_path()

    try:
        # Rows with extra fields keep their first MIN_COLUMNS values
        df = pd.read_csv(
            path,
            header=0,
            dtype=str,
            skipinitialspace=True,
            engine="python",
            on_bad_lines=lambda fields: fields[:MIN_COLUMNS],
        )
    except (OSError, UnicodeDecodeError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        logger.warning(f"Could not load ADP data from {path}: {e}")
        return []

    players: List[CatalogPlayer] = []
    skipped = 0
    for _, row in df.iterrows():
        values = row.tolist()
        player = build_catalog_player(values, heuristics)
        if player is None:
            skipped += 1
            logger.debug(f"Skipping unusable ADP row: {values}")
            continue
        players.append(player)

    players.sort(key=lambda p: p.adp_rank)
    logger.info(f"Loaded {len(players)} ADP players from {path.name} ({skipped} rows skipped)")
    return players


def player_name_key(name: str, heuristics: Optional[DraftHeuristics] = None) -> str:
    """Key used to match a drafted name to a catalog player."""
    heuristics = heuristics or settings.heuristics
    if heuristics.name_matching == "normalized":
        return normalize_name(name)
    return name.lower()


def get_available_players(
    catalog: List[CatalogPlayer],
    drafted_names: Iterable[str],
    heuristics: Optional[DraftHeuristics] = None,
) -> List[CatalogPlayer]:
    """Catalog players whose name has not been drafted (case-insensitive)."""
    drafted = {player_name_key(name, heuristics) for name in drafted_names}
    return [p for p in catalog if player_name_key(p.name, heuristics) not in drafted]


def search_catalog(
    catalog: List[CatalogPlayer],
    position: Optional[str] = None,
    search: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[CatalogPlayer]:
    """
    Filter the catalog by position and a name/team substring.

    Searches shorter than two characters are ignored.
    """
    players = catalog
    if position and position.upper() != "ALL":
        players = [p for p in players if p.position == position.upper()]

    if search and len(search.strip()) >= 2:
        needle = search.strip().lower()
        players = [
            p for p in players
            if needle in p.name.lower() or needle in p.team.lower()
        ]

    if limit is not None:
        players = players[:limit]
    return list(players)
