"""
Retrospective draft grading.

Compares each of the user's picks with the player's ADP: picking a player
later than the market would have is value, earlier is a reach.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from app.config import settings, DraftHeuristics
from app.services.adp_catalog import CatalogPlayer, player_name_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickRecord:
    pick_number: int
    round: int
    player_name: str
    position: str
    team: Optional[str] = None
    adp: Optional[float] = None


@dataclass
class GradedPick:
    player: str
    value: float
    reasoning: str


@dataclass
class DraftAnalysis:
    total_value: float = 0
    best_picks: List[GradedPick] = field(default_factory=list)
    reaches: List[GradedPick] = field(default_factory=list)
    grade: str = "B"
    matched_picks: int = 0
    unmatched_picks: int = 0


def letter_grade(avg_value: float, heuristics: Optional[DraftHeuristics] = None) -> str:
    """Map average pick value to a grade. Thresholds are strict: 8.0 is a B+."""
    heuristics = heuristics or settings.heuristics
    for threshold, grade in heuristics.grade_scale:
        if avg_value > threshold:
            return grade
    return heuristics.floor_grade


def analyze_draft(
    user_picks: List[PickRecord],
    catalog: List[CatalogPlayer],
    heuristics: Optional[DraftHeuristics] = None,
) -> DraftAnalysis:
    """
    Grade the user's picks against ADP.

    Picks are matched to the catalog by case-insensitive name (see
    DraftHeuristics.name_matching); picks that match nothing are left out
    of the grade entirely.
    """
    heuristics = heuristics or settings.heuristics
    by_name: Dict[str, CatalogPlayer] = {}
    for player in catalog:
        by_name.setdefault(player_name_key(player.name, heuristics), player)

    analysis = DraftAnalysis()
    for pick in user_picks:
        catalog_player = by_name.get(player_name_key(pick.player_name, heuristics))
        if catalog_player is None:
            analysis.unmatched_picks += 1
            logger.debug(f"No ADP entry for pick {pick.pick_number} ({pick.player_name}); not graded")
            continue

        pick_value = pick.pick_number - catalog_player.adp_rank
        analysis.total_value += pick_value
        analysis.matched_picks += 1

        if pick_value > heuristics.best_pick_margin:
            analysis.best_picks.append(
                GradedPick(player=pick.player_name, value=pick_value, reasoning="Great value pick")
            )
        elif pick_value < -heuristics.reach_margin:
            analysis.reaches.append(
                GradedPick(player=pick.player_name, value=abs(pick_value), reasoning="Drafted early")
            )

    avg_value = analysis.total_value / max(analysis.matched_picks, 1)
    analysis.grade = letter_grade(avg_value, heuristics)
    return analysis
