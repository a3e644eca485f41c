"""
Draft assistant pipeline.

Runs one recommendation request end to end: load the ADP catalog, drop
drafted players, read the user's roster, estimate need and scarcity, rank
the pool and grade the user's picks so far.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from app.config import settings, DraftHeuristics
from app.services.adp_catalog import (
    CatalogPlayer,
    get_available_players,
    load_adp_catalog,
    resolve_adp_path,
)
from app.services.draft_grader import DraftAnalysis, PickRecord, analyze_draft
from app.services.recommendation_engine import (
    Recommendation,
    ScarcityReport,
    calculate_positional_needs,
    calculate_positional_scarcity,
    calculate_team_composition,
    draft_round,
    generate_recommendations,
)

logger = logging.getLogger(__name__)

CatalogLoader = Callable[[str], List[CatalogPlayer]]


def load_catalog_for_scoring(scoring_type: str) -> List[CatalogPlayer]:
    return load_adp_catalog(resolve_adp_path(scoring_type))


@dataclass
class DraftAssistResult:
    recommendations: List[Recommendation]
    team_composition: Dict[str, int]
    scarcity: ScarcityReport
    analysis: DraftAnalysis
    positional_needs: Dict[str, int]
    round: int
    next_pick: int
    total_picks: int
    available_players: int
    user_picks: List[PickRecord] = field(default_factory=list)


class DraftAssistant:
    """
    Stateless orchestrator for draft recommendations and grading.

    The catalog loader is called on every request; nothing is cached on
    the instance, so one assistant can serve concurrent requests.
    """

    def __init__(
        self,
        catalog_loader: Optional[CatalogLoader] = None,
        heuristics: Optional[DraftHeuristics] = None,
    ):
        self._catalog_loader = catalog_loader or load_catalog_for_scoring
        self._heuristics = heuristics

    @property
    def heuristics(self) -> DraftHeuristics:
        return self._heuristics or settings.heuristics

    def load_catalog(self, scoring_type: Optional[str] = None) -> List[CatalogPlayer]:
        return self._catalog_loader(scoring_type or settings.default_scoring_type)

    def assist(
        self,
        picks: List[PickRecord],
        user_team_picks: List[int],
        next_pick: int,
        league_size: Optional[int] = None,
        scoring_type: str = "ppr",
        limit: Optional[int] = None,
    ) -> DraftAssistResult:
        """
        Rank available players for `next_pick` and grade the user's draft.

        `user_team_picks` holds the overall pick numbers that belong to the
        user. `limit` truncates the ranking; None returns every player.
        """
        league_size = league_size or settings.default_league_size
        heuristics = self.heuristics
        catalog = self.load_catalog(scoring_type)
        if not catalog:
            logger.warning("ADP catalog is empty; recommendations will be empty")

        user_pick_numbers = set(user_team_picks)
        user_picks = [p for p in picks if p.pick_number in user_pick_numbers]

        available = get_available_players(
            catalog, (p.player_name for p in picks), heuristics
        )
        composition = calculate_team_composition(p.position for p in user_picks)
        needs = calculate_positional_needs(composition, next_pick, league_size, heuristics)
        scarcity = calculate_positional_scarcity(available, next_pick, league_size, heuristics)

        recommendations = generate_recommendations(
            available, needs, scarcity, next_pick, limit=limit, heuristics=heuristics,
        )
        analysis = analyze_draft(user_picks, catalog, heuristics)

        logger.info(
            f"Pick {next_pick} ({scoring_type}, {league_size} teams): "
            f"{len(available)}/{len(catalog)} players available, "
            f"{len(user_picks)} user picks, grade {analysis.grade}"
        )

        return DraftAssistResult(
            recommendations=recommendations,
            team_composition=composition,
            scarcity=scarcity,
            analysis=analysis,
            positional_needs=needs,
            round=draft_round(next_pick, league_size),
            next_pick=next_pick,
            total_picks=len(picks),
            available_players=len(available),
            user_picks=user_picks,
        )
