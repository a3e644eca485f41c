import logging
from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from app.config import settings
from app.dependencies import get_draft_assistant
from app.schemas.draft import (
    DraftAnalysisResponse,
    DraftAssistData,
    DraftAssistResponse,
    DraftRecommendationRequest,
    PositionScarcityResponse,
    RecommendationResponse,
)
from app.schemas.player import AdpLookupResponse, CatalogPlayerResponse
from app.services.adp_catalog import search_catalog
from app.services.draft_assistant import DraftAssistant, DraftAssistResult
from app.services.draft_grader import PickRecord
from app.utils import sanitize_error_message

logger = logging.getLogger(__name__)
router = APIRouter()


def _to_pick_records(request: DraftRecommendationRequest) -> List[PickRecord]:
    return [
        PickRecord(
            pick_number=p.pick,
            round=p.round,
            player_name=p.player,
            position=p.position,
            team=p.team,
            adp=p.adp,
        )
        for p in request.picks
    ]


def _build_response(result: DraftAssistResult) -> DraftAssistResponse:
    data = DraftAssistData(
        recommendations=[
            RecommendationResponse.model_validate(rec) for rec in result.recommendations
        ],
        team_composition=result.team_composition,
        scarcity_data={
            pos: PositionScarcityResponse.model_validate(entry)
            for pos, entry in result.scarcity.positions.items()
        },
        analysis=DraftAnalysisResponse.model_validate(result.analysis),
        positional_needs=result.positional_needs,
        next_pick=result.next_pick,
        round=result.round,
        rounds_left=result.scarcity.rounds_left,
        total_picks=result.total_picks,
        available_players=result.available_players,
    )
    return DraftAssistResponse(data=data)


# ==================== RECOMMENDATIONS ====================


@router.post("/recommendations", response_model=DraftAssistResponse)
def get_draft_recommendations(
    request: DraftRecommendationRequest,
    limit: Optional[int] = Query(
        None, ge=1, le=500, description="Number of recommendations to return"
    ),
    assistant: DraftAssistant = Depends(get_draft_assistant),
):
    """Rank available players for the next pick and grade the user's draft so far."""
    try:
        result = assistant.assist(
            picks=_to_pick_records(request),
            user_team_picks=request.user_team_picks,
            next_pick=request.next_pick,
            league_size=request.league_size,
            scoring_type=request.scoring_type,
            limit=limit or settings.recommendation_limit,
        )
        return _build_response(result)
    except Exception as e:
        logger.exception("Draft recommendation request failed")
        raise HTTPException(
            status_code=500,
            detail=f"Draft analysis failed: {sanitize_error_message(e)}"
        )


# ==================== ADP LOOKUP ====================


@router.get("/players-adp", response_model=AdpLookupResponse)
def get_players_adp(
    position: Optional[str] = Query(None, description="QB, RB, WR, TE, K, DEF or ALL"),
    search: Optional[str] = Query(None, max_length=100, description="Name or team substring"),
    limit: int = Query(settings.adp_lookup_limit, ge=1, le=settings.max_lookup_limit),
    scoring_type: Literal["ppr", "half", "standard"] = Query("ppr", alias="scoringType"),
    assistant: DraftAssistant = Depends(get_draft_assistant),
):
    """Browse the ADP catalog, sorted by ADP."""
    try:
        catalog = assistant.load_catalog(scoring_type)
        players = search_catalog(catalog, position=position, search=search, limit=limit)
    except Exception as e:
        logger.exception("ADP lookup failed")
        raise HTTPException(
            status_code=500,
            detail=f"ADP lookup failed: {sanitize_error_message(e)}"
        )

    return AdpLookupResponse(
        data=[CatalogPlayerResponse.model_validate(p) for p in players]
    )
