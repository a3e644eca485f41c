from typing import Optional, List, Dict, Literal
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from app.config import settings
from app.schemas.player import CatalogPlayerResponse


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


# ==================== REQUEST ====================

class DraftPickRequest(CamelModel):
    pick: int = Field(..., description="Overall pick number")
    round: int
    player: str
    position: str
    team: Optional[str] = None
    adp: Optional[float] = None


class DraftRecommendationRequest(CamelModel):
    league_size: int = Field(
        settings.default_league_size,
        ge=settings.min_league_size,
        le=settings.max_league_size,
    )
    picks: List[DraftPickRequest] = Field(default_factory=list)
    user_team_picks: List[int] = Field(default_factory=list)
    next_pick: int = Field(..., ge=1)
    scoring_type: Literal["ppr", "half", "standard"] = "ppr"


# ==================== RESPONSE ====================

class RecommendationResponse(CamelModel):
    player: CatalogPlayerResponse
    value: int
    reasoning: List[str]
    tier: int
    scarcity_level: str  # "high", "medium", "low"


class PositionScarcityResponse(CamelModel):
    available_count: int
    top_tier_count: int
    level: str


class GradedPickResponse(CamelModel):
    player: str
    value: float
    reasoning: str


class DraftAnalysisResponse(CamelModel):
    total_value: float
    best_picks: List[GradedPickResponse] = []
    reaches: List[GradedPickResponse] = []
    grade: str
    matched_picks: int = 0
    unmatched_picks: int = 0


class DraftAssistData(CamelModel):
    recommendations: List[RecommendationResponse]
    team_composition: Dict[str, int]
    scarcity_data: Dict[str, PositionScarcityResponse]
    analysis: DraftAnalysisResponse
    positional_needs: Dict[str, int]
    next_pick: int
    round: int
    rounds_left: int
    total_picks: int
    available_players: int


class DraftAssistResponse(BaseModel):
    success: bool = True
    data: DraftAssistData
