from app.schemas.player import (
    CatalogPlayerResponse,
    AdpLookupResponse,
)
from app.schemas.draft import (
    DraftPickRequest,
    DraftRecommendationRequest,
    RecommendationResponse,
    PositionScarcityResponse,
    GradedPickResponse,
    DraftAnalysisResponse,
    DraftAssistData,
    DraftAssistResponse,
)

__all__ = [
    "CatalogPlayerResponse",
    "AdpLookupResponse",
    "DraftPickRequest",
    "DraftRecommendationRequest",
    "RecommendationResponse",
    "PositionScarcityResponse",
    "GradedPickResponse",
    "DraftAnalysisResponse",
    "DraftAssistData",
    "DraftAssistResponse",
]
