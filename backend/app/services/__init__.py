# Services module
from app.services.draft_assistant import DraftAssistant, DraftAssistResult
from app.services.adp_catalog import CatalogPlayer, load_adp_catalog, search_catalog
from app.services.draft_grader import DraftAnalysis, analyze_draft

__all__ = [
    "DraftAssistant",
    "DraftAssistResult",
    "CatalogPlayer",
    "load_adp_catalog",
    "search_catalog",
    "DraftAnalysis",
    "analyze_draft",
]
