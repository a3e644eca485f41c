"""
FastAPI Dependency Injection Container

Provides a shared DraftAssistant instance. The assistant is stateless, so
sharing it across requests is safe; the ADP catalog is still loaded per
request.
"""
from typing import Optional

from app.services.draft_assistant import DraftAssistant


class ServiceContainer:
    """
    Container for singleton service instances.
    Services are lazily initialized on first access.
    """

    _draft_assistant: Optional[DraftAssistant] = None

    @classmethod
    def get_draft_assistant(cls) -> DraftAssistant:
        """Get or create the DraftAssistant singleton."""
        if cls._draft_assistant is None:
            cls._draft_assistant = DraftAssistant()
        return cls._draft_assistant

    @classmethod
    def reset(cls) -> None:
        """Reset all singleton instances. Useful for testing."""
        cls._draft_assistant = None


# FastAPI dependency functions
def get_draft_assistant() -> DraftAssistant:
    """
    FastAPI dependency for DraftAssistant.

    Usage:
        @router.post("/recommendations")
        def recommend(assistant: DraftAssistant = Depends(get_draft_assistant)):
            ...
    """
    return ServiceContainer.get_draft_assistant()
