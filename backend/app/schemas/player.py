from typing import Optional, List
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CatalogPlayerResponse(BaseModel):
    name: str
    team: str
    position: str
    adp_rank: float
    bye_week: Optional[int] = None
    tier: int

    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


class AdpLookupResponse(BaseModel):
    success: bool = True
    data: List[CatalogPlayerResponse]
