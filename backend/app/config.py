from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings
from typing import Dict, List, Literal, Tuple


class NeedRule(BaseModel):
    """Need strength for one position, stepped on how many are rostered."""
    # (count_below, strength) checked in order; first step whose count_below
    # exceeds the rostered count wins
    steps: List[Tuple[int, int]]
    floor: int = 0


class DraftHeuristics(BaseModel):
    """
    Every threshold used by the valuation engine.

    Defaults assume a 1 QB / 2 RB / 3 WR / 1 TE lineup with K and DEF
    drafted late.
    """

    # Tiering (ADP rank at or below breakpoint N -> tier N+1)
    tier_breakpoints: List[float] = [12, 36, 72, 120]

    # Positional need
    need_rules: Dict[str, NeedRule] = {
        "QB": NeedRule(steps=[(1, 3), (2, 1)], floor=0),
        "RB": NeedRule(steps=[(2, 3), (4, 2)], floor=1),
        "WR": NeedRule(steps=[(3, 3), (5, 2)], floor=1),
        "TE": NeedRule(steps=[(1, 2), (2, 1)], floor=0),
    }
    late_round_positions: List[str] = ["K", "DEF"]
    late_round_after: int = 12
    late_round_need: int = 1

    # Scarcity: (high_below, medium_below) counts of tier 1-2 players
    scarcity_thresholds: Dict[str, Tuple[int, int]] = {
        "QB": (3, 6),
        "RB": (8, 16),
        "WR": (12, 24),
        "TE": (3, 6),
    }
    scarcity_max_tier: int = 2
    draft_rounds: int = 16

    # Valuation
    base_value: float = 100.0
    need_multipliers: List[Tuple[int, float]] = [(3, 1.5), (2, 1.2), (1, 1.1)]
    no_need_multiplier: float = 0.8
    scarcity_multipliers: Dict[str, float] = {"high": 1.3, "medium": 1.1, "low": 1.0}
    tier_bonus: Dict[int, float] = {1: 20, 2: 10}
    value_pick_weight: float = 2.0

    # Reasoning
    significant_value_margin: float = 12
    good_value_margin: float = 6
    manageable_bye_weeks: List[int] = [6, 7, 8, 9, 10, 11]

    # Draft grading
    best_pick_margin: float = 12
    reach_margin: float = 12
    grade_scale: List[Tuple[float, str]] = [
        (8, "A"), (4, "B+"), (0, "B"), (-4, "B-"), (-8, "C"),
    ]
    floor_grade: str = "D"

    # Pick-to-catalog name matching: "exact" compares lowercased names,
    # "normalized" also ignores punctuation, accents and Jr./III suffixes
    name_matching: Literal["exact", "normalized"] = "exact"


class Settings(BaseSettings):
    # App settings
    app_name: str = "Fantasy Football Draft Assistant"

    # ADP source files, keyed by scoring type (relative to the backend dir)
    adp_files: Dict[str, str] = {
        "ppr": "data/adp/2025_sleeper_adp_ppr.csv",
    }
    default_scoring_type: str = "ppr"

    # League defaults
    default_league_size: int = 12
    min_league_size: int = 8
    max_league_size: int = 16

    # Response sizes
    recommendation_limit: int = 15
    adp_lookup_limit: int = 200
    max_lookup_limit: int = 500

    # CORS origins for the frontend
    cors_origins: List[str] = [
        "http://localhost:5173", "http://localhost:3000", "http://127.0.0.1:5173",
    ]

    heuristics: DraftHeuristics = Field(default_factory=DraftHeuristics)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_nested_delimiter = "__"


settings = Settings()
