"""
Draft recommendation engine.

Turns the available ADP pool, the user's roster and the next pick number
into a value-ranked list of players with reasoning. Every function here is
pure: inputs in, results out, nothing cached between requests.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from app.config import settings, DraftHeuristics
from app.services.adp_catalog import CatalogPlayer

logger = logging.getLogger(__name__)

ROSTER_POSITIONS = ["QB", "RB", "WR", "TE", "K", "DEF"]

# Positions that get a scarcity read; K/DEF are never scarce
SCARCITY_POSITIONS = ["QB", "RB", "WR", "TE"]

# Need reasons by need_multipliers step, strongest first
NEED_REASONS = ["Critical need at {}", "Strong need at {}", "Depth needed at {}"]


@dataclass
class PositionScarcity:
    available_count: int
    top_tier_count: int
    level: str  # "high", "medium", "low"


@dataclass
class ScarcityReport:
    positions: Dict[str, PositionScarcity] = field(default_factory=dict)
    # Rounds remaining in the draft; reported only, thresholds do not use it
    rounds_left: int = 0

    def level_for(self, position: str) -> str:
        entry = self.positions.get(position)
        return entry.level if entry else "low"


@dataclass
class Recommendation:
    player: CatalogPlayer
    value: int
    reasoning: List[str]
    tier: int
    scarcity_level: str


def draft_round(next_pick: int, league_size: int) -> int:
    """1-based round of the given overall pick."""
    return math.ceil(next_pick / league_size)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# ==================== ROSTER COMPOSITION & POSITION NEED ====================

def calculate_team_composition(positions: Iterable[str]) -> Dict[str, int]:
    """Count the user's picks per roster position. Unknown positions are ignored."""
    composition = {pos: 0 for pos in ROSTER_POSITIONS}
    for position in positions:
        key = (position or "").upper()
        if key in composition:
            composition[key] += 1
    return composition


def calculate_positional_needs(
    composition: Dict[str, int],
    next_pick: int,
    league_size: int,
    heuristics: Optional[DraftHeuristics] = None,
) -> Dict[str, int]:
    """
    Need strength per position (higher = more urgent).

    Starters are stepped on the rostered count; K and DEF only register
    a need once the draft is past the late-round cutoff.
    """
    heuristics = heuristics or settings.heuristics
    current_round = draft_round(next_pick, league_size)

    needs: Dict[str, int] = {}
    for position, rule in heuristics.need_rules.items():
        count = composition.get(position, 0)
        strength = rule.floor
        for count_below, step_strength in rule.steps:
            if count < count_below:
                strength = step_strength
                break
        needs[position] = strength

    for position in heuristics.late_round_positions:
        late = current_round > heuristics.late_round_after
        needs[position] = (
            heuristics.late_round_need if late and composition.get(position, 0) < 1 else 0
        )

    return needs


# ==================== SCARCITY ====================

def classify_scarcity(
    position: str,
    top_tier_count: int,
    heuristics: Optional[DraftHeuristics] = None,
) -> str:
    heuristics = heuristics or settings.heuristics
    thresholds = heuristics.scarcity_thresholds.get(position)
    if thresholds is None:
        return "low"
    high_below, medium_below = thresholds
    if top_tier_count < high_below:
        return "high"
    if top_tier_count < medium_below:
        return "medium"
    return "low"


def calculate_positional_scarcity(
    available_players: List[CatalogPlayer],
    next_pick: int,
    league_size: int,
    heuristics: Optional[DraftHeuristics] = None,
) -> ScarcityReport:
    """Scarcity level per position from how many tier 1-2 players remain."""
    heuristics = heuristics or settings.heuristics
    rounds_left = math.ceil(
        (league_size * heuristics.draft_rounds - next_pick + 1) / league_size
    )

    report = ScarcityReport(rounds_left=rounds_left)
    for position in SCARCITY_POSITIONS:
        at_position = [p for p in available_players if p.position == position]
        top_tier = sum(1 for p in at_position if p.tier <= heuristics.scarcity_max_tier)
        report.positions[position] = PositionScarcity(
            available_count=len(at_position),
            top_tier_count=top_tier,
            level=classify_scarcity(position, top_tier, heuristics),
        )

    return report


# ==================== VALUATION ====================

def need_step(need: int, heuristics: Optional[DraftHeuristics] = None) -> Optional[int]:
    """Index of the first need_multipliers step the need reaches, or None."""
    heuristics = heuristics or settings.heuristics
    for step, (min_need, _) in enumerate(heuristics.need_multipliers):
        if need >= min_need:
            return step
    return None


def need_multiplier(need: int, heuristics: Optional[DraftHeuristics] = None) -> float:
    heuristics = heuristics or settings.heuristics
    step = need_step(need, heuristics)
    if step is None:
        return heuristics.no_need_multiplier
    return heuristics.need_multipliers[step][1]


def calculate_player_value(
    player: CatalogPlayer,
    needs: Dict[str, int],
    scarcity: ScarcityReport,
    next_pick: int,
    heuristics: Optional[DraftHeuristics] = None,
) -> int:
    """
    Score a candidate for the next pick.

    (base from ADP) x need x scarcity, plus tier and fall-past-ADP bonuses.
    The result is unbounded and may be negative for deep players.
    """
    heuristics = heuristics or settings.heuristics

    value = heuristics.base_value - player.adp_rank
    value *= need_multiplier(needs.get(player.position, 0), heuristics)
    value *= heuristics.scarcity_multipliers.get(scarcity.level_for(player.position), 1.0)
    value += heuristics.tier_bonus.get(player.tier, 0)

    if next_pick > player.adp_rank:
        value += (next_pick - player.adp_rank) * heuristics.value_pick_weight

    return round_half_up(value)


# ==================== REASONING ====================

def generate_reasoning(
    player: CatalogPlayer,
    needs: Dict[str, int],
    scarcity: ScarcityReport,
    next_pick: int,
    heuristics: Optional[DraftHeuristics] = None,
) -> List[str]:
    """Human-readable reasons behind a candidate's value, in fixed order."""
    heuristics = heuristics or settings.heuristics
    reasoning: List[str] = []
    need = needs.get(player.position, 0)
    level = scarcity.level_for(player.position)

    bonus_tiers = sorted(t for t, bonus in heuristics.tier_bonus.items() if bonus > 0)
    if bonus_tiers and player.tier == bonus_tiers[0]:
        reasoning.append(f"Elite tier {player.tier} player")
    elif player.tier in bonus_tiers:
        reasoning.append("High-end starter")

    step = need_step(need, heuristics)
    if step is not None:
        reasoning.append(NEED_REASONS[min(step, len(NEED_REASONS) - 1)].format(player.position))

    if level == "high":
        reasoning.append(f"High scarcity at {player.position}")
    elif level == "medium":
        reasoning.append(f"Moderate scarcity at {player.position}")

    if next_pick > player.adp_rank + heuristics.significant_value_margin:
        reasoning.append("Significant value pick")
    elif next_pick > player.adp_rank + heuristics.good_value_margin:
        reasoning.append("Good value")

    if player.bye_week in heuristics.manageable_bye_weeks:
        reasoning.append("Manageable bye week")

    if not reasoning:
        reasoning.append("Solid option available")

    return reasoning


# ==================== RANKING ====================

def generate_recommendations(
    available_players: List[CatalogPlayer],
    needs: Dict[str, int],
    scarcity: ScarcityReport,
    next_pick: int,
    limit: Optional[int] = None,
    heuristics: Optional[DraftHeuristics] = None,
) -> List[Recommendation]:
    """
    Value and explain every available player, best first.

    Ties keep catalog (ADP) order. Returns the full ranking unless a
    limit is given.
    """
    heuristics = heuristics or settings.heuristics
    recommendations = [
        Recommendation(
            player=player,
            value=calculate_player_value(player, needs, scarcity, next_pick, heuristics),
            reasoning=generate_reasoning(player, needs, scarcity, next_pick, heuristics),
            tier=player.tier,
            scarcity_level=scarcity.level_for(player.position),
        )
        for player in available_players
    ]
    recommendations.sort(key=lambda r: r.value, reverse=True)
    logger.debug(f"Ranked {len(recommendations)} players for pick {next_pick}")

    if limit is not None:
        recommendations = recommendations[:limit]
    return recommendations
