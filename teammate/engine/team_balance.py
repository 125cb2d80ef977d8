"""Team balance analysis: per-team statistics and cross-team skill spread.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from pydantic import BaseModel, Field

from teammate.participant_models import Team
from teammate.personality_types import PersonalityBand


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class TeamStats(BaseModel):
    """Derived statistics for one team."""

    team_id: str
    name: str
    size: int = Field(ge=0)
    max_size: int = Field(gt=0)
    leaders: int = Field(ge=0)
    balanced: int = Field(ge=0)
    thinkers: int = Field(ge=0)
    diversity_score: float = Field(ge=0.0, le=1.0)
    balance_score: float = Field(ge=0.0, le=1.0)
    average_skill: float = Field(ge=0.0, le=10.0)
    role_diversity: bool
    game_variety: bool


class FormationBalance(BaseModel):
    """Balance report across all teams of a formation run."""

    teams: list[TeamStats]
    skill_mean: float = 0.0
    skill_spread: float = Field(ge=0.0, default=0.0)
    warnings: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_team_stats(team: Team) -> TeamStats:
    counts = team.band_counts()
    return TeamStats(
        team_id=team.team_id,
        name=team.name,
        size=team.current_size,
        max_size=team.max_size,
        leaders=counts[PersonalityBand.LEADER],
        balanced=counts[PersonalityBand.BALANCED],
        thinkers=counts[PersonalityBand.THINKER],
        diversity_score=round(team.diversity_score(), 4),
        balance_score=round(team.balance_score(), 4),
        average_skill=round(team.average_skill(), 4),
        role_diversity=team.has_role_diversity(),
        game_variety=team.has_game_variety(),
    )


def calculate_formation_balance(teams: Sequence[Team]) -> FormationBalance:
    """Summarise *teams*: per-team stats, skill mean and spread, warnings."""
    stats = [calculate_team_stats(t) for t in teams]

    skill_mean = 0.0
    skill_spread = 0.0
    if stats:
        averages = np.array([s.average_skill for s in stats], dtype=float)
        skill_mean = float(np.mean(averages))
        skill_spread = float(np.std(averages))

    warnings: list[str] = []
    for s in stats:
        if not s.role_diversity:
            warnings.append(f"{s.name} lacks role diversity (fewer than {min(3, s.size)} distinct roles)")
        if not s.game_variety:
            warnings.append(f"{s.name} has more than 2 members preferring the same game")

    return FormationBalance(
        teams=stats,
        skill_mean=round(skill_mean, 4),
        skill_spread=round(skill_spread, 4),
        warnings=warnings,
    )
