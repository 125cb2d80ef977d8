"""Fit scoring: how well a candidate suits a team's current members.

All functions are *pure*: no side-effects or I/O. Every component score
lies in [0, 100].
"""

from __future__ import annotations

from collections.abc import Sequence

from teammate.participant_models import Participant
from teammate.personality_types import PersonalityBand


# ---------------------------------------------------------------------------
# Weights and score tables
# ---------------------------------------------------------------------------
FIT_WEIGHTS: dict[str, float] = {
    "game_variety": 0.30,
    "role_diversity": 0.25,
    "personality_balance": 0.30,
    "skill_balance": 0.15,
}

MAX_SAME_GAME_PER_TEAM = 2
MAX_LEADERS_PER_TEAM = 2

# index = number of current members already sharing the value (capped)
_GAME_VARIETY_SCORES: tuple[float, ...] = (100.0, 50.0, 0.0)
_ROLE_DIVERSITY_SCORES: tuple[float, ...] = (100.0, 50.0, 20.0)
_LEADER_SCORES: tuple[float, ...] = (100.0, 60.0, 0.0)
_THINKER_SCORES: tuple[float, ...] = (90.0, 70.0, 30.0)
_BALANCED_SCORE = 80.0

_SKILL_PENALTY_PER_LEVEL = 10.0


def _lookup(table: tuple[float, ...], count: int) -> float:
    return table[min(count, len(table) - 1)]


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------
def game_variety_score(candidate: Participant, members: Sequence[Participant]) -> float:
    """100 for a new game, 50 for a second player of it, 0 beyond that."""
    same_game = sum(1 for m in members if m.has_game_preference(candidate.preferred_game))
    return _lookup(_GAME_VARIETY_SCORES, same_game)


def role_diversity_score(candidate: Participant, members: Sequence[Participant]) -> float:
    same_role = sum(1 for m in members if m.has_role_preference(candidate.preferred_role))
    return _lookup(_ROLE_DIVERSITY_SCORES, same_role)


def personality_balance_score(candidate: Participant, members: Sequence[Participant]) -> float:
    """Score the candidate's band against the team's current band mix.

    A leader who would make every member of the team a leader scores 0.
    """
    band = candidate.personality_band
    if band == PersonalityBand.LEADER:
        leaders = sum(1 for m in members if m.personality_band == PersonalityBand.LEADER)
        if leaders > 0 and leaders == len(members):
            return 0.0
        return _lookup(_LEADER_SCORES, leaders)
    if band == PersonalityBand.THINKER:
        thinkers = sum(1 for m in members if m.personality_band == PersonalityBand.THINKER)
        return _lookup(_THINKER_SCORES, thinkers)
    return _BALANCED_SCORE


def skill_balance_score(candidate: Participant, members: Sequence[Participant]) -> float:
    """Penalise distance from the team's average skill, 10 points per level."""
    if not members:
        return 100.0
    average = sum(m.skill_level for m in members) / len(members)
    return max(0.0, 100.0 - _SKILL_PENALTY_PER_LEVEL * abs(candidate.skill_level - average))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_fit_score(candidate: Participant, members: Sequence[Participant]) -> float:
    """Weighted fit of *candidate* against the team's current *members*.

    An empty team scores the candidate by personality score alone.
    """
    if not members:
        return float(candidate.personality_score)

    return (
        FIT_WEIGHTS["game_variety"] * game_variety_score(candidate, members)
        + FIT_WEIGHTS["role_diversity"] * role_diversity_score(candidate, members)
        + FIT_WEIGHTS["personality_balance"] * personality_balance_score(candidate, members)
        + FIT_WEIGHTS["skill_balance"] * skill_balance_score(candidate, members)
    )


def select_best_candidate(
    candidates: Sequence[Participant],
    members: Sequence[Participant],
) -> Participant | None:
    """Return the highest-scoring candidate, scanning in the given order.

    Only a strictly higher score replaces the current best, so the first
    candidate seen wins a tie.
    """
    best: Participant | None = None
    best_score = -1.0
    for candidate in candidates:
        score = calculate_fit_score(candidate, members)
        if score > best_score:
            best = candidate
            best_score = score
    return best
