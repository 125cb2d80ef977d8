"""Validation rules for participant form input."""

from __future__ import annotations

import re

from teammate.engine.team_builder import MIN_TEAM_SIZE, is_valid_team_size


EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
PARTICIPANT_ID_PATTERN = re.compile(r"^P\d{3,}$")

VALID_GAMES: tuple[str, ...] = ("Valorant", "FIFA", "DOTA 2", "CS:GO", "Basketball", "Chess")
VALID_ROLES: tuple[str, ...] = ("Strategist", "Attacker", "Defender", "Supporter", "Coordinator")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100

EMAIL_ERROR = "Invalid email format. Expected: username@domain.com"
PARTICIPANT_ID_ERROR = "Invalid participant ID format. Expected: P001, P002, etc."
NAME_ERROR = f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
SKILL_LEVEL_ERROR = "Skill level must be between 1 and 10"
PERSONALITY_SCORE_ERROR = "Personality score must be between 50 and 100"
GAME_ERROR = f"Invalid game. Valid options: {', '.join(VALID_GAMES)}"
ROLE_ERROR = f"Invalid role. Valid options: {', '.join(VALID_ROLES)}"
TEAM_SIZE_ERROR = f"Team size must be at least {MIN_TEAM_SIZE} and no larger than the participant count"


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email(email: str | None) -> bool:
    if _blank(email):
        return False
    return EMAIL_PATTERN.match(email.strip()) is not None


def is_valid_participant_id(participant_id: str | None) -> bool:
    if _blank(participant_id):
        return False
    return PARTICIPANT_ID_PATTERN.match(participant_id.strip()) is not None


def is_valid_name(name: str | None) -> bool:
    if _blank(name):
        return False
    return NAME_MIN_LENGTH <= len(name.strip()) <= NAME_MAX_LENGTH


def is_valid_skill_level(skill: int) -> bool:
    return 1 <= skill <= 10


def is_valid_personality_score(score: int) -> bool:
    return 50 <= score <= 100


def _in_options(value: str | None, options: tuple[str, ...]) -> bool:
    if _blank(value):
        return False
    wanted = value.strip().casefold()
    return any(option.casefold() == wanted for option in options)


def is_valid_game(game: str | None) -> bool:
    return _in_options(game, VALID_GAMES)


def is_valid_role(role: str | None) -> bool:
    return _in_options(role, VALID_ROLES)


def validate_participant_fields(
    participant_id: str,
    name: str,
    email: str,
    preferred_game: str,
    preferred_role: str,
    skill_level: int,
) -> list[str]:
    """Check every form field; returns one message per failing field."""
    errors: list[str] = []
    if not is_valid_participant_id(participant_id):
        errors.append(PARTICIPANT_ID_ERROR)
    if not is_valid_name(name):
        errors.append(NAME_ERROR)
    if not is_valid_email(email):
        errors.append(EMAIL_ERROR)
    if not is_valid_game(preferred_game):
        errors.append(GAME_ERROR)
    if not is_valid_role(preferred_role):
        errors.append(ROLE_ERROR)
    if not is_valid_skill_level(skill_level):
        errors.append(SKILL_LEVEL_ERROR)
    return errors


def validate_team_size(team_size: int, total_participants: int) -> list[str]:
    """Check an organizer-chosen team size against the pool size."""
    if is_valid_team_size(team_size, total_participants):
        return []
    return [TEAM_SIZE_ERROR]


def validate_personality_score(score: int) -> list[str]:
    """A survey total below the Thinker floor cannot be registered."""
    if is_valid_personality_score(score):
        return []
    return [PERSONALITY_SCORE_ERROR]
