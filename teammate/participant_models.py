"""Pydantic models for participants and teams."""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from teammate.errors import DataValidationError
from teammate.personality_types import PersonalityBand, classify_personality


UNASSIGNED = "unassigned"

SURVEY_QUESTION_COUNT = 5
SURVEY_MIN_ANSWER = 1
SURVEY_MAX_ANSWER = 5
SURVEY_MULTIPLIER = 4


def calculate_survey_score(answers: list[int]) -> int:
    """Reduce a 5-question survey (each answer 1-5) to a personality score.

    Raises:
        DataValidationError: If the answer list is malformed.
    """
    if answers is None or len(answers) != SURVEY_QUESTION_COUNT:
        raise DataValidationError(
            f"Survey must have exactly {SURVEY_QUESTION_COUNT} answers",
            field_name="survey_answers",
            invalid_value=str(answers),
        )
    for i, answer in enumerate(answers, start=1):
        if answer < SURVEY_MIN_ANSWER or answer > SURVEY_MAX_ANSWER:
            raise DataValidationError(
                f"Survey answer {i} must be between {SURVEY_MIN_ANSWER} and {SURVEY_MAX_ANSWER}",
                field_name=f"survey_answer_{i}",
                invalid_value=str(answer),
            )
    return sum(answers) * SURVEY_MULTIPLIER


# ---------------------------------------------------------------------------
# Participant
# ---------------------------------------------------------------------------
class Participant(BaseModel):
    """A person to be placed on a team.

    Immutable once built. The personality band is computed from the score and
    cannot be set on its own.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    participant_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    preferred_game: str = Field(..., min_length=1)
    preferred_role: str = Field(..., min_length=1)
    personality_score: int = Field(..., ge=50, le=100)
    skill_level: int = Field(..., ge=1, le=10)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def personality_band(self) -> PersonalityBand:
        return classify_personality(self.personality_score)

    @classmethod
    def from_survey(
        cls,
        participant_id: str,
        name: str,
        email: str,
        preferred_game: str,
        preferred_role: str,
        survey_answers: list[int],
        skill_level: int,
    ) -> Participant:
        """Build a participant whose score comes from the 5-question survey."""
        return cls(
            participant_id=participant_id,
            name=name,
            email=email,
            preferred_game=preferred_game,
            preferred_role=preferred_role,
            personality_score=calculate_survey_score(survey_answers),
            skill_level=skill_level,
        )

    @property
    def is_leader(self) -> bool:
        return self.personality_band == PersonalityBand.LEADER

    def has_game_preference(self, game: str) -> bool:
        return self.preferred_game.casefold() == game.casefold()

    def has_role_preference(self, role: str) -> bool:
        return self.preferred_role.casefold() == role.casefold()


# ---------------------------------------------------------------------------
# Team
# ---------------------------------------------------------------------------
class Team(BaseModel):
    """A bounded, ordered group of participants.

    Statistics are computed from the member list on every call.
    """

    team_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    max_size: int = Field(..., gt=0)
    members: list[Participant] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_capacity(self) -> Team:
        if len(self.members) > self.max_size:
            raise ValueError(
                f"Team {self.team_id} has {len(self.members)} members, capacity is {self.max_size}"
            )
        return self

    def add_member(self, participant: Participant) -> bool:
        """Append *participant*; returns False without change when full."""
        if self.is_full:
            return False
        self.members.append(participant)
        return True

    @property
    def is_full(self) -> bool:
        return len(self.members) >= self.max_size

    @property
    def current_size(self) -> int:
        return len(self.members)

    @property
    def member_ids(self) -> list[str]:
        return [m.participant_id for m in self.members]

    # ------------------------------------------------------------------
    # Counts
    # ------------------------------------------------------------------
    def game_count(self, game: str) -> int:
        return sum(1 for m in self.members if m.has_game_preference(game))

    def role_count(self, role: str) -> int:
        return sum(1 for m in self.members if m.has_role_preference(role))

    def band_counts(self) -> dict[PersonalityBand, int]:
        counter = Counter(m.personality_band for m in self.members)
        return {band: counter.get(band, 0) for band in PersonalityBand}

    @property
    def leader_count(self) -> int:
        return self.band_counts()[PersonalityBand.LEADER]

    # ------------------------------------------------------------------
    # Derived statistics
    # ------------------------------------------------------------------
    def diversity_score(self) -> float:
        """Unique games divided by team size."""
        if not self.members:
            return 0.0
        unique_games = {m.preferred_game for m in self.members}
        return len(unique_games) / len(self.members)

    def balance_score(self) -> float:
        """1.0 for an even Leader/Balanced/Thinker mix, lower as it skews."""
        if not self.members:
            return 0.0
        counts = self.band_counts()
        leaders = counts[PersonalityBand.LEADER]
        balanced = counts[PersonalityBand.BALANCED]
        thinkers = counts[PersonalityBand.THINKER]
        spread = abs(leaders - balanced) + abs(balanced - thinkers) + abs(thinkers - leaders)
        return 1.0 - spread / (len(self.members) * 2.0)

    def average_skill(self) -> float:
        if not self.members:
            return 0.0
        return sum(m.skill_level for m in self.members) / len(self.members)

    def has_role_diversity(self) -> bool:
        """At least min(3, size) distinct roles."""
        unique_roles = {m.preferred_role for m in self.members}
        return len(unique_roles) >= min(3, len(self.members))

    def has_game_variety(self) -> bool:
        """No game preferred by more than two members."""
        counts = Counter(m.preferred_game for m in self.members)
        return all(c <= 2 for c in counts.values())
