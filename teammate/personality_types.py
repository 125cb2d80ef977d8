"""Personality band definitions for team formation.

Defines the three personality bands (Leader / Balanced / Thinker) as an
ordered table of score ranges, and the lookup that classifies a score.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from teammate.errors import BelowBandFloorError, ClassificationRangeError


# ---------------------------------------------------------------------------
# Band enum
# ---------------------------------------------------------------------------
class PersonalityBand(str, Enum):
    """One of the three personality categories."""

    LEADER = "LEADER"
    BALANCED = "BALANCED"
    THINKER = "THINKER"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class BandRange(BaseModel):
    """A single row of the band table."""

    model_config = ConfigDict(frozen=True)

    band: PersonalityBand
    display_name: str = Field(..., min_length=1, max_length=30)
    min_score: int = Field(..., ge=0, le=100)
    max_score: int = Field(..., ge=0, le=100)
    description: str = Field(..., min_length=5)

    def matches(self, score: int) -> bool:
        return self.min_score <= score <= self.max_score


# ---------------------------------------------------------------------------
# Ordered band table (first match wins)
# ---------------------------------------------------------------------------
PERSONALITY_BANDS: tuple[BandRange, ...] = (
    BandRange(
        band=PersonalityBand.LEADER,
        display_name="Leader",
        min_score=90,
        max_score=100,
        description="Natural leadership qualities, takes initiative, confident decision maker",
    ),
    BandRange(
        band=PersonalityBand.BALANCED,
        display_name="Balanced",
        min_score=70,
        max_score=89,
        description="Well-rounded team player, adaptable, cooperative",
    ),
    BandRange(
        band=PersonalityBand.THINKER,
        display_name="Thinker",
        min_score=50,
        max_score=69,
        description="Analytical, strategic thinking, detail-oriented",
    ),
)

MIN_SCORE = 0
MAX_SCORE = 100
MIN_BAND_SCORE = 50

_INVALID_DESCRIPTION = "Invalid score - unable to determine personality type"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def classify_personality(score: int) -> PersonalityBand:
    """Return the band whose range contains *score*.

    Validation happens in two stages: a score outside 0-100 is rejected
    outright, and a score inside 0-100 that no band covers (0-49) is
    rejected after the table scan with its own error type.

    Raises:
        ClassificationRangeError: If the score is outside 0-100.
        BelowBandFloorError: If the score is inside 0-100 but below every band.
    """
    if score < MIN_SCORE or score > MAX_SCORE:
        raise ClassificationRangeError(
            f"Invalid personality score: {score}. Must be between {MIN_SCORE} and {MAX_SCORE}",
            score=score,
        )

    for row in PERSONALITY_BANDS:
        if row.matches(score):
            return row.band

    raise BelowBandFloorError(
        f"Score {score} falls outside all defined personality ranges ({MIN_BAND_SCORE}-{MAX_SCORE})",
        score=score,
    )


def is_valid_score(score: int) -> bool:
    """True when *score* falls inside one of the bands."""
    return MIN_BAND_SCORE <= score <= MAX_SCORE


def get_band_range(band: PersonalityBand) -> BandRange:
    """Look up the table row for *band*."""
    for row in PERSONALITY_BANDS:
        if row.band == band:
            return row
    raise KeyError(band)


def get_display_name(band: PersonalityBand) -> str:
    return get_band_range(band).display_name


def get_personality_description(score: int) -> str:
    """Describe the band for *score*, or a fixed message when it is invalid."""
    try:
        band = classify_personality(score)
    except ClassificationRangeError:
        return _INVALID_DESCRIPTION
    return get_band_range(band).description
