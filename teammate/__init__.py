"""Team formation library: personality bands, participants and the team builder."""

from .engine.team_builder import FormationResult, TeamBuilder, form_teams
from .participant_models import Participant, Team
from .personality_types import PersonalityBand, classify_personality

__all__ = [
    "FormationResult",
    "Participant",
    "PersonalityBand",
    "Team",
    "TeamBuilder",
    "classify_personality",
    "form_teams",
]
