"""Team formation: validation, leader seeding and greedy filling.

A formation run never mutates its input. Participants are immutable and the
run records assignments in its own participant-id → team-id mapping, which is
returned alongside the teams.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging

from pydantic import BaseModel, Field

from teammate.engine.fit_scoring import MAX_LEADERS_PER_TEAM, select_best_candidate
from teammate.engine.team_balance import FormationBalance, calculate_formation_balance
from teammate.errors import (
    AllLeadersError,
    EmptyInputError,
    InvalidTeamSizeError,
    LeaderShortfallError,
    PostFormationViolationError,
    UnevenDivisionError,
)
from teammate.participant_models import UNASSIGNED, Participant, Team


logger = logging.getLogger(__name__)

MIN_TEAM_SIZE = 3
MIN_LEADERS_PER_TEAM = 1


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------
class FormationResult(BaseModel):
    """Outcome of a successful formation run."""

    team_size: int = Field(..., ge=MIN_TEAM_SIZE)
    teams: list[Team]
    # participant_id → team_id, in admission order
    assignments: dict[str, str] = Field(default_factory=dict)

    def team_for(self, participant_id: str) -> str:
        return self.assignments.get(participant_id, UNASSIGNED)

    def get_team(self, team_id: str) -> Team | None:
        return next((t for t in self.teams if t.team_id == team_id), None)

    def balance_report(self) -> FormationBalance:
        return calculate_formation_balance(self.teams)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def is_valid_team_size(team_size: int, total_participants: int) -> bool:
    return MIN_TEAM_SIZE <= team_size <= total_participants


def suggest_team_sizes(total_participants: int) -> list[int]:
    """All divisors of *total_participants* that are at least the minimum size."""
    return [
        size
        for size in range(MIN_TEAM_SIZE, total_participants + 1)
        if total_participants % size == 0
    ]


def _team_id(index: int) -> str:
    return f"team-{index + 1}"


def _team_name(index: int) -> str:
    return f"Team {index + 1}"


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------
class TeamBuilder:
    """Partitions a participant pool into equally sized, balanced teams."""

    def form_teams(self, participants: Sequence[Participant] | None, team_size: int) -> FormationResult:
        """Form ``len(participants) / team_size`` full teams.

        Raises:
            TeamFormationError: One of its subclasses, when the input is
                infeasible or a filled team breaks the leader rules.
        """
        pool = list(participants or [])
        self._validate(pool, team_size)

        num_teams = len(pool) // team_size
        teams = [
            Team(team_id=_team_id(i), name=_team_name(i), max_size=team_size)
            for i in range(num_teams)
        ]
        assignments: dict[str, str] = {}
        # positions in pool already placed on a team
        placed: set[int] = set()

        self._seed_leaders(pool, teams, placed, assignments)
        for team in teams:
            self._fill_team(team, pool, placed, assignments)

        for team in teams:
            self._validate_team(team)

        logger.info(
            "Formed %d teams of %d from %d participants",
            num_teams, team_size, len(pool),
        )
        return FormationResult(team_size=team_size, teams=teams, assignments=assignments)

    # ------------------------------------------------------------------
    # Preconditions
    # ------------------------------------------------------------------
    def _validate(self, pool: list[Participant], team_size: int) -> None:
        count = len(pool)
        if count == 0:
            raise EmptyInputError("No participants provided for team formation")

        if team_size < MIN_TEAM_SIZE:
            raise InvalidTeamSizeError(
                f"Team size must be at least {MIN_TEAM_SIZE} members (got {team_size})",
                team_size=team_size,
                participant_count=count,
            )

        if not is_valid_team_size(team_size, count):
            raise InvalidTeamSizeError(
                f"Invalid team size: {team_size}. Must be between {MIN_TEAM_SIZE} and "
                f"{count} (total participants)",
                team_size=team_size,
                participant_count=count,
            )

        remainder = count % team_size
        if remainder != 0:
            suggested = suggest_team_sizes(count)
            raise UnevenDivisionError(
                f"Cannot form balanced teams: {count} participants cannot be evenly divided "
                f"by team size {team_size}. This would leave {remainder} participant(s) "
                f"unassigned. Please choose a team size that divides evenly "
                f"(e.g., {', '.join(str(s) for s in suggested)})",
                participant_count=count,
                team_size=team_size,
                remainder=remainder,
                suggested_sizes=suggested,
            )

        num_teams = count // team_size
        leader_count = sum(1 for p in pool if p.is_leader)
        if leader_count < num_teams:
            raise LeaderShortfallError(
                f"Not enough leaders ({leader_count}) to form {num_teams} teams. "
                "Each team needs at least 1 leader. Please add more participants "
                "with leader personality type.",
                leader_count=leader_count,
                required=num_teams,
            )

        if leader_count == count:
            raise AllLeadersError(
                f"Cannot form teams: All {count} participants are leaders. "
                "Teams require personality diversity. Please add participants "
                "with Balanced or Thinker personality types.",
                participant_count=count,
            )

    # ------------------------------------------------------------------
    # Formation steps
    # ------------------------------------------------------------------
    def _seed_leaders(
        self,
        pool: list[Participant],
        teams: list[Team],
        placed: set[int],
        assignments: dict[str, str],
    ) -> None:
        """Give each team one leader, highest score first."""
        # sorted() is stable: equal scores keep input order
        leader_positions = sorted(
            (i for i, p in enumerate(pool) if p.is_leader),
            key=lambda i: pool[i].personality_score,
            reverse=True,
        )
        for team, position in zip(teams, leader_positions):
            self._admit(team, pool, position, placed, assignments)

    def _fill_team(
        self,
        team: Team,
        pool: list[Participant],
        placed: set[int],
        assignments: dict[str, str],
    ) -> None:
        while not team.is_full:
            # input order is the tie-break order
            remaining = [i for i in range(len(pool)) if i not in placed]
            if not remaining:
                break
            best = select_best_candidate([pool[i] for i in remaining], team.members)
            if best is None:
                break
            position = next(i for i in remaining if pool[i] is best)
            self._admit(team, pool, position, placed, assignments)

    def _admit(
        self,
        team: Team,
        pool: list[Participant],
        position: int,
        placed: set[int],
        assignments: dict[str, str],
    ) -> None:
        participant = pool[position]
        if team.add_member(participant):
            placed.add(position)
            assignments[participant.participant_id] = team.team_id
            logger.debug("Admitted %s to %s", participant.participant_id, team.team_id)

    def _validate_team(self, team: Team) -> None:
        leaders = team.leader_count

        if leaders < MIN_LEADERS_PER_TEAM:
            raise PostFormationViolationError(
                f"Team {team.team_id} has no leaders. Each team must have at least "
                f"{MIN_LEADERS_PER_TEAM} leader.",
                team_id=team.team_id,
                leader_count=leaders,
            )

        if leaders > MAX_LEADERS_PER_TEAM:
            raise PostFormationViolationError(
                f"Team {team.team_id} has {leaders} leaders. Maximum allowed is "
                f"{MAX_LEADERS_PER_TEAM}. Unable to form balanced teams with current "
                "participants. Please try a different team size.",
                team_id=team.team_id,
                leader_count=leaders,
            )

        if team.max_size > 2 and leaders == team.current_size:
            raise PostFormationViolationError(
                f"Team {team.team_id} cannot have all members as leaders. Teams must "
                "have personality diversity.",
                team_id=team.team_id,
                leader_count=leaders,
            )


def form_teams(participants: Sequence[Participant] | None, team_size: int) -> FormationResult:
    """Module-level shortcut for ``TeamBuilder().form_teams``."""
    return TeamBuilder().form_teams(participants, team_size)
