"""Exception types raised by the team formation library."""

from __future__ import annotations


class TeamMateError(Exception):
    """Base class for all library errors."""


class ClassificationRangeError(TeamMateError, ValueError):
    """A personality score cannot be mapped to a band."""

    def __init__(self, message: str, score: int | None = None) -> None:
        super().__init__(message)
        self.score = score


class BelowBandFloorError(ClassificationRangeError):
    """A score within 0-100 that no personality band covers."""


class DataValidationError(TeamMateError, ValueError):
    """Raw input (a CSV row, a form field) failed validation."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        invalid_value: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field_name = field_name
        self.invalid_value = invalid_value

    def __str__(self) -> str:
        message = super().__str__()
        if self.field_name is not None and self.invalid_value is not None:
            return f"{message} [Field: {self.field_name}, Value: {self.invalid_value}]"
        return message


class FileProcessingError(TeamMateError):
    """Reading or writing a data file failed."""


# ---------------------------------------------------------------------------
# Formation failures
# ---------------------------------------------------------------------------
class TeamFormationError(TeamMateError):
    """A formation run could not produce a valid partition."""


class EmptyInputError(TeamFormationError):
    pass


class InvalidTeamSizeError(TeamFormationError):
    def __init__(self, message: str, team_size: int, participant_count: int) -> None:
        super().__init__(message)
        self.team_size = team_size
        self.participant_count = participant_count


class UnevenDivisionError(TeamFormationError):
    def __init__(
        self,
        message: str,
        participant_count: int,
        team_size: int,
        remainder: int,
        suggested_sizes: list[int],
    ) -> None:
        super().__init__(message)
        self.participant_count = participant_count
        self.team_size = team_size
        self.remainder = remainder
        self.suggested_sizes = suggested_sizes


class LeaderShortfallError(TeamFormationError):
    def __init__(self, message: str, leader_count: int, required: int) -> None:
        super().__init__(message)
        self.leader_count = leader_count
        self.required = required


class AllLeadersError(TeamFormationError):
    def __init__(self, message: str, participant_count: int) -> None:
        super().__init__(message)
        self.participant_count = participant_count


class PostFormationViolationError(TeamFormationError):
    """A filled team breaks the leader-count rules."""

    def __init__(self, message: str, team_id: str, leader_count: int) -> None:
        super().__init__(message)
        self.team_id = team_id
        self.leader_count = leader_count
