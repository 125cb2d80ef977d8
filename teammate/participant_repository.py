"""Repository for participant and team CSV files."""

from __future__ import annotations

from collections.abc import Sequence
import csv
import logging
from pathlib import Path
import threading

from pydantic import ValidationError

from teammate.errors import DataValidationError, FileProcessingError
from teammate.participant_models import Participant, Team
from teammate.personality_types import get_display_name
from teammate.settings import TeamMateSettings


logger = logging.getLogger(__name__)

PARTICIPANT_COLUMNS: list[str] = [
    "ID", "Name", "Email", "PreferredGame", "SkillLevel",
    "PreferredRole", "PersonalityScore", "PersonalityType",
]
TEAM_COLUMNS: list[str] = ["TeamID", "TeamName", "ParticipantID", "ParticipantName", *PARTICIPANT_COLUMNS[2:]]
REQUIRED_HEADER_FIELDS: tuple[str, ...] = ("ID", "Name", "PreferredGame", "PersonalityScore")
MIN_FIELDS = 7

_SAMPLE_ROWS: list[list[str]] = [
    ["P001", "Alice Johnson", "alice@university.edu", "Valorant", "8", "Strategist", "95"],
    ["P002", "Bob Smith", "bob@university.edu", "FIFA", "7", "Attacker", "72"],
    ["P003", "Charlie Lee", "charlie@university.edu", "DOTA 2", "6", "Defender", "88"],
    ["P004", "Diana Prince", "diana@university.edu", "CS:GO", "9", "Supporter", "65"],
    ["P005", "Eve Adams", "eve@university.edu", "Basketball", "7", "Coordinator", "78"],
    ["P006", "Frank Zhang", "frank@university.edu", "Valorant", "8", "Strategist", "92"],
    ["P007", "Grace Kim", "grace@university.edu", "FIFA", "6", "Attacker", "58"],
    ["P008", "Henry Davis", "henry@university.edu", "Chess", "7", "Defender", "81"],
    ["P009", "Iris Wilson", "iris@university.edu", "DOTA 2", "8", "Supporter", "69"],
    ["P010", "Jack Brown", "jack@university.edu", "CS:GO", "9", "Coordinator", "91"],
    ["P011", "Kate Miller", "kate@university.edu", "Basketball", "7", "Strategist", "74"],
    ["P012", "Leo Garcia", "leo@university.edu", "FIFA", "8", "Attacker", "86"],
]


def participant_to_row(p: Participant) -> list[str]:
    return [
        p.participant_id,
        p.name,
        p.email,
        p.preferred_game,
        str(p.skill_level),
        p.preferred_role,
        str(p.personality_score),
        get_display_name(p.personality_band),
    ]


def team_member_to_row(team: Team, member: Participant) -> list[str]:
    member_id, member_name, *rest = participant_to_row(member)
    return [team.team_id, team.name, member_id, member_name, *rest]


def parse_participant_row(fields: Sequence[str], line_number: int) -> Participant:
    """Turn one CSV row into a participant.

    The trailing PersonalityType column is ignored; the band is always
    derived from the score.

    Raises:
        DataValidationError: If the row is short, non-numeric or invalid.
    """
    if len(fields) < MIN_FIELDS:
        raise DataValidationError(
            f"Line {line_number}: Expected at least {MIN_FIELDS} fields, found {len(fields)}"
        )
    try:
        return Participant(
            participant_id=fields[0],
            name=fields[1],
            email=fields[2],
            preferred_game=fields[3],
            skill_level=int(fields[4].strip()),
            preferred_role=fields[5],
            personality_score=int(fields[6].strip()),
        )
    except ValidationError as e:
        raise DataValidationError(f"Line {line_number}: Validation error - {e}") from e
    except ValueError as e:
        raise DataValidationError(f"Line {line_number}: Invalid number format - {e}") from e


class ParticipantRepository:
    """Thread-safe CSV persistence for participants and formed teams."""

    def __init__(self, settings: TeamMateSettings | None = None) -> None:
        self.settings = settings or TeamMateSettings()
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------
    def read_participants(self, path: str | Path) -> list[Participant]:
        """Read every valid row of *path*, skipping (and logging) bad rows."""
        with self._lock:
            return self._read_without_lock(Path(path))

    def load_participants(self) -> list[Participant]:
        """Load the master list, falling back to the sample file."""
        master = self.settings.participants_path
        with self._lock:
            if master.exists():
                try:
                    participants = self._read_without_lock(master)
                    logger.info("Loaded %d participants from %s", len(participants), master)
                    return participants
                except FileProcessingError:
                    logger.warning("Failed to read %s, falling back to sample file", master, exc_info=True)

            sample = self.settings.sample_path
            logger.info("Loading from %s", sample)
            participants = self._read_without_lock(sample)
            logger.info("Loaded %d participants from %s", len(participants), sample)
            return participants

    def validate_csv_format(self, path: str | Path) -> bool:
        """True when the header names the required columns."""
        try:
            with open(path, newline="", encoding="utf-8") as f:
                header = next(csv.reader(f), None)
        except (OSError, UnicodeDecodeError, csv.Error):
            return False
        if not header:
            return False
        return all(name in header for name in REQUIRED_HEADER_FIELDS)

    def next_participant_id(self) -> str:
        """``P%03d`` after the highest numeric ``P`` id on file."""
        try:
            participants = self.load_participants()
        except FileProcessingError:
            participants = []

        max_id = 0
        for p in participants:
            pid = p.participant_id
            if pid.startswith("P") and pid[1:].isdigit():
                max_id = max(max_id, int(pid[1:]))
        return f"P{max_id + 1:03d}"

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------
    def append_participant(self, participant: Participant) -> None:
        """Append to the master list, creating it from the sample on first use.

        Raises:
            DataValidationError: If the participant id is already on file.
            FileProcessingError: If the master file cannot be written.
        """
        master = self.settings.participants_path
        with self._lock:
            if not master.exists():
                self._create_master_without_lock()
            if participant.participant_id in self._ids_without_lock(master):
                raise DataValidationError(
                    f"Participant ID already exists: {participant.participant_id}",
                    field_name="participant_id",
                    invalid_value=participant.participant_id,
                )
            try:
                with open(master, "a", newline="", encoding="utf-8") as f:
                    csv.writer(f).writerow(participant_to_row(participant))
            except OSError as e:
                raise FileProcessingError(f"Error appending participant to file: {master}") from e
        logger.info("Participant %s added to %s", participant.participant_id, master)

    def write_teams(self, teams: Sequence[Team], path: str | Path | None = None) -> Path:
        """Write one row per team member; returns the path written."""
        target = Path(path) if path else self.settings.teams_path
        rows = [
            team_member_to_row(team, member)
            for team in teams
            for member in team.members
        ]
        with self._lock:
            self._atomic_write(target, TEAM_COLUMNS, rows)
        logger.info("Wrote %d teams to %s", len(teams), target)
        return target

    def create_sample(self, path: str | Path | None = None) -> Path:
        """Write the built-in 12-participant sample file."""
        target = Path(path) if path else self.settings.sample_path
        rows = [participant_to_row(parse_participant_row(r, i)) for i, r in enumerate(_SAMPLE_ROWS, start=2)]
        with self._lock:
            self._atomic_write(target, PARTICIPANT_COLUMNS, rows)
        logger.info("Sample data written to %s", target)
        return target

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _read_without_lock(self, path: Path) -> list[Participant]:
        if not path.exists():
            raise FileProcessingError(f"File not found: {path}")

        participants: list[Participant] = []
        seen_ids: set[str] = set()
        skipped = 0
        try:
            with open(path, newline="", encoding="utf-8") as f:
                reader = csv.reader(f)
                header = next(reader, None)
                if header is None:
                    raise FileProcessingError(f"CSV file is empty: {path}")
                for line_number, fields in enumerate(reader, start=2):
                    if not fields or not any(v.strip() for v in fields):
                        continue
                    try:
                        participant = parse_participant_row(fields, line_number)
                    except DataValidationError as e:
                        skipped += 1
                        logger.warning("Skipping invalid line %d: %s", line_number, e)
                        continue
                    if participant.participant_id in seen_ids:
                        skipped += 1
                        logger.warning(
                            "Skipping line %d: duplicate participant ID %s",
                            line_number, participant.participant_id,
                        )
                        continue
                    seen_ids.add(participant.participant_id)
                    participants.append(participant)
                    logger.debug("Parsed participant: %s", participant.name)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise FileProcessingError(f"Error reading file: {path}") from e

        if skipped:
            logger.warning("Skipped %d invalid lines during import of %s", skipped, path)
        if not participants:
            raise FileProcessingError(
                f"No valid participants found in {path}. Check data format and validation rules."
            )
        return participants

    def _ids_without_lock(self, path: Path) -> set[str]:
        try:
            return {p.participant_id for p in self._read_without_lock(path)}
        except FileProcessingError:
            return set()

    def _create_master_without_lock(self) -> None:
        master = self.settings.participants_path
        try:
            existing = self._read_without_lock(self.settings.sample_path)
            logger.info("Copied %d participants from %s", len(existing), self.settings.sample_path)
        except FileProcessingError:
            logger.info("No sample file found, starting with empty participant list")
            existing = []
        self._atomic_write(master, PARTICIPANT_COLUMNS, [participant_to_row(p) for p in existing])

    def _atomic_write(self, path: Path, header: list[str], rows: list[list[str]]) -> None:
        """Write to a temp file then replace *path* (internal use, lock held)."""
        temp_path = path.with_suffix(".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                writer.writerow(header)
                writer.writerows(rows)
            temp_path.replace(path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise FileProcessingError(f"Error writing to file: {path}") from e
