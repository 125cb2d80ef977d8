"""Application settings read from environment variables (and ``.env``)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator


logger = logging.getLogger(__name__)

_ENV_FIELDS: dict[str, str] = {
    "data_dir": "TEAMMATE_DATA_DIR",
    "participants_file": "TEAMMATE_PARTICIPANTS_FILE",
    "sample_file": "TEAMMATE_SAMPLE_FILE",
    "teams_file": "TEAMMATE_TEAMS_FILE",
    "log_file": "TEAMMATE_LOG_FILE",
    "log_level": "TEAMMATE_LOG_LEVEL",
    "default_team_size": "TEAMMATE_DEFAULT_TEAM_SIZE",
}


class TeamMateSettings(BaseModel):
    """Paths and defaults for the application."""

    data_dir: str = Field(default="data", min_length=1)
    participants_file: str = Field(default="allParticipants.csv", min_length=1)
    sample_file: str = Field(default="participants_sample.csv", min_length=1)
    teams_file: str = Field(default="formed_teams.csv", min_length=1)
    log_file: str = Field(default="teammate_application.log", min_length=1)
    log_level: str = Field(default="INFO")
    default_team_size: int = Field(default=4, ge=3)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{v}'")
        return level

    @property
    def participants_path(self) -> Path:
        return Path(self.data_dir) / self.participants_file

    @property
    def sample_path(self) -> Path:
        return Path(self.data_dir) / self.sample_file

    @property
    def teams_path(self) -> Path:
        return Path(self.data_dir) / self.teams_file

    @property
    def log_path(self) -> Path:
        return Path(self.data_dir) / self.log_file


def get_settings() -> TeamMateSettings:
    """Build settings from the environment after loading ``.env``.

    Raises:
        ValueError: If a variable holds an invalid value.
    """
    load_dotenv()

    values = {
        field: os.environ[env_name]
        for field, env_name in _ENV_FIELDS.items()
        if os.environ.get(env_name, "").strip()
    }
    try:
        settings = TeamMateSettings(**values)
    except ValidationError as e:
        names = ", ".join(
            _ENV_FIELDS[str(err["loc"][0])] for err in e.errors() if err["loc"]
        )
        raise ValueError(f"Invalid settings in {names}: {e}") from e

    logger.debug("Settings: data_dir=%s log_level=%s", settings.data_dir, settings.log_level)
    return settings
