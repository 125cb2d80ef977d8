"""Tests for teammate.settings module."""

from pathlib import Path

import pytest

from teammate.settings import TeamMateSettings, get_settings

_ENV_NAMES = (
    "TEAMMATE_DATA_DIR",
    "TEAMMATE_PARTICIPANTS_FILE",
    "TEAMMATE_SAMPLE_FILE",
    "TEAMMATE_TEAMS_FILE",
    "TEAMMATE_LOG_FILE",
    "TEAMMATE_LOG_LEVEL",
    "TEAMMATE_DEFAULT_TEAM_SIZE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("teammate.settings.load_dotenv", lambda: False)


class TestTeamMateSettings:
    def test_defaults(self):
        s = TeamMateSettings()
        assert s.participants_path == Path("data") / "allParticipants.csv"
        assert s.sample_path == Path("data") / "participants_sample.csv"
        assert s.teams_path == Path("data") / "formed_teams.csv"
        assert s.log_path == Path("data") / "teammate_application.log"
        assert s.log_level == "INFO"
        assert s.default_team_size == 4

    def test_log_level_normalised(self):
        assert TeamMateSettings(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="unknown log level"):
            TeamMateSettings(log_level="LOUD")

    def test_team_size_floor(self):
        with pytest.raises(ValueError):
            TeamMateSettings(default_team_size=2)


class TestGetSettings:
    def test_no_env(self):
        assert get_settings() == TeamMateSettings()

    def test_reads_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TEAMMATE_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("TEAMMATE_DEFAULT_TEAM_SIZE", "6")
        monkeypatch.setenv("TEAMMATE_LOG_LEVEL", "warning")
        s = get_settings()
        assert s.participants_path == tmp_path / "allParticipants.csv"
        assert s.default_team_size == 6
        assert s.log_level == "WARNING"

    def test_blank_env_ignored(self, monkeypatch):
        monkeypatch.setenv("TEAMMATE_DATA_DIR", "   ")
        assert get_settings().data_dir == "data"

    def test_invalid_env_names_variable(self, monkeypatch):
        monkeypatch.setenv("TEAMMATE_DEFAULT_TEAM_SIZE", "two")
        with pytest.raises(ValueError, match="TEAMMATE_DEFAULT_TEAM_SIZE"):
            get_settings()
