"""Tests for the Streamlit organizer app and the participant survey page."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from teammate import logging_config
from teammate.input_validator import PERSONALITY_SCORE_ERROR, TEAM_SIZE_ERROR
from teammate.participant_repository import ParticipantRepository
from teammate.settings import TeamMateSettings

ROOT = Path(__file__).resolve().parents[1]
APP_PATH = ROOT / "team_formation_app.py"
SURVEY_PATH = ROOT / "pages" / "1_📝_Participant_Survey.py"


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the app at a data dir holding the 12-participant sample."""
    monkeypatch.setenv("TEAMMATE_DATA_DIR", str(tmp_path))
    monkeypatch.setattr("teammate.settings.load_dotenv", lambda: False)
    monkeypatch.setattr(logging_config, "_configured", True)
    ParticipantRepository(TeamMateSettings(data_dir=str(tmp_path))).create_sample()
    return tmp_path


def _click(at, label):
    next(b for b in at.button if b.label == label).click()
    at.run()


def _run(path):
    at = AppTest.from_file(str(path), default_timeout=30)
    at.run()
    assert not at.exception
    return at


# ---------------------------------------------------------------------------
# Survey page
# ---------------------------------------------------------------------------
class TestSurveyPage:
    def test_participant_id_is_assigned_and_read_only(self, data_dir):
        at = _run(SURVEY_PATH)
        id_field = at.text_input[0]
        assert id_field.value == "P013"
        assert id_field.disabled

    def test_registration_appends_next_id(self, data_dir):
        at = _run(SURVEY_PATH)
        at.text_input[1].input("Mia Chen")
        at.text_input[2].input("mia@university.edu")
        _click(at, "✅ Submit")

        assert not at.exception
        assert not at.error
        assert "Registered Mia Chen - score 60 (Thinker)" in at.success[0].value
        repo = ParticipantRepository(TeamMateSettings(data_dir=str(data_dir)))
        stored = repo.read_participants(repo.settings.participants_path)
        assert [p.participant_id for p in stored][-1] == "P013"

    def test_low_survey_total_rejected(self, data_dir):
        at = _run(SURVEY_PATH)
        at.text_input[1].input("Mia Chen")
        at.text_input[2].input("mia@university.edu")
        for i in range(1, 6):
            at.slider(key=f"q{i}").set_value(1)
        _click(at, "✅ Submit")

        assert any(PERSONALITY_SCORE_ERROR in e.value for e in at.error)
        assert not (data_dir / "allParticipants.csv").exists()


# ---------------------------------------------------------------------------
# Organizer app
# ---------------------------------------------------------------------------
class TestOrganizerApp:
    def test_forms_teams_and_lists_them(self, data_dir):
        at = _run(APP_PATH)
        at.number_input[0].set_value(4)
        _click(at, "⚙️ Form teams")

        assert not at.exception
        assert "Formed 3 teams of 4" in at.success[0].value
        lines = [c.value for c in at.caption if c.value.startswith("Team[")]
        assert len(lines) == 3
        assert lines[0].startswith("Team[team-1 - Team 1] Members: 4/4")

    def test_team_size_larger_than_pool(self, data_dir):
        at = _run(APP_PATH)
        at.number_input[0].set_value(13)
        _click(at, "⚙️ Form teams")

        assert any(TEAM_SIZE_ERROR in e.value for e in at.error)
        assert "formation" not in at.session_state
