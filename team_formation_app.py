"""TeamMate - team formation for gaming club participants.

Organizer view: load the participant pool, pick a team size, form teams and
export them to CSV. Participant self-registration and the statistics
dashboard live under ``pages/``.
"""

import logging

import streamlit as st

from teammate.engine.team_builder import MIN_TEAM_SIZE, TeamBuilder, suggest_team_sizes
from teammate.errors import FileProcessingError, TeamFormationError, UnevenDivisionError
from teammate.input_validator import validate_team_size
from teammate.logging_config import configure_logging
from teammate.participant_repository import ParticipantRepository
from teammate.personality_types import PersonalityBand, get_display_name
from teammate.settings import get_settings
from teammate.team_report import format_team_line, format_team_summary


st.set_page_config(page_title="TeamMate", page_icon="🎮", layout="wide")

settings = get_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)

_REPO = ParticipantRepository(settings)


# ---------------------------------------------------------------------------
# Session-state helpers
# ---------------------------------------------------------------------------
def _load_pool() -> None:
    try:
        st.session_state.participants = _REPO.load_participants()
        st.session_state.load_error = ""
    except FileProcessingError as e:
        logger.warning("Could not load participants: %s", e)
        st.session_state.participants = []
        st.session_state.load_error = str(e)
    st.session_state.pop("formation", None)


if "participants" not in st.session_state:
    _load_pool()


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------
st.title("🎮 TeamMate - Team Formation")

with st.sidebar:
    st.subheader("Data")
    st.caption(f"Master file: `{settings.participants_path}`")
    if st.button("🔄 Reload participants", use_container_width=True):
        _load_pool()
        st.rerun()
    if st.button("🧪 Create sample data file", use_container_width=True):
        try:
            path = _REPO.create_sample()
            st.success(f"Sample data written to {path}")
            _load_pool()
        except FileProcessingError as e:
            st.error(str(e))

participants = st.session_state.participants
if st.session_state.get("load_error"):
    st.warning(f"⚠️ {st.session_state.load_error}")

# --- Pool overview ---
st.subheader(f"Participant pool ({len(participants)})")
if participants:
    band_totals = {band: sum(1 for p in participants if p.personality_band == band) for band in PersonalityBand}
    cols = st.columns(len(band_totals))
    for col, (band, total) in zip(cols, band_totals.items()):
        col.metric(get_display_name(band), total)

    with st.expander("Show participants"):
        st.dataframe(
            [
                {
                    "ID": p.participant_id,
                    "Name": p.name,
                    "Game": p.preferred_game,
                    "Role": p.preferred_role,
                    "Score": p.personality_score,
                    "Type": get_display_name(p.personality_band),
                    "Skill": p.skill_level,
                }
                for p in participants
            ],
            use_container_width=True,
        )
else:
    st.info("No participants loaded. Create the sample file or register participants.")

st.divider()

# --- Formation ---
st.subheader("Form teams")
suggested = suggest_team_sizes(len(participants))
if suggested:
    st.caption(f"Sizes that divide the pool evenly: {', '.join(str(s) for s in suggested)}")

with st.form("form_teams"):
    team_size = st.number_input(
        "Team size",
        min_value=MIN_TEAM_SIZE,
        value=max(MIN_TEAM_SIZE, settings.default_team_size),
        step=1,
    )
    submitted = st.form_submit_button("⚙️ Form teams", use_container_width=True)

if submitted:
    st.session_state.pop("formation", None)
    # an empty pool is reported by the builder itself
    size_errors = validate_team_size(int(team_size), len(participants)) if participants else []
    for err in size_errors:
        st.error(f"❌ {err}")
    if not size_errors:
        try:
            st.session_state.formation = TeamBuilder().form_teams(participants, int(team_size))
        except UnevenDivisionError as e:
            logger.warning("Formation failed: %s", e)
            st.error(f"❌ {e}")
            st.info(f"Try one of: {', '.join(str(s) for s in e.suggested_sizes)}")
        except TeamFormationError as e:
            logger.warning("Formation failed: %s", e)
            st.error(f"❌ {e}")

formation = st.session_state.get("formation")
if formation is not None:
    st.success(f"✅ Formed {len(formation.teams)} teams of {formation.team_size}")

    team_cols = st.columns(min(3, len(formation.teams)))
    for idx, team in enumerate(formation.teams):
        with team_cols[idx % len(team_cols)]:
            st.caption(format_team_line(team))
            st.code(format_team_summary(team), language=None)

    report = formation.balance_report()
    for warning in report.warnings:
        st.warning(warning)

    if st.button("💾 Export teams to CSV", use_container_width=True):
        try:
            path = _REPO.write_teams(formation.teams)
            st.success(f"Teams written to {path}")
        except FileProcessingError as e:
            st.error(str(e))
