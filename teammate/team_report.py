"""Plain-text summaries of formed teams."""

from __future__ import annotations

from teammate.participant_models import Team
from teammate.personality_types import get_display_name


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_team_line(team: Team) -> str:
    """One-line overview: id, name, fill level, diversity and balance."""
    return (
        f"Team[{team.team_id} - {team.name}] Members: {team.current_size}/{team.max_size}, "
        f"Diversity: {team.diversity_score():.2f}, Balance: {team.balance_score():.2f}"
    )


def format_team_summary(team: Team) -> str:
    """Multi-line block with statistics and one line per member."""
    lines = [
        f"=== {team.name} ({team.team_id}) ===",
        f"Size: {team.current_size}/{team.max_size}",
        f"Average Skill: {team.average_skill():.2f}",
        f"Diversity Score: {team.diversity_score():.2f}",
        f"Balance Score: {team.balance_score():.2f}",
        f"Role Diversity: {_yes_no(team.has_role_diversity())}",
        f"Game Variety: {_yes_no(team.has_game_variety())}",
        "",
        "Members:",
    ]
    for p in team.members:
        lines.append(
            f"  - {p.name} ({p.preferred_game}, {p.preferred_role}, "
            f"{get_display_name(p.personality_band)}, Skill: {p.skill_level})"
        )
    return "\n".join(lines) + "\n"
