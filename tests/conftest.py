"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from teammate.participant_models import Participant
from tests.factories import make_participant


@pytest.fixture
def club_members() -> list[Participant]:
    """12 participants, 4 of them leaders (P001, P006, P010, P012)."""
    rows = [
        ("P001", "Alice", "Valorant", "Strategist", 95, 8),
        ("P002", "Bob", "FIFA", "Defender", 72, 7),
        ("P003", "Charlie", "DOTA 2", "Supporter", 88, 6),
        ("P004", "Diana", "CS:GO", "Attacker", 65, 9),
        ("P005", "Eve", "Basketball", "Coordinator", 78, 7),
        ("P006", "Frank", "Valorant", "Strategist", 92, 8),
        ("P007", "Grace", "FIFA", "Attacker", 58, 6),
        ("P008", "Henry", "Chess", "Defender", 81, 7),
        ("P009", "Iris", "DOTA 2", "Supporter", 69, 8),
        ("P010", "Jack", "CS:GO", "Coordinator", 91, 9),
        ("P011", "Kate", "Basketball", "Strategist", 74, 7),
        ("P012", "Leo", "FIFA", "Attacker", 96, 8),
    ]
    return [
        make_participant(pid, score, game=game, role=role, skill=skill, name=name)
        for pid, name, game, role, score, skill in rows
    ]
