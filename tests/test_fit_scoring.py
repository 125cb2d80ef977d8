"""Tests for teammate/engine/fit_scoring.py."""

import pytest

from teammate.engine.fit_scoring import (
    FIT_WEIGHTS,
    calculate_fit_score,
    game_variety_score,
    personality_balance_score,
    role_diversity_score,
    select_best_candidate,
    skill_balance_score,
)
from tests.factories import make_participant


def test_weights_sum_to_one():
    assert sum(FIT_WEIGHTS.values()) == pytest.approx(1.0)


class TestGameVariety:
    @pytest.mark.parametrize("same_game,expected", [(0, 100.0), (1, 50.0), (2, 0.0), (3, 0.0)])
    def test_table(self, same_game, expected):
        members = [make_participant(f"P10{i}", 75, game="FIFA") for i in range(same_game)]
        members.append(make_participant("P200", 75, game="Chess"))
        candidate = make_participant("P001", 75, game="fifa")
        assert game_variety_score(candidate, members) == expected


class TestRoleDiversity:
    @pytest.mark.parametrize("same_role,expected", [(0, 100.0), (1, 50.0), (2, 20.0), (4, 20.0)])
    def test_table(self, same_role, expected):
        members = [make_participant(f"P10{i}", 75, role="Attacker") for i in range(same_role)]
        members.append(make_participant("P200", 75, role="Defender"))
        candidate = make_participant("P001", 75, role="Attacker")
        assert role_diversity_score(candidate, members) == expected


class TestPersonalityBalance:
    def test_first_leader_into_non_leader_team(self):
        members = [make_participant("P101", 75)]
        assert personality_balance_score(make_participant("P001", 95), members) == 100.0

    def test_second_leader(self):
        members = [make_participant("P101", 95), make_participant("P102", 75)]
        assert personality_balance_score(make_participant("P001", 95), members) == 60.0

    def test_third_leader(self):
        members = [make_participant("P101", 95), make_participant("P102", 95), make_participant("P103", 75)]
        assert personality_balance_score(make_participant("P001", 95), members) == 0.0

    def test_leader_into_all_leader_team(self):
        members = [make_participant("P101", 95)]
        assert personality_balance_score(make_participant("P001", 92), members) == 0.0

    @pytest.mark.parametrize("thinkers,expected", [(0, 90.0), (1, 70.0), (2, 30.0), (3, 30.0)])
    def test_thinker_table(self, thinkers, expected):
        members = [make_participant("P100", 95)]
        members += [make_participant(f"P10{i + 1}", 60) for i in range(thinkers)]
        assert personality_balance_score(make_participant("P001", 55), members) == expected

    def test_balanced_is_flat(self):
        candidate = make_participant("P001", 80)
        assert personality_balance_score(candidate, [make_participant("P101", 95)]) == 80.0
        many = [make_participant(f"P10{i}", 75) for i in range(5)]
        assert personality_balance_score(candidate, many) == 80.0


class TestSkillBalance:
    def test_equal_skill(self):
        members = [make_participant("P101", 75, skill=6), make_participant("P102", 75, skill=8)]
        assert skill_balance_score(make_participant("P001", 75, skill=7), members) == 100.0

    def test_penalty_per_level(self):
        members = [make_participant("P101", 75, skill=5)]
        assert skill_balance_score(make_participant("P001", 75, skill=8), members) == pytest.approx(70.0)

    def test_floor_at_zero(self):
        members = [make_participant("P101", 75, skill=1)]
        assert skill_balance_score(make_participant("P001", 75, skill=10), members) == pytest.approx(10.0)
        members = [make_participant("P101", 75, skill=1), make_participant("P102", 75, skill=1)]
        assert skill_balance_score(make_participant("P001", 75, skill=10), members) >= 0.0


class TestFitScore:
    def test_empty_team_uses_personality_score(self):
        assert calculate_fit_score(make_participant("P001", 87), []) == 87.0

    def test_weighted_combination(self):
        members = [make_participant("P101", 95, game="FIFA", role="Attacker", skill=8)]
        candidate = make_participant("P001", 60, game="FIFA", role="Defender", skill=6)
        # game 50, role 100, thinker 90, skill 80
        expected = 0.30 * 50 + 0.25 * 100 + 0.30 * 90 + 0.15 * 80
        assert calculate_fit_score(candidate, members) == pytest.approx(expected)

    def test_score_within_bounds(self):
        members = [make_participant("P101", 95, skill=1)]
        candidate = make_participant("P001", 91, skill=10)
        assert 0.0 <= calculate_fit_score(candidate, members) <= 100.0


class TestSelectBestCandidate:
    def test_no_candidates(self):
        assert select_best_candidate([], [make_participant("P101", 95)]) is None

    def test_highest_wins(self):
        members = [make_participant("P101", 95, game="FIFA")]
        same_game = make_participant("P001", 75, game="FIFA")
        new_game = make_participant("P002", 75, game="Chess")
        assert select_best_candidate([same_game, new_game], members) is new_game

    def test_first_seen_wins_tie(self):
        members = [make_participant("P101", 95, game="FIFA")]
        a = make_participant("P001", 75, game="Chess")
        b = make_participant("P002", 75, game="Chess")
        assert select_best_candidate([a, b], members) is a
        assert select_best_candidate([b, a], members) is b
