"""Unit tests for ScoringRules."""
from globetrotter.domain.scoring import ScoringRules


class TestScoringRules:
    def test_correct_awards_one_point(self):
        assert ScoringRules.calculate_points(True) == 1

    def test_wrong_awards_nothing(self):
        assert ScoringRules.calculate_points(False) == 0

    def test_deltas_for_correct(self):
        assert ScoringRules.stat_deltas(True) == {"score": 1, "correct": 1, "incorrect": 0}

    def test_deltas_for_wrong(self):
        assert ScoringRules.stat_deltas(False) == {"score": 0, "correct": 0, "incorrect": 1}

    def test_deltas_never_negative(self):
        for outcome in (True, False):
            assert min(ScoringRules.stat_deltas(outcome).values()) >= 0
