"""Scoring rules for answer submissions."""


class ScoringRules:
    """Point calculation constants and logic."""

    POINTS_CORRECT = 1
    POINTS_WRONG = 0

    @staticmethod
    def calculate_points(is_correct: bool) -> int:
        if is_correct:
            return ScoringRules.POINTS_CORRECT
        return ScoringRules.POINTS_WRONG

    @staticmethod
    def stat_deltas(is_correct: bool) -> dict:
        """Counter increments applied to a GameStat for one answer."""
        return {
            "score": ScoringRules.calculate_points(is_correct),
            "correct": 1 if is_correct else 0,
            "incorrect": 0 if is_correct else 1,
        }
