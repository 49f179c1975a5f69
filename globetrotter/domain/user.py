"""User and GameStat entities -- identity and cumulative counters."""
from datetime import datetime, timezone
from uuid import uuid4


class GameStat:
    """Aggregated counters for one user. Exactly one per user."""

    def __init__(
        self,
        user_id: str,
        score: int = 0,
        correct: int = 0,
        incorrect: int = 0,
        stat_id: str | None = None,
    ):
        if min(score, correct, incorrect) < 0:
            raise ValueError("GameStat counters cannot be negative")
        self._id = stat_id or str(uuid4())
        self._user_id = user_id
        self._score = score
        self._correct = correct
        self._incorrect = incorrect

    @property
    def id(self) -> str:
        return self._id

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def score(self) -> int:
        return self._score

    @property
    def correct(self) -> int:
        return self._correct

    @property
    def incorrect(self) -> int:
        return self._incorrect

    @property
    def total_answers(self) -> int:
        return self._correct + self._incorrect

    def apply(self, score: int, correct: int, incorrect: int) -> None:
        """Add deltas in place. Counters never decrease."""
        if min(score, correct, incorrect) < 0:
            raise ValueError("GameStat deltas cannot be negative")
        self._score += score
        self._correct += correct
        self._incorrect += incorrect

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "user_id": self._user_id,
            "score": self._score,
            "correct": self._correct,
            "incorrect": self._incorrect,
        }


class User:
    """A player identified by a unique username."""

    def __init__(
        self,
        username: str,
        score: int = 0,
        user_id: str | None = None,
        created_at: str | None = None,
    ):
        if not username or not username.strip():
            raise ValueError("Username cannot be empty")
        if score < 0:
            raise ValueError("Score cannot be negative")
        self._id = user_id or str(uuid4())
        self._username = username.strip()
        self._score = score
        self._created_at = created_at or datetime.now(timezone.utc).isoformat()

    @property
    def id(self) -> str:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def score(self) -> int:
        return self._score

    @property
    def created_at(self) -> str:
        return self._created_at

    def add_points(self, delta: int) -> None:
        if delta < 0:
            raise ValueError("Score delta cannot be negative")
        self._score += delta

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "username": self._username,
            "score": self._score,
            "created_at": self._created_at,
        }
