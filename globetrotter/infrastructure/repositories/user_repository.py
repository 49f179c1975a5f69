"""User and GameStat persistence (JSON file + in-memory cache)."""
import json
import os
import threading
from typing import Dict, List, Optional

from globetrotter.domain.errors import NotFoundError
from globetrotter.domain.user import GameStat, User


def _copy_user(user: User) -> User:
    return User(
        username=user.username,
        score=user.score,
        user_id=user.id,
        created_at=user.created_at,
    )


def _copy_stat(stat: GameStat) -> GameStat:
    return GameStat(
        user_id=stat.user_id,
        score=stat.score,
        correct=stat.correct,
        incorrect=stat.incorrect,
        stat_id=stat.id,
    )


class UserRepository:
    """
    JSON-backed user storage. Each user owns exactly one GameStat.

    Every access runs under one lock. Writes build the new state on copies
    and swap it into the cache only after the file write succeeds, so a
    failed write leaves the cache as it was.
    """

    def __init__(self, data_path: str = "data/users.json"):
        self._data_path = data_path
        self._users: Dict[str, User] = {}
        self._stats: Dict[str, GameStat] = {}
        self._lock = threading.Lock()
        self._load()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def find_by_username(self, username: str) -> Optional[User]:
        """Exact username lookup."""
        with self._lock:
            user = self._find_by_username(username)
            return _copy_user(user) if user else None

    def find_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return _copy_user(user) if user else None

    def get_stat(self, user_id: str) -> Optional[GameStat]:
        with self._lock:
            stat = self._stats.get(user_id)
            return _copy_stat(stat) if stat else None

    def get_top(self, limit: int = 10) -> List[User]:
        """Highest score first; ties go to the earlier account."""
        with self._lock:
            users = sorted(self._users.values(), key=lambda u: (-u.score, u.created_at))
            return [_copy_user(u) for u in users[:limit]]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(self, username: str) -> User:
        """Create a user with a zeroed GameStat. Returns the existing one on duplicates."""
        with self._lock:
            existing = self._find_by_username(username)
            if existing:
                return _copy_user(existing)
            user = User(username=username)
            self._commit({user.id: user}, {user.id: GameStat(user_id=user.id)})
            return _copy_user(user)

    def increment_score(self, user_id: str, delta: int) -> User:
        with self._lock:
            user = _copy_user(self._require(user_id))
            user.add_points(delta)
            self._commit({user_id: user}, {})
            return _copy_user(user)

    def upsert_stat(self, user_id: str, score: int, correct: int, incorrect: int) -> GameStat:
        with self._lock:
            self._require(user_id)
            stat = self._next_stat(user_id, score, correct, incorrect)
            self._commit({}, {user_id: stat})
            return _copy_stat(stat)

    def record_answer(self, user_id: str, score: int, correct: int, incorrect: int) -> User:
        """Apply one answer to the user score and its GameStat as a single write."""
        with self._lock:
            user = _copy_user(self._require(user_id))
            user.add_points(score)
            stat = self._next_stat(user_id, score, correct, incorrect)
            self._commit({user_id: user}, {user_id: stat})
            return _copy_user(user)

    # ------------------------------------------------------------------
    # Internal (caller holds the lock)
    # ------------------------------------------------------------------

    def _find_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def _require(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found.")
        return user

    def _next_stat(self, user_id: str, score: int, correct: int, incorrect: int) -> GameStat:
        current = self._stats.get(user_id)
        if current is None:
            return GameStat(user_id=user_id, score=score, correct=correct, incorrect=incorrect)
        stat = _copy_stat(current)
        stat.apply(score, correct, incorrect)
        return stat

    def _commit(self, users: Dict[str, User], stats: Dict[str, GameStat]) -> None:
        """Persist the merged state, then make it the cache."""
        new_users = {**self._users, **users}
        new_stats = {**self._stats, **stats}
        self._persist(new_users, new_stats)
        self._users = new_users
        self._stats = new_stats

    def _persist(self, users: Dict[str, User], stats: Dict[str, GameStat]) -> None:
        """Write all users and stats to JSON file."""
        directory = os.path.dirname(self._data_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        data = {}
        for uid, user in users.items():
            entry = user.to_dict()
            stat = stats.get(uid)
            entry["stats"] = stat.to_dict() if stat else None
            data[uid] = entry
        with open(self._data_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def _load(self) -> None:
        if not os.path.exists(self._data_path):
            return
        try:
            with open(self._data_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError):
            return
        for uid, udata in data.items():
            self._users[uid] = User(
                user_id=udata["id"],
                username=udata["username"],
                score=udata.get("score", 0),
                created_at=udata.get("created_at"),
            )
            sdata = udata.get("stats")
            if sdata:
                self._stats[uid] = GameStat(
                    stat_id=sdata.get("id"),
                    user_id=uid,
                    score=sdata.get("score", 0),
                    correct=sdata.get("correct", 0),
                    incorrect=sdata.get("incorrect", 0),
                )
