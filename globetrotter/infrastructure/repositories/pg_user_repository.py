"""PostgreSQL-backed user and GameStat repository."""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from globetrotter.domain.errors import NotFoundError
from globetrotter.domain.user import GameStat, User
from globetrotter.infrastructure.database.models import GameStatModel, UserModel


class PgUserRepository:
    """User persistence via PostgreSQL. Score changes are SQL-side increments."""

    def __init__(self, session_factory):
        self._sf = session_factory

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def find_by_username(self, username: str) -> Optional[User]:
        with self._sf() as session:
            row = session.query(UserModel).filter(UserModel.username == username).first()
            return self._to_domain(row) if row else None

    def find_by_id(self, user_id: str) -> Optional[User]:
        with self._sf() as session:
            row = session.get(UserModel, user_id)
            return self._to_domain(row) if row else None

    def get_stat(self, user_id: str) -> Optional[GameStat]:
        with self._sf() as session:
            row = session.query(GameStatModel).filter(GameStatModel.user_id == user_id).first()
            return self._stat_to_domain(row) if row else None

    def get_top(self, limit: int = 10) -> List[User]:
        with self._sf() as session:
            rows = (
                session.query(UserModel)
                .order_by(UserModel.score.desc(), UserModel.created_at)
                .limit(limit)
                .all()
            )
            return [self._to_domain(r) for r in rows]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(self, username: str) -> User:
        """Insert user + zeroed GameStat. A concurrent duplicate returns the winner."""
        user = User(username=username)
        try:
            with self._sf() as session:
                session.add(UserModel(
                    id=user.id,
                    username=user.username,
                    score=0,
                    created_at=datetime.fromisoformat(user.created_at),
                ))
                session.flush()
                session.add(GameStatModel(user_id=user.id))
                session.commit()
            return user
        except IntegrityError:
            existing = self.find_by_username(user.username)
            if existing is None:
                raise
            return existing

    def increment_score(self, user_id: str, delta: int) -> User:
        with self._sf() as session:
            self._increment_user(session, user_id, delta)
            session.commit()
            return self._to_domain(session.get(UserModel, user_id))

    def upsert_stat(self, user_id: str, score: int, correct: int, incorrect: int) -> GameStat:
        with self._sf() as session:
            if session.get(UserModel, user_id) is None:
                raise NotFoundError(f"User {user_id} not found.")
            self._upsert_stat(session, user_id, score, correct, incorrect)
            session.commit()
            row = session.query(GameStatModel).filter(GameStatModel.user_id == user_id).one()
            return self._stat_to_domain(row)

    def record_answer(self, user_id: str, score: int, correct: int, incorrect: int) -> User:
        """Score increment and GameStat upsert in one transaction."""
        with self._sf() as session:
            # The UPDATE takes the user row lock until commit, which serializes
            # concurrent submissions for the same user through the stat upsert.
            self._increment_user(session, user_id, score)
            self._upsert_stat(session, user_id, score, correct, incorrect)
            session.commit()
            return self._to_domain(session.get(UserModel, user_id))

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _increment_user(session, user_id: str, delta: int) -> None:
        if delta < 0:
            raise ValueError("Score delta cannot be negative")
        result = session.execute(
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(score=UserModel.score + delta)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError(f"User {user_id} not found.")

    @staticmethod
    def _upsert_stat(session, user_id: str, score: int, correct: int, incorrect: int) -> None:
        result = session.execute(
            update(GameStatModel)
            .where(GameStatModel.user_id == user_id)
            .values(
                score=GameStatModel.score + score,
                correct=GameStatModel.correct + correct,
                incorrect=GameStatModel.incorrect + incorrect,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            session.add(GameStatModel(
                user_id=user_id, score=score, correct=correct, incorrect=incorrect,
            ))
            session.flush()

    @staticmethod
    def _to_domain(row: UserModel) -> User:
        created_at = row.created_at.isoformat() if row.created_at else None
        return User(
            user_id=row.id,
            username=row.username,
            score=row.score,
            created_at=created_at,
        )

    @staticmethod
    def _stat_to_domain(row: GameStatModel) -> GameStat:
        return GameStat(
            stat_id=row.id,
            user_id=row.user_id,
            score=row.score,
            correct=row.correct,
            incorrect=row.incorrect,
        )
