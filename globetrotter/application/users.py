"""Use cases: user registration, profile lookup and leaderboard."""
from typing import List

from globetrotter.domain.errors import NotFoundError
from globetrotter.domain.invariant import validate_positive_count, validate_username
from globetrotter.domain.user import User


def register_user(user_repo, username: str) -> User:
    """
    Idempotent find-or-create by username.
    A new user starts with a zeroed GameStat.
    """
    username = validate_username(username)
    existing = user_repo.find_by_username(username)
    if existing:
        return existing
    return user_repo.create(username)


def get_user_profile(user_repo, username: str) -> dict:
    """User record plus its GameStat."""
    username = validate_username(username)
    user = user_repo.find_by_username(username)
    if user is None:
        raise NotFoundError(f"User {username} not found.")
    stat = user_repo.get_stat(user.id)
    profile = user.to_dict()
    profile["stats"] = stat.to_dict() if stat else None
    return profile


def get_top_users(user_repo, limit: int = 10) -> List[dict]:
    """Users ordered by cumulative score, highest first."""
    validate_positive_count("limit", limit)
    return [u.to_dict() for u in user_repo.get_top(limit)]
