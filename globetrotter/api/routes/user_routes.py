"""User API routes -- registration, profile lookup, leaderboard."""
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field
from typing import Optional

from globetrotter.application.users import get_top_users, get_user_profile, register_user
from globetrotter.domain.errors import InvalidInputError, NotFoundError


router = APIRouter(prefix="/api", tags=["users"])


class RegisterUserRequest(BaseModel):
    username: Optional[str] = Field(None, max_length=50)


_user_repo = None


def init_user_routes(user_repo):
    global _user_repo
    _user_repo = user_repo


@router.post("/users")
def api_register_user(req: RegisterUserRequest):
    """Find or create a user by username."""
    try:
        return register_user(_user_repo, req.username).to_dict()
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/users")
def api_get_users(
    username: Optional[str] = None,
    limit: int = Query(10, ge=1, le=100),
):
    """Profile for `username`, or the top users by score when omitted."""
    if username is None:
        return get_top_users(_user_repo, limit)
    try:
        return get_user_profile(_user_repo, username)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
