"""Game API routes -- random challenge, answer check, destination catalog."""
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field
from typing import Optional

from globetrotter.application.evaluate_answer import evaluate_answer
from globetrotter.application.generate_challenge import (
    DEFAULT_CLUE_COUNT,
    DEFAULT_OPTION_COUNT,
    generate_challenge,
)
from globetrotter.domain.errors import (
    AggregationError,
    InvalidInputError,
    NoDataError,
    NotFoundError,
)


router = APIRouter(prefix="/api", tags=["game"])


class CheckAnswerRequest(BaseModel):
    # Optional so that a missing field is reported as 400 by the use case.
    destination_id: Optional[str] = None
    answer: Optional[str] = None
    user_id: Optional[str] = Field(None, max_length=64)


_destination_repo = None
_user_repo = None


def init_routes(destination_repo, user_repo):
    global _destination_repo, _user_repo
    _destination_repo = destination_repo
    _user_repo = user_repo


@router.get("/game/random")
def api_random_challenge(
    clue_count: int = Query(DEFAULT_CLUE_COUNT, ge=1, le=10),
    option_count: int = Query(DEFAULT_OPTION_COUNT, ge=1, le=10),
):
    """Generate a new challenge. Public."""
    try:
        challenge = generate_challenge(
            _destination_repo.get_all(),
            clue_count=clue_count,
            option_count=option_count,
        )
    except NoDataError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return challenge.to_dict()


@router.post("/game/check")
def api_check_answer(req: CheckAnswerRequest):
    """Judge an answer; updates the user's score when user_id is given."""
    try:
        return evaluate_answer(
            _destination_repo,
            _user_repo,
            destination_id=req.destination_id,
            answer=req.answer,
            user_id=req.user_id,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AggregationError as e:
        raise HTTPException(status_code=500, detail={
            "error": str(e),
            "is_correct": e.is_correct,
            "fact": e.fact,
        })


@router.get("/destinations")
def api_get_destinations():
    """Full catalog with clues and facts."""
    return [d.to_dict() for d in _destination_repo.get_all()]
