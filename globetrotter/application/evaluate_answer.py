"""Use case: judge a submitted answer and aggregate the user's score."""
import logging
import random

from globetrotter.application.generate_challenge import pick_fact
from globetrotter.domain.errors import AggregationError, NotFoundError
from globetrotter.domain.invariant import validate_identifier, validate_required_fields
from globetrotter.domain.scoring import ScoringRules

log = logging.getLogger("globetrotter.game")


def evaluate_answer(
    destination_repo,
    user_repo,
    destination_id: str,
    answer: str,
    user_id: str | None = None,
    rng: random.Random | None = None,
) -> dict:
    """
    Process an answer submission.

    Correctness is exact, case-sensitive equality with the destination name.
    When `user_id` is given the score and GameStat are updated in a single
    repository call; anonymous submissions skip aggregation.
    Returns {"is_correct", "fact", "user"}.
    """
    validate_identifier("destination_id", destination_id)
    validate_required_fields(answer=answer)

    destination = destination_repo.get_by_id(destination_id)
    if destination is None:
        raise NotFoundError(f"Destination {destination_id} not found.")

    is_correct = answer == destination.name
    fact = pick_fact(destination, rng)
    fact_dict = fact.to_dict() if fact else None

    user = None
    if user_id:
        deltas = ScoringRules.stat_deltas(is_correct)
        try:
            user = user_repo.record_answer(user_id, **deltas)
        except NotFoundError:
            raise
        except Exception as exc:
            log.error(
                "Score aggregation failed for user %s: %s: %s",
                user_id, type(exc).__name__, exc,
            )
            raise AggregationError(
                "Failed to record answer.", is_correct=is_correct, fact=fact_dict,
            ) from exc

    return {
        "is_correct": is_correct,
        "fact": fact_dict,
        "user": user.to_dict() if user else None,
    }
