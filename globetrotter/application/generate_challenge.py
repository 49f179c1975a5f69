"""Use case: build a multiple-choice challenge from the destination catalog."""
import random
from typing import List, Sequence

from globetrotter.domain.challenge import Challenge
from globetrotter.domain.destination import Clue, Destination, Fact
from globetrotter.domain.invariant import (
    validate_catalog_not_empty,
    validate_positive_count,
)

DEFAULT_CLUE_COUNT = 2
DEFAULT_OPTION_COUNT = 4


def pick_clues(destination: Destination, count: int = DEFAULT_CLUE_COUNT,
               rng: random.Random | None = None) -> List[Clue]:
    """Sample up to `count` distinct clues. Never pads."""
    rng = rng or random
    clues = destination.clues
    return rng.sample(clues, min(count, len(clues)))


def pick_fact(destination: Destination, rng: random.Random | None = None) -> Fact | None:
    """Uniform choice among the destination's facts, None when it has none."""
    rng = rng or random
    facts = destination.facts
    if not facts:
        return None
    return rng.choice(facts)


def build_options(
    correct: Destination,
    catalog: Sequence[Destination],
    count: int = DEFAULT_OPTION_COUNT,
    rng: random.Random | None = None,
) -> List[str]:
    """
    Correct name plus up to `count - 1` distractor names, uniformly shuffled.
    Distractors sharing the correct name (or each other's) are skipped.
    """
    rng = rng or random
    distractors = []
    seen = {correct.name}
    for d in catalog:
        if d.id == correct.id or d.name in seen:
            continue
        seen.add(d.name)
        distractors.append(d.name)

    options = [correct.name]
    options.extend(rng.sample(distractors, min(count - 1, len(distractors))))
    # random.shuffle is a Fisher-Yates pass: every permutation equally likely.
    rng.shuffle(options)
    return options


def generate_challenge(
    catalog: Sequence[Destination],
    clue_count: int = DEFAULT_CLUE_COUNT,
    option_count: int = DEFAULT_OPTION_COUNT,
    rng: random.Random | None = None,
) -> Challenge:
    """
    Pick a destination uniformly at random, sample its clues and build
    the option list. Raises NoDataError on an empty catalog.
    """
    validate_positive_count("clue_count", clue_count)
    validate_positive_count("option_count", option_count)
    validate_catalog_not_empty(catalog)

    rng = rng or random
    destination = rng.choice(list(catalog))

    return Challenge(
        destination=destination,
        clues=pick_clues(destination, clue_count, rng),
        options=build_options(destination, catalog, option_count, rng),
    )
