"""Challenge -- one generated question instance. Derived, never persisted."""
from typing import List

from globetrotter.domain.destination import Clue, Destination


class Challenge:
    """
    Destination reference, sampled clues and the shuffled option list.
    Immutable after creation.
    """

    def __init__(self, destination: Destination, clues: List[Clue], options: List[str]):
        if options.count(destination.name) != 1:
            raise ValueError("The correct answer must appear exactly once")
        if len(set(options)) != len(options):
            raise ValueError("Options must be unique")
        self._destination_ref = destination.to_ref()
        self._clues = list(clues)
        self._options = list(options)

    @property
    def destination_id(self) -> str:
        return self._destination_ref["id"]

    @property
    def destination_name(self) -> str:
        return self._destination_ref["name"]

    @property
    def clues(self) -> List[Clue]:
        return list(self._clues)

    @property
    def options(self) -> List[str]:
        return list(self._options)

    @property
    def correct_index(self) -> int:
        return self._options.index(self._destination_ref["name"])

    def to_dict(self) -> dict:
        return {
            "destination": dict(self._destination_ref),
            "clues": [c.to_dict() for c in self._clues],
            "options": list(self._options),
        }
