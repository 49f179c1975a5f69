"""Destination entity -- the answer key, its clues and trivia facts."""
from typing import List

from globetrotter.domain.enums import Difficulty


class Clue:
    """A hint sentence about a destination."""

    def __init__(self, clue_id: str, text: str, difficulty: Difficulty):
        if not text:
            raise ValueError("Clue text cannot be empty")
        self._id = clue_id
        self._text = text
        self._difficulty = difficulty

    @property
    def id(self) -> str:
        return self._id

    @property
    def text(self) -> str:
        return self._text

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "text": self._text,
            "difficulty": self._difficulty.value,
        }


class Fact:
    """A trivia sentence disclosed after an answer."""

    def __init__(self, fact_id: str, text: str, is_funny: bool = False):
        if not text:
            raise ValueError("Fact text cannot be empty")
        self._id = fact_id
        self._text = text
        self._is_funny = is_funny

    @property
    def id(self) -> str:
        return self._id

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_funny(self) -> bool:
        return self._is_funny

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "text": self._text,
            "is_funny": self._is_funny,
        }


class Destination:
    """
    A place that can be the correct answer to a challenge.
    Read-only once loaded from storage.
    """

    def __init__(
        self,
        destination_id: str,
        name: str,
        country: str,
        continent: str,
        clues: List[Clue] | None = None,
        facts: List[Fact] | None = None,
    ):
        if not name:
            raise ValueError("Destination name cannot be empty")
        self._id = destination_id
        self._name = name
        self._country = country
        self._continent = continent
        self._clues = list(clues or [])
        self._facts = list(facts or [])

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def country(self) -> str:
        return self._country

    @property
    def continent(self) -> str:
        return self._continent

    @property
    def clues(self) -> List[Clue]:
        return list(self._clues)

    @property
    def facts(self) -> List[Fact]:
        return list(self._facts)

    def to_ref(self) -> dict:
        """Reference exposed in a challenge. Clues and facts are withheld."""
        return {"id": self._id, "name": self._name}

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "country": self._country,
            "continent": self._continent,
            "clues": [c.to_dict() for c in self._clues],
            "facts": [f.to_dict() for f in self._facts],
        }
