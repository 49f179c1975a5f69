"""Loads destinations from JSON into domain entities."""
import json
import os
from typing import List

from globetrotter.domain.destination import Clue, Destination, Fact
from globetrotter.domain.enums import Difficulty


def destination_from_dict(item: dict) -> Destination:
    """Build a Destination from its JSON/seed representation."""
    clues = [
        Clue(
            clue_id=c.get("id") or f"{item['id']}-clue-{i}",
            text=c["text"],
            difficulty=Difficulty(c.get("difficulty", "medium")),
        )
        for i, c in enumerate(item.get("clues", []))
    ]
    facts = [
        Fact(
            fact_id=f.get("id") or f"{item['id']}-fact-{i}",
            text=f["text"],
            is_funny=f.get("is_funny", False),
        )
        for i, f in enumerate(item.get("facts", []))
    ]
    return Destination(
        destination_id=item["id"],
        name=item["name"],
        country=item.get("country", ""),
        continent=item.get("continent", ""),
        clues=clues,
        facts=facts,
    )


class DestinationRepository:
    """JSON-backed destination catalog. Read-only."""

    def __init__(self, data_path: str):
        self._data_path = data_path
        self._destinations: List[Destination] = []
        self._load()

    def _load(self) -> None:
        if not os.path.exists(self._data_path):
            self._destinations = []
            return

        with open(self._data_path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        self._destinations = [destination_from_dict(item) for item in raw]

    def get_all(self) -> List[Destination]:
        return list(self._destinations)

    def get_by_id(self, destination_id: str) -> Destination | None:
        for d in self._destinations:
            if d.id == destination_id:
                return d
        return None

    def count(self) -> int:
        return len(self._destinations)
