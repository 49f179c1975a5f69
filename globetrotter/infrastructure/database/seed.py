"""Seed destination data from JSON into the database."""
import json
import logging
import os

from globetrotter.infrastructure.database.models import (
    ClueModel, DestinationModel, FactModel,
)

log = logging.getLogger("globetrotter.seed")


def seed_destinations(session_factory, json_path: str) -> int:
    """Load destinations, clues and facts from a JSON file.

    Seeds only when the destinations table is empty.
    Returns the number of destinations seeded (0 if already populated).
    """
    if not os.path.exists(json_path):
        log.warning("Seed file not found: %s", json_path)
        return 0

    with open(json_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    with session_factory() as session:
        if session.query(DestinationModel).count() > 0:
            return 0

        for item in raw:
            destination = DestinationModel(
                id=item["id"],
                name=item["name"],
                country=item.get("country", ""),
                continent=item.get("continent", ""),
            )
            destination.clues = [
                ClueModel(text=c["text"], difficulty=c.get("difficulty", "medium"), position=i)
                for i, c in enumerate(item.get("clues", []))
            ]
            destination.facts = [
                FactModel(text=f["text"], is_funny=f.get("is_funny", False), position=i)
                for i, f in enumerate(item.get("facts", []))
            ]
            session.add(destination)

        session.commit()
        log.info("Seeded %d destinations.", len(raw))
        return len(raw)
