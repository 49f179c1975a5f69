"""Tests for DestinationRepository -- JSON catalog loading."""
import json
import os

from globetrotter.domain.enums import Difficulty
from globetrotter.infrastructure.repositories.destination_repository import (
    DestinationRepository,
    destination_from_dict,
)

BUNDLED = os.path.join(
    os.path.dirname(__file__), "..", "..", "globetrotter", "data", "destinations.json"
)


class TestDestinationFromDict:
    def test_generates_ids_when_missing(self):
        d = destination_from_dict({
            "id": "lima",
            "name": "Lima",
            "clues": [{"text": "Capital of Peru", "difficulty": "easy"}],
            "facts": [{"text": "Founded in 1535"}],
        })
        assert d.clues[0].id == "lima-clue-0"
        assert d.clues[0].difficulty == Difficulty.EASY
        assert d.facts[0].id == "lima-fact-0"
        assert d.facts[0].is_funny is False

    def test_missing_country_defaults_empty(self):
        d = destination_from_dict({"id": "x", "name": "X"})
        assert d.country == ""
        assert d.clues == []


class TestDestinationRepository:
    def test_load_all(self, destination_repo):
        assert destination_repo.count() == 6
        names = {d.name for d in destination_repo.get_all()}
        assert {"Paris", "Tokyo", "Atlantis"} <= names

    def test_get_by_id(self, destination_repo):
        d = destination_repo.get_by_id("tokyo")
        assert d.name == "Tokyo"
        assert len(d.clues) == 4
        assert len(d.facts) == 3

    def test_get_by_id_missing(self, destination_repo):
        assert destination_repo.get_by_id("missing-id") is None

    def test_nonexistent_file_is_empty_catalog(self, tmp_path):
        repo = DestinationRepository(str(tmp_path / "nope.json"))
        assert repo.get_all() == []

    def test_empty_file_list(self, tmp_path):
        path = tmp_path / "destinations.json"
        path.write_text(json.dumps([]))
        assert DestinationRepository(str(path)).count() == 0

    def test_bundled_seed_data_loads(self):
        repo = DestinationRepository(BUNDLED)
        assert repo.count() >= 6
        for d in repo.get_all():
            assert d.clues
            assert d.facts
        assert len({d.name for d in repo.get_all()}) == repo.count()
