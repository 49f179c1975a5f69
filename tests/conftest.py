"""
Shared pytest fixtures for the Globetrotter test suite.

Strategy:
- Domain/application tests: pure in-memory, zero network.
- Repository tests: JSON files under tmp_path; SQL repositories on in-memory SQLite.
- API tests: FastAPI TestClient with JSON repos in a tmp directory.
  DATABASE_URL is cleared so nothing touches a real database.
"""
import os
import json
import pytest

os.environ.pop("DATABASE_URL", None)

from globetrotter.domain.destination import Clue, Destination, Fact
from globetrotter.domain.enums import Difficulty


# ---------------------------------------------------------------------------
# Domain helpers (reusable across many test modules)
# ---------------------------------------------------------------------------

_DIFFICULTIES = [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD]


def make_destination(
    destination_id="paris",
    name="Paris",
    n_clues=4,
    n_facts=3,
    country="France",
    continent="Europe",
) -> Destination:
    clues = [
        Clue(f"{destination_id}-c{i}", f"{name} clue {i}", _DIFFICULTIES[i % 3])
        for i in range(n_clues)
    ]
    facts = [
        Fact(f"{destination_id}-f{i}", f"{name} fact {i}", is_funny=(i % 2 == 1))
        for i in range(n_facts)
    ]
    return Destination(destination_id, name, country, continent, clues, facts)


def make_catalog(*names) -> list:
    names = names or ("Paris", "Tokyo", "Rome")
    return [make_destination(n.lower().replace(" ", "-"), n) for n in names]


def destination_json(destination: Destination) -> dict:
    return destination.to_dict()


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def paris():
    return make_destination()


@pytest.fixture
def catalog():
    return make_catalog()


@pytest.fixture
def data_dir(tmp_path):
    """Temp data directory with a small destinations.json and no users."""
    catalog = make_catalog("Paris", "Tokyo", "Rome", "Cairo", "Sydney")
    catalog.append(make_destination("atlantis", "Atlantis", n_clues=1, n_facts=0))
    with open(tmp_path / "destinations.json", "w", encoding="utf-8") as f:
        json.dump([destination_json(d) for d in catalog], f)
    return tmp_path


@pytest.fixture
def destination_repo(data_dir):
    from globetrotter.infrastructure.repositories.destination_repository import (
        DestinationRepository,
    )
    return DestinationRepository(str(data_dir / "destinations.json"))


@pytest.fixture
def user_repo(data_dir):
    from globetrotter.infrastructure.repositories.user_repository import UserRepository
    return UserRepository(str(data_dir / "users.json"))


@pytest.fixture
def test_app(destination_repo, user_repo):
    """FastAPI app wired with JSON repos in the tmp directory."""
    from fastapi import FastAPI
    from globetrotter.api.routes.game_routes import router as game_router, init_routes
    from globetrotter.api.routes.user_routes import router as user_router, init_user_routes

    app = FastAPI()
    init_routes(destination_repo, user_repo)
    init_user_routes(user_repo)
    app.include_router(game_router)
    app.include_router(user_router)
    return app


@pytest.fixture
def client(test_app):
    from fastapi.testclient import TestClient
    return TestClient(test_app)
