"""Entry point. Wires repos into routes.

Persistence strategy:
  - If DATABASE_URL is set  -> PostgreSQL via SQLAlchemy, seeded at startup.
  - Otherwise               -> JSON file fallback (development only).
"""
import logging
import os
from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_DIR = os.path.dirname(BASE_DIR)
load_dotenv(os.path.join(PROJECT_DIR, ".env"))

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("globetrotter.startup")

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from globetrotter.api.routes.game_routes import router as game_router, init_routes
from globetrotter.api.routes.user_routes import router as user_router, init_user_routes

DATA_DIR = os.environ.get("GLOBETROTTER_DATA_DIR", os.path.join(BASE_DIR, "data"))
SEED_PATH = os.path.join(BASE_DIR, "data", "destinations.json")

DATABASE_URL = os.environ.get("DATABASE_URL", "")

app = FastAPI(
    title="Globetrotter",
    description="Guess the destination from its clues.",
    version="1.0.0",
)

# CORS configuration: read allowed origins from env (comma-separated).
_allowed = os.environ.get("ALLOWED_ORIGINS", "").strip()
if _allowed:
    allow_origins = [o.strip() for o in _allowed.split(",") if o.strip()]
else:
    allow_origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Persistence wiring
# ---------------------------------------------------------------------------

if DATABASE_URL:
    from globetrotter.infrastructure.database.connection import (
        init_engine, create_tables, dynamic_session_factory,
    )
    from globetrotter.infrastructure.database.seed import seed_destinations
    from globetrotter.infrastructure.repositories.pg_destination_repository import (
        PgDestinationRepository,
    )
    from globetrotter.infrastructure.repositories.pg_user_repository import PgUserRepository

    init_engine()
    create_tables()
    _sf = dynamic_session_factory

    destination_repo = PgDestinationRepository(_sf)
    user_repo = PgUserRepository(_sf)

    try:
        seed_destinations(_sf, SEED_PATH)
    except Exception as _seed_exc:
        log.warning("Seed skipped (DB unavailable): %s: %s", type(_seed_exc).__name__, _seed_exc)

    _persistence = "postgresql"
else:
    from globetrotter.infrastructure.repositories.destination_repository import (
        DestinationRepository,
    )
    from globetrotter.infrastructure.repositories.user_repository import UserRepository

    destination_repo = DestinationRepository(
        data_path=os.path.join(DATA_DIR, "destinations.json")
    )
    user_repo = UserRepository(
        data_path=os.path.join(DATA_DIR, "users.json")
    )
    _persistence = "json"

log.info("Persistence: %s", _persistence)

init_routes(destination_repo, user_repo)
init_user_routes(user_repo)

app.include_router(game_router)
app.include_router(user_router)


@app.get("/health")
def health():
    result = {
        "status": "online",
        "persistence": _persistence,
    }
    try:
        result["destinations_loaded"] = destination_repo.count()
    except Exception as exc:
        result["destinations_loaded"] = f"ERROR: {type(exc).__name__}"
    if DATABASE_URL:
        from globetrotter.infrastructure.database.connection import check_health
        result["database"] = "connected" if check_health() else "disconnected"
    return result


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "globetrotter.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_excludes=["*.json", "__pycache__/*", "data/*"],
    )
