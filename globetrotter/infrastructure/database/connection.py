"""Database engine and session factory.

Call init_engine() once at startup, then hand dynamic_session_factory to the
SQL repositories. Every session it yields rolls back on error and is closed
on exit.
"""
import logging
import os
import re
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

log = logging.getLogger("globetrotter.db")

_engine = None
_SessionLocal = None

# Matches a postgres(ql):// URL anywhere inside a string.
_PG_URL_RE = re.compile(r"(postgres(?:ql)?://\S+)")


def resolve_database_url(env_var: str = "DATABASE_URL") -> str:
    """Read a database URL from environment and return a clean SQLAlchemy URL.

    Handles:
    - Leading/trailing whitespace or newlines from copy-paste.
    - Literal surrounding quotes.
    - A full ``psql`` command pasted instead of just the URL.
    - ``postgres://`` scheme that SQLAlchemy rejects (needs ``postgresql://``).
    """
    raw = os.environ.get(env_var, "").strip()

    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ('"', "'"):
        raw = raw[1:-1].strip()

    match = _PG_URL_RE.search(raw)
    url = match.group(1) if match else raw
    url = url.rstrip("'\"").strip()

    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)

    return url


def mask_url(url: str) -> str:
    """Host part only -- credentials never reach the logs."""
    if "@" not in url:
        return "<no-host>"
    return url.split("@")[-1].split("?")[0]


def init_engine(url: str | None = None) -> None:
    """Create the engine and sessionmaker. No-op when no URL is configured."""
    global _engine, _SessionLocal

    url = url or resolve_database_url()
    if not url:
        log.info("DATABASE_URL is empty -- skipping database init.")
        return

    log.info("Initialising engine -> %s", mask_url(url))
    kwargs = {"pool_pre_ping": True, "echo": False}
    if url.startswith("postgresql"):
        kwargs.update(pool_size=3, max_overflow=5, pool_timeout=15, pool_recycle=1800)
    _engine = create_engine(url, **kwargs)
    _SessionLocal = sessionmaker(bind=_engine, expire_on_commit=False)


def get_engine():
    """Return the SQLAlchemy engine (may be None)."""
    return _engine


def get_session_factory():
    """Return the sessionmaker. Raises if init_engine() was not called."""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialised. Call init_engine() first.")
    return _SessionLocal


def create_tables() -> None:
    """Create all tables (idempotent)."""
    from globetrotter.infrastructure.database.models import Base

    if _engine is None:
        return
    Base.metadata.create_all(bind=_engine)
    log.info("Tables verified.")


def check_health() -> bool:
    """Lightweight connectivity probe."""
    if _engine is None:
        return False
    try:
        with _engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as exc:
        log.warning("Health probe failed: %s: %s", type(exc).__name__, exc)
        return False


class DynamicSessionFactory:
    """Callable proxy passed to repositories.

    Behaves like a sessionmaker but resolves the factory lazily and rolls
    back on any exception:
        with dynamic_session_factory() as session:
            ...
    """

    def __init__(self, factory=None):
        self._factory = factory

    def __call__(self):
        return self._managed_session()

    @contextmanager
    def _managed_session(self):
        sf = self._factory or get_session_factory()
        session = sf()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


# Singleton -- import and pass to all SQL repositories.
dynamic_session_factory = DynamicSessionFactory()
