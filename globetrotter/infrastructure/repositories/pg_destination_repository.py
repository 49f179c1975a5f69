"""PostgreSQL-backed destination repository."""
import logging
from typing import List

from globetrotter.domain.destination import Clue, Destination, Fact
from globetrotter.domain.enums import Difficulty
from globetrotter.infrastructure.database.models import DestinationModel

log = logging.getLogger("globetrotter.db")


class PgDestinationRepository:
    """Destination catalog via PostgreSQL. Clues and facts load eagerly."""

    def __init__(self, session_factory):
        self._sf = session_factory

    def get_all(self) -> List[Destination]:
        try:
            with self._sf() as session:
                rows = session.query(DestinationModel).order_by(DestinationModel.name).all()
                return [self._to_domain(r) for r in rows]
        except Exception as exc:
            log.error("PgDestinationRepository.get_all() failed: %s: %s", type(exc).__name__, exc)
            raise

    def get_by_id(self, destination_id: str) -> Destination | None:
        try:
            with self._sf() as session:
                row = session.get(DestinationModel, destination_id)
                return self._to_domain(row) if row else None
        except Exception as exc:
            log.error("PgDestinationRepository.get_by_id(%r) failed: %s", destination_id, exc)
            raise

    def count(self) -> int:
        with self._sf() as session:
            return session.query(DestinationModel).count()

    @staticmethod
    def _to_domain(row: DestinationModel) -> Destination:
        return Destination(
            destination_id=row.id,
            name=row.name,
            country=row.country,
            continent=row.continent,
            clues=[Clue(c.id, c.text, Difficulty(c.difficulty)) for c in row.clues],
            facts=[Fact(f.id, f.text, f.is_funny) for f in row.facts],
        )
