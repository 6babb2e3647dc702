"""
Use case: Export the roster of an event as CSV.

Input: ExportEventRosterQuery (event_id)
Output: RosterExportResult
Side effects: None (read-only query).
Failure cases: EventNotFoundError.

Events, postulations and croupiers are read in full and joined here.
Postulation.eventId is not queried server-side.
"""

import logging

from dispo.application.staffing.dtos import ExportEventRosterQuery, RosterExportResult
from dispo.domain.staffing.errors import EventNotFoundError
from dispo.domain.staffing.ports import (
    CroupierRepository,
    EventRepository,
    PostulationRepository,
)
from dispo.domain.staffing.roster import render_roster

logger = logging.getLogger(__name__)


class ExportEventRosterUseCase:
    """Joins events, postulations and croupiers into a downloadable roster."""

    def __init__(
        self,
        event_repo: EventRepository,
        postulation_repo: PostulationRepository,
        croupier_repo: CroupierRepository,
    ) -> None:
        """Initialize the use case.

        Args:
            event_repo: Repository for reading events.
            postulation_repo: Repository for reading postulations.
            croupier_repo: Repository for reading croupiers.
        """
        self._event_repo = event_repo
        self._postulation_repo = postulation_repo
        self._croupier_repo = croupier_repo

    async def execute(self, query: ExportEventRosterQuery) -> RosterExportResult:
        """Run the export use case.

        Args:
            query: The event to export.

        Returns:
            The rendered CSV and its suggested filename.

        Raises:
            EventNotFoundError: If no event has the given id.
        """
        events = await self._event_repo.list_all()
        event = next((e for e in events if e.id == query.event_id), None)
        if event is None:
            raise EventNotFoundError(query.event_id)

        postulations = [
            p
            for p in await self._postulation_repo.list_all()
            if p.event_id == query.event_id
        ]
        croupiers = await self._croupier_repo.list_all()

        logger.info(
            "Exporting roster for event=%s with %d postulations",
            query.event_id,
            len(postulations),
        )

        export = render_roster(event, postulations, croupiers)
        return RosterExportResult(
            filename=export.filename,
            content=export.content,
            media_type=export.media_type,
        )
