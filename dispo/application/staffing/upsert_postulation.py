"""
Use case: Create or update a croupier's postulation for an event.

Input: UpsertPostulationCommand (event_id, email, debut, fin)
Output: UpsertPostulationResult ("created" or "updated")
Side effects: Adds one postulation or updates the window of an existing one.
Failure cases: Store errors propagate.

Uniqueness of (event_id, email) is best effort: the lookup and the write
are separate calls, so two concurrent first applications can both create.
"""

import logging
from datetime import datetime, timezone

from dispo.application.staffing.dtos import (
    UpsertPostulationCommand,
    UpsertPostulationResult,
)
from dispo.domain.staffing.entities import Postulation, UpsertOutcome
from dispo.domain.staffing.ports import PostulationRepository

logger = logging.getLogger(__name__)


class UpsertPostulationUseCase:
    """Keeps one postulation per croupier and event."""

    def __init__(self, postulation_repo: PostulationRepository) -> None:
        self._postulation_repo = postulation_repo

    async def execute(self, command: UpsertPostulationCommand) -> UpsertPostulationResult:
        """Run the upsert use case.

        Args:
            command: The event, email and availability window.

        Returns:
            Which branch was taken and the id of the postulation written.
        """
        matches = await self._postulation_repo.find_by_event_and_email(
            command.event_id, command.email
        )

        if not matches:
            created = await self._postulation_repo.add(
                Postulation(
                    id=None,
                    event_id=command.event_id,
                    email=command.email,
                    debut=command.debut,
                    fin=command.fin,
                    created_at=datetime.now(timezone.utc),
                )
            )
            logger.info(
                "Created postulation id=%s event=%s", created.id, command.event_id
            )
            return UpsertPostulationResult(
                outcome=UpsertOutcome.CREATED.value, postulation_id=created.id
            )

        if len(matches) > 1:
            logger.warning(
                "Found %d postulations for event=%s and the same email, updating the first",
                len(matches),
                command.event_id,
            )

        target = matches[0]
        await self._postulation_repo.update_window(
            target.id,
            debut=command.debut,
            fin=command.fin,
            updated_at=datetime.now(timezone.utc),
        )
        logger.info("Updated postulation id=%s event=%s", target.id, command.event_id)
        return UpsertPostulationResult(
            outcome=UpsertOutcome.UPDATED.value, postulation_id=target.id
        )
