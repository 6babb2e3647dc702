"""
Use case: Store a signup while its email awaits verification.

Input: SavePendingRegistrationCommand (email, nom, prenom, livegame)
Output: None
Side effects: Overwrites the pending registration at the normalized email key.
Failure cases: Store errors propagate.
"""

import logging
from datetime import datetime, timezone

from dispo.application.staffing.dtos import SavePendingRegistrationCommand
from dispo.domain.staffing.email_keys import normalize_email_key
from dispo.domain.staffing.entities import PendingRegistration
from dispo.domain.staffing.ports import PendingRegistrationRepository

logger = logging.getLogger(__name__)


class SavePendingRegistrationUseCase:
    """Writes a pending registration, replacing any previous one for the same key."""

    def __init__(self, pending_repo: PendingRegistrationRepository) -> None:
        self._pending_repo = pending_repo

    async def execute(self, command: SavePendingRegistrationCommand) -> None:
        """Run the save pending registration use case.

        Args:
            command: The submitted signup fields.
        """
        key = normalize_email_key(command.email)
        logger.info("Saving pending registration key=%s", key)

        await self._pending_repo.put(
            key,
            PendingRegistration(
                email=command.email,
                nom=command.nom,
                prenom=command.prenom,
                livegame=command.livegame,
                created_at=datetime.now(timezone.utc),
            ),
        )
