"""
Use case: Promote a verified pending registration to a croupier.

Input: PromotePendingRegistrationCommand (email)
Output: bool — False when no pending registration exists, True otherwise.
Side effects: Creates at most one croupier, then removes the pending registration.
Failure cases: Store errors on lookup or creation propagate.

The croupier lookup and creation are not transactional. Two concurrent
promotions of the same email can both create a croupier. The pending
registration is only removed after the croupier write has completed, so a
crash in between leaves the registration in place and a retry finds the
existing croupier instead of creating a second one.
"""

import logging
from datetime import datetime, timezone

from dispo.application.staffing.dtos import PromotePendingRegistrationCommand
from dispo.application.staffing.remove_pending_registration import (
    RemovePendingRegistrationUseCase,
)
from dispo.domain.staffing.email_keys import normalize_email_key
from dispo.domain.staffing.entities import DEFAULT_PRIORITE, Croupier
from dispo.domain.staffing.ports import (
    CroupierRepository,
    PendingRegistrationRepository,
)

logger = logging.getLogger(__name__)


class PromotePendingRegistrationUseCase:
    """Creates the croupier record for a verified signup, once per email."""

    def __init__(
        self,
        pending_repo: PendingRegistrationRepository,
        croupier_repo: CroupierRepository,
    ) -> None:
        """Initialize the use case.

        Args:
            pending_repo: Repository holding pending registrations.
            croupier_repo: Repository holding confirmed croupiers.
        """
        self._pending_repo = pending_repo
        self._croupier_repo = croupier_repo
        self._remove_pending = RemovePendingRegistrationUseCase(pending_repo)

    async def execute(self, command: PromotePendingRegistrationCommand) -> bool:
        """Run the promotion.

        Args:
            command: The verified email.

        Returns:
            False if there was nothing to promote, True once a croupier
            exists for the email.
        """
        email = command.email
        key = normalize_email_key(email)
        pending = await self._pending_repo.get(key)
        if pending is None:
            logger.info("No pending registration to promote for key=%s", key)
            return False

        existing = await self._croupier_repo.find_by_email(email)
        if existing:
            logger.info("Croupier already exists for key=%s, skipping creation", key)
            await self._remove_pending.execute(email)
            return True

        croupier = await self._croupier_repo.add(
            Croupier(
                id=None,
                nom=pending.nom or "",
                prenom=pending.prenom or "",
                email=pending.email,
                livegame=bool(pending.livegame),
                priorite=DEFAULT_PRIORITE,
                created_at=datetime.now(timezone.utc),
            )
        )
        logger.info("Created croupier id=%s for key=%s", croupier.id, key)

        await self._remove_pending.execute(email)
        return True
