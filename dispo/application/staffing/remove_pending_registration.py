"""
Use case: Delete a pending registration.

Input: email
Output: None
Side effects: Deletes the pending registration at the normalized email key.
Failure cases: None. A missing record and a failed delete are both
treated as success so that promotion stays idempotent.
"""

import logging

from dispo.domain.staffing.email_keys import normalize_email_key
from dispo.domain.staffing.ports import PendingRegistrationRepository

logger = logging.getLogger(__name__)


class RemovePendingRegistrationUseCase:
    """Idempotently removes the pending registration for an email."""

    def __init__(self, pending_repo: PendingRegistrationRepository) -> None:
        self._pending_repo = pending_repo

    async def execute(self, email: str) -> None:
        """Run the remove pending registration use case.

        Args:
            email: Email whose pending registration should disappear.
        """
        key = normalize_email_key(email)
        try:
            await self._pending_repo.delete(key)
        except Exception as exc:
            logger.warning(
                "Ignoring failed delete of pending registration key=%s: %s",
                key,
                type(exc).__name__,
            )
            return
        logger.info("Removed pending registration key=%s", key)
