"""
Use case: Read a pending registration.

Input: email
Output: PendingRegistrationResult or None
Side effects: None (read-only query).
Failure cases: Store errors propagate. Absence is not an error.
"""

from typing import Optional

from dispo.application.staffing.dtos import PendingRegistrationResult
from dispo.domain.staffing.email_keys import normalize_email_key
from dispo.domain.staffing.ports import PendingRegistrationRepository


class GetPendingRegistrationUseCase:
    """Looks up the pending registration stored for an email."""

    def __init__(self, pending_repo: PendingRegistrationRepository) -> None:
        self._pending_repo = pending_repo

    async def execute(self, email: str) -> Optional[PendingRegistrationResult]:
        registration = await self._pending_repo.get(normalize_email_key(email))
        if registration is None:
            return None
        return PendingRegistrationResult(
            email=registration.email,
            nom=registration.nom,
            prenom=registration.prenom,
            livegame=registration.livegame,
            created_at=registration.created_at,
        )
