"""
Use case: Confirm a signup from an identity-provider token.

Input: id_token
Output: (verified email, promoted flag)
Side effects: Same as PromotePendingRegistrationUseCase.
Failure cases: AuthenticationError, EmailNotVerifiedError.
"""

import logging

from dispo.application.staffing.dtos import PromotePendingRegistrationCommand
from dispo.application.staffing.promote_pending_registration import (
    PromotePendingRegistrationUseCase,
)
from dispo.domain.staffing.email_keys import normalize_email_key
from dispo.domain.staffing.ports import IdentityProviderPort

logger = logging.getLogger(__name__)


class ConfirmRegistrationUseCase:
    """Consumes the identity provider's verified email and promotes the signup."""

    def __init__(
        self,
        identity_port: IdentityProviderPort,
        promote: PromotePendingRegistrationUseCase,
    ) -> None:
        self._identity_port = identity_port
        self._promote = promote

    async def execute(self, id_token: str) -> tuple[str, bool]:
        """Verify the token, then promote the pending registration.

        Returns:
            The verified email and whether a croupier now exists for it.
        """
        email = await self._identity_port.verified_email(id_token)
        logger.info(
            "Confirming registration for verified key=%s", normalize_email_key(email)
        )
        promoted = await self._promote.execute(
            PromotePendingRegistrationCommand(email=email)
        )
        return email, promoted
