"""
Adapter: Firebase Authentication identity provider.

Implements IdentityProviderPort by verifying Firebase ID tokens with the
Admin SDK. Signature and expiry checks are the SDK's business; this
adapter only turns its answer into a verified email or a domain error.
"""

import asyncio
import logging

import firebase_admin
from firebase_admin import auth as firebase_auth

from dispo.domain.staffing.errors import AuthenticationError, EmailNotVerifiedError
from dispo.domain.staffing.ports import IdentityProviderPort

logger = logging.getLogger(__name__)


class FirebaseIdentityProviderAdapter(IdentityProviderPort):
    """Verifies Firebase ID tokens and checks the email_verified claim."""

    def __init__(self, app: firebase_admin.App) -> None:
        self._app = app

    async def verified_email(self, id_token: str) -> str:
        try:
            claims = await asyncio.to_thread(
                firebase_auth.verify_id_token, id_token, app=self._app
            )
        except (ValueError, firebase_auth.InvalidIdTokenError) as exc:
            logger.warning("Rejected ID token: %s", type(exc).__name__)
            raise AuthenticationError("invalid ID token") from exc

        email = claims.get("email")
        if not email:
            raise AuthenticationError("token carries no email")
        if not claims.get("email_verified"):
            raise EmailNotVerifiedError(email)
        return email
