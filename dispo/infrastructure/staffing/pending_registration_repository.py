"""
Adapter: Pending registration repository.

Implements PendingRegistrationRepository port.
Stores one Firestore document per normalized email in the
pending_registrations collection.
"""

from typing import Any, Optional

from google.cloud.firestore import AsyncClient

from dispo.domain.staffing.entities import PendingRegistration
from dispo.domain.staffing.ports import PendingRegistrationRepository


def _to_document(registration: PendingRegistration) -> dict[str, Any]:
    """Keep only the submitted fields, as the web client does."""
    document: dict[str, Any] = {"email": registration.email}
    if registration.nom is not None:
        document["nom"] = registration.nom
    if registration.prenom is not None:
        document["prenom"] = registration.prenom
    if registration.livegame is not None:
        document["livegame"] = registration.livegame
    document["createdAt"] = registration.created_at
    return document


def _from_document(data: dict[str, Any]) -> PendingRegistration:
    return PendingRegistration(
        email=data.get("email", ""),
        nom=data.get("nom"),
        prenom=data.get("prenom"),
        livegame=data.get("livegame"),
        created_at=data.get("createdAt"),
    )


class FirestorePendingRegistrationRepository(PendingRegistrationRepository):
    """Firestore implementation of the pending registration repository."""

    def __init__(self, client: AsyncClient, collection: str = "pending_registrations") -> None:
        self._collection = client.collection(collection)

    async def put(self, key: str, registration: PendingRegistration) -> None:
        await self._collection.document(key).set(_to_document(registration))

    async def get(self, key: str) -> Optional[PendingRegistration]:
        snapshot = await self._collection.document(key).get()
        if not snapshot.exists:
            return None
        return _from_document(snapshot.to_dict() or {})

    async def delete(self, key: str) -> None:
        await self._collection.document(key).delete()
