"""
Adapter: Croupier repository.

Implements CroupierRepository port on the Firestore croupiers collection.
Document ids are assigned by Firestore.
"""

from typing import Any

from google.cloud.firestore import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter

from dispo.domain.staffing.entities import Croupier
from dispo.domain.staffing.ports import CroupierRepository


def _from_snapshot(snapshot) -> Croupier:
    data = snapshot.to_dict() or {}
    return Croupier(
        id=snapshot.id,
        nom=data.get("nom") or "",
        prenom=data.get("prenom") or "",
        email=data.get("email") or "",
        livegame=bool(data.get("livegame")),
        priorite=data.get("priorite"),
        created_at=data.get("createdAt"),
    )


class FirestoreCroupierRepository(CroupierRepository):
    """Firestore implementation of the croupier repository."""

    def __init__(self, client: AsyncClient, collection: str = "croupiers") -> None:
        self._collection = client.collection(collection)

    async def find_by_email(self, email: str) -> list[Croupier]:
        """Return croupiers whose stored email equals ``email`` exactly."""
        query = self._collection.where(filter=FieldFilter("email", "==", email))
        return [_from_snapshot(s) for s in await query.get()]

    async def add(self, croupier: Croupier) -> Croupier:
        """Add a croupier document and return the entity with its new id."""
        document: dict[str, Any] = {
            "nom": croupier.nom,
            "prenom": croupier.prenom,
            "email": croupier.email,
            "livegame": croupier.livegame,
            "priorite": croupier.priorite,
            "createdAt": croupier.created_at,
        }
        _, ref = await self._collection.add(document)
        return Croupier(
            id=ref.id,
            nom=croupier.nom,
            prenom=croupier.prenom,
            email=croupier.email,
            livegame=croupier.livegame,
            priorite=croupier.priorite,
            created_at=croupier.created_at,
        )

    async def list_all(self) -> list[Croupier]:
        return [_from_snapshot(s) for s in await self._collection.get()]
