"""
Adapter: Postulation repository.

Implements PostulationRepository port on the Firestore postulations
collection. Firestore enforces no uniqueness on (eventId, email).
"""

from datetime import datetime
from typing import Any, Optional

from google.cloud.firestore import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter

from dispo.domain.staffing.entities import Postulation
from dispo.domain.staffing.ports import PostulationRepository


def _from_snapshot(snapshot) -> Postulation:
    data = snapshot.to_dict() or {}
    return Postulation(
        id=snapshot.id,
        event_id=data.get("eventId") or "",
        email=data.get("email") or "",
        debut=data.get("debut"),
        fin=data.get("fin"),
        created_at=data.get("createdAt"),
        updated_at=data.get("updatedAt"),
    )


class FirestorePostulationRepository(PostulationRepository):
    """Firestore implementation of the postulation repository."""

    def __init__(self, client: AsyncClient, collection: str = "postulations") -> None:
        self._collection = client.collection(collection)

    async def find_by_event_and_email(
        self, event_id: str, email: str
    ) -> list[Postulation]:
        query = self._collection.where(
            filter=FieldFilter("eventId", "==", event_id)
        ).where(filter=FieldFilter("email", "==", email))
        return [_from_snapshot(s) for s in await query.get()]

    async def add(self, postulation: Postulation) -> Postulation:
        document: dict[str, Any] = {
            "eventId": postulation.event_id,
            "email": postulation.email,
            "debut": postulation.debut,
            "fin": postulation.fin,
            "createdAt": postulation.created_at,
        }
        _, ref = await self._collection.add(document)
        return Postulation(
            id=ref.id,
            event_id=postulation.event_id,
            email=postulation.email,
            debut=postulation.debut,
            fin=postulation.fin,
            created_at=postulation.created_at,
        )

    async def update_window(
        self,
        postulation_id: str,
        debut: Optional[str],
        fin: Optional[str],
        updated_at: datetime,
    ) -> None:
        await self._collection.document(postulation_id).update(
            {"debut": debut, "fin": fin, "updatedAt": updated_at}
        )

    async def list_all(self) -> list[Postulation]:
        return [_from_snapshot(s) for s in await self._collection.get()]
