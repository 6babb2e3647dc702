"""
Adapter: Event repository.

Implements EventRepository port. Read-only view of the evenements
collection; events are managed by the back-office flow.
"""

from google.cloud.firestore import AsyncClient

from dispo.domain.staffing.entities import Event
from dispo.domain.staffing.ports import EventRepository


class FirestoreEventRepository(EventRepository):
    """Firestore implementation of the event repository."""

    def __init__(self, client: AsyncClient, collection: str = "evenements") -> None:
        self._collection = client.collection(collection)

    async def list_all(self) -> list[Event]:
        events = []
        for snapshot in await self._collection.get():
            data = snapshot.to_dict() or {}
            events.append(Event(id=snapshot.id, nom=data.get("nom")))
        return events
