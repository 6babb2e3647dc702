"""
Domain entities for the staffing bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

DEFAULT_PRIORITE = 3


class UpsertOutcome(Enum):
    """Result of a create-or-update on a postulation."""

    CREATED = "created"
    UPDATED = "updated"


@dataclass(frozen=True)
class PendingRegistration:
    """A signup waiting for email verification before becoming a croupier.

    Only ``email`` is mandatory. The other fields are stored as submitted
    and defaulted when the registration is promoted.
    """

    email: str
    nom: Optional[str] = None
    prenom: Optional[str] = None
    livegame: Optional[bool] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Croupier:
    """A confirmed staff member eligible for event assignment."""

    id: Optional[str]
    nom: str
    prenom: str
    email: str
    livegame: bool = False
    priorite: Optional[int] = DEFAULT_PRIORITE
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Event:
    """An event needing croupiers. Owned by the event-management flow."""

    id: str
    nom: Optional[str] = None


@dataclass(frozen=True)
class Postulation:
    """A croupier's availability window for one event."""

    id: Optional[str]
    event_id: str
    email: str
    debut: Optional[str] = None
    fin: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class ImageUpload:
    """A candidate event image as received from the client."""

    filename: str
    content_type: str
    size: int
    data: bytes


@dataclass(frozen=True)
class RosterExport:
    """A rendered roster ready to hand to a download sink."""

    filename: str
    content: str
    media_type: str = "text/csv;charset=utf-8"
