"""
Data Transfer Objects for the staffing application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SavePendingRegistrationCommand:
    """Input DTO for storing a signup awaiting email verification.

    Attributes:
        email: Email address the verification link was sent to.
        nom: Last name, if given.
        prenom: First name, if given.
        livegame: Whether the applicant deals live games, if given.
    """

    email: str
    nom: Optional[str] = None
    prenom: Optional[str] = None
    livegame: Optional[bool] = None


@dataclass(frozen=True)
class PendingRegistrationResult:
    """Output DTO for a stored pending registration."""

    email: str
    nom: Optional[str]
    prenom: Optional[str]
    livegame: Optional[bool]
    created_at: Optional[datetime]


@dataclass(frozen=True)
class PromotePendingRegistrationCommand:
    """Input DTO for turning a verified signup into a croupier.

    Attributes:
        email: The verified email address.
    """

    email: str


@dataclass(frozen=True)
class UploadEventImageCommand:
    """Input DTO for an event image upload.

    Attributes:
        filename: Display name of the file.
        content_type: Declared MIME type.
        size: Size in bytes.
        data: Raw file content.
    """

    filename: str
    content_type: str
    size: int
    data: bytes


@dataclass(frozen=True)
class ExportEventRosterQuery:
    """Input DTO for exporting an event roster.

    Attributes:
        event_id: Identifier of the event document.
    """

    event_id: str


@dataclass(frozen=True)
class RosterExportResult:
    """Output DTO for a rendered roster.

    Attributes:
        filename: Suggested download filename.
        content: CSV text with CRLF line endings.
        media_type: MIME type to serve the content with.
    """

    filename: str
    content: str
    media_type: str


@dataclass(frozen=True)
class UpsertPostulationCommand:
    """Input DTO for creating or updating a postulation.

    Attributes:
        event_id: Event the croupier applies for.
        email: Croupier email.
        debut: Start of availability.
        fin: End of availability.
    """

    event_id: str
    email: str
    debut: Optional[str]
    fin: Optional[str]


@dataclass(frozen=True)
class UpsertPostulationResult:
    """Output DTO for a postulation upsert.

    Attributes:
        outcome: "created" or "updated".
        postulation_id: Id of the written postulation.
    """

    outcome: str
    postulation_id: Optional[str]

    @property
    def created(self) -> bool:
        return self.outcome == "created"

    @property
    def updated(self) -> bool:
        return self.outcome == "updated"
