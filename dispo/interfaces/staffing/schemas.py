"""
Pydantic schemas for staffing API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

EMAIL_DESCRIPTION = "Email address of the croupier"
EMAIL_MAX_LEN = 254
NAME_MAX_LEN = 100
WINDOW_MAX_LEN = 64


class SavePendingRegistrationRequest(BaseModel):
    """Request schema for storing a signup awaiting verification.

    Only the email is required; missing names and livegame are
    defaulted when the registration is promoted.
    """

    email: str = Field(
        ..., min_length=1, max_length=EMAIL_MAX_LEN, description=EMAIL_DESCRIPTION
    )
    nom: str | None = Field(default=None, max_length=NAME_MAX_LEN)
    prenom: str | None = Field(default=None, max_length=NAME_MAX_LEN)
    livegame: bool | None = Field(
        default=None, description="Whether the applicant deals live games"
    )


class PendingRegistrationResponse(BaseModel):
    """Response schema for a stored pending registration."""

    email: str
    nom: str | None = None
    prenom: str | None = None
    livegame: bool | None = None
    created_at: datetime | None = None


class ConfirmRegistrationResponse(BaseModel):
    """Response schema for the confirmation endpoint.

    Attributes:
        email: Verified email taken from the ID token.
        promoted: False when there was no pending registration to promote.
    """

    email: str
    promoted: bool


class UploadEventImageResponse(BaseModel):
    """Response schema for the event image upload endpoint."""

    url: str | None


class UpsertPostulationRequest(BaseModel):
    """Request schema for creating or updating a postulation.

    Attributes:
        email: Croupier email.
        debut: Start of availability (free text, e.g. "20:00").
        fin: End of availability.
    """

    email: str = Field(
        ..., min_length=1, max_length=EMAIL_MAX_LEN, description=EMAIL_DESCRIPTION
    )
    debut: str | None = Field(default=None, max_length=WINDOW_MAX_LEN)
    fin: str | None = Field(default=None, max_length=WINDOW_MAX_LEN)


class UpsertPostulationResponse(BaseModel):
    """Response schema for the postulation upsert endpoint."""

    outcome: Literal["created", "updated"]
    postulation_id: str | None = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    firebase: bool
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
