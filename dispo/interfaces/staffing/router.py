"""
FastAPI router for the staffing bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

import unicodedata
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Request, Response, UploadFile
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from dispo.application.staffing.confirm_registration import ConfirmRegistrationUseCase
from dispo.application.staffing.dtos import (
    ExportEventRosterQuery,
    SavePendingRegistrationCommand,
    UploadEventImageCommand,
    UpsertPostulationCommand,
)
from dispo.application.staffing.export_event_roster import ExportEventRosterUseCase
from dispo.application.staffing.get_pending_registration import (
    GetPendingRegistrationUseCase,
)
from dispo.application.staffing.remove_pending_registration import (
    RemovePendingRegistrationUseCase,
)
from dispo.application.staffing.save_pending_registration import (
    SavePendingRegistrationUseCase,
)
from dispo.application.staffing.upload_event_image import UploadEventImageUseCase
from dispo.application.staffing.upsert_postulation import UpsertPostulationUseCase
from dispo.domain.staffing.errors import (
    AuthenticationError,
    PendingRegistrationNotFoundError,
)
from dispo.interfaces.staffing.dependencies import (
    get_confirm_registration_use_case,
    get_export_event_roster_use_case,
    get_get_pending_registration_use_case,
    get_remove_pending_registration_use_case,
    get_save_pending_registration_use_case,
    get_upload_event_image_use_case,
    get_upsert_postulation_use_case,
)
from dispo.interfaces.staffing.schemas import (
    ConfirmRegistrationResponse,
    ErrorResponse,
    PendingRegistrationResponse,
    SavePendingRegistrationRequest,
    UploadEventImageResponse,
    UpsertPostulationRequest,
    UpsertPostulationResponse,
)
from dispo.shared.security.rate_limiting import HEAVY_RATE_LIMIT, limiter

router = APIRouter(tags=["staffing"])

bearer_scheme = HTTPBearer(auto_error=False)


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII filename and its RFC 5987 UTF-8 form."""
    ascii_name = (
        unicodedata.normalize("NFKD", filename)
        .encode("ascii", "ignore")
        .decode("ascii")
        .replace('"', "")
        .replace("\\", "")
    )
    return (
        f'attachment; filename="{ascii_name}"; '
        f"filename*=UTF-8''{quote(filename)}"
    )


@router.put(
    "/registrations/pending",
    status_code=204,
    response_class=Response,
    responses={422: {"model": ErrorResponse}},
    summary="Store a pending registration",
    description="Store a signup while its email awaits verification.",
)
async def save_pending_registration(
    request: SavePendingRegistrationRequest,
    use_case: SavePendingRegistrationUseCase = Depends(
        get_save_pending_registration_use_case
    ),
) -> Response:
    """Store (or overwrite) the pending registration for an email."""
    command = SavePendingRegistrationCommand(
        email=request.email,
        nom=request.nom,
        prenom=request.prenom,
        livegame=request.livegame,
    )
    await use_case.execute(command)
    return Response(status_code=204)


@router.get(
    "/registrations/pending/{email}",
    response_model=PendingRegistrationResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Read a pending registration",
)
async def get_pending_registration(
    email: str,
    use_case: GetPendingRegistrationUseCase = Depends(
        get_get_pending_registration_use_case
    ),
) -> PendingRegistrationResponse:
    """Return the pending registration stored for an email."""
    result = await use_case.execute(email)
    if result is None:
        raise PendingRegistrationNotFoundError(email)
    return PendingRegistrationResponse(
        email=result.email,
        nom=result.nom,
        prenom=result.prenom,
        livegame=result.livegame,
        created_at=result.created_at,
    )


@router.delete(
    "/registrations/pending/{email}",
    status_code=204,
    response_class=Response,
    summary="Remove a pending registration",
    description="Idempotent: succeeds whether or not a registration exists.",
)
async def remove_pending_registration(
    email: str,
    use_case: RemovePendingRegistrationUseCase = Depends(
        get_remove_pending_registration_use_case
    ),
) -> Response:
    await use_case.execute(email)
    return Response(status_code=204)


@router.post(
    "/registrations/confirm",
    response_model=ConfirmRegistrationResponse,
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
    summary="Confirm a verified registration",
    description=(
        "Verify the bearer ID token's email with the identity provider and "
        "promote the matching pending registration to a croupier."
    ),
)
async def confirm_registration(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    use_case: ConfirmRegistrationUseCase = Depends(get_confirm_registration_use_case),
) -> ConfirmRegistrationResponse:
    """Promote the caller's pending registration once their email is verified."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("missing bearer token")
    email, promoted = await use_case.execute(credentials.credentials)
    return ConfirmRegistrationResponse(email=email, promoted=promoted)


@router.post(
    "/events/images",
    response_model=UploadEventImageResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Upload an event image",
    description="Upload a JPEG, PNG or WebP image (2 MB max) and get its public URL.",
)
@limiter.limit(HEAVY_RATE_LIMIT)
async def upload_event_image(
    request: Request,
    file: UploadFile | None = File(default=None),
    use_case: UploadEventImageUseCase = Depends(get_upload_event_image_use_case),
) -> UploadEventImageResponse:
    """Upload an event image. Without a file, returns a null URL."""
    command = None
    if file is not None:
        data = await file.read()
        command = UploadEventImageCommand(
            filename=file.filename or "",
            content_type=file.content_type or "",
            size=len(data),
            data=data,
        )
    url = await use_case.execute(command)
    return UploadEventImageResponse(url=url)


@router.get(
    "/events/{event_id}/roster.csv",
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    summary="Export an event roster",
    description="Download the semicolon-separated roster of an event.",
)
@limiter.limit(HEAVY_RATE_LIMIT)
async def export_event_roster(
    request: Request,
    event_id: str,
    use_case: ExportEventRosterUseCase = Depends(get_export_event_roster_use_case),
) -> Response:
    """Export the roster of an event as a CSV attachment."""
    result = await use_case.execute(ExportEventRosterQuery(event_id=event_id))
    return Response(
        content=result.content.encode("utf-8"),
        media_type=result.media_type,
        headers={"Content-Disposition": content_disposition(result.filename)},
    )


@router.put(
    "/events/{event_id}/postulations",
    response_model=UpsertPostulationResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Create or update a postulation",
    description="Keep one postulation per croupier email and event.",
)
async def upsert_postulation(
    event_id: str,
    request: UpsertPostulationRequest,
    use_case: UpsertPostulationUseCase = Depends(get_upsert_postulation_use_case),
) -> UpsertPostulationResponse:
    """Create the postulation, or update its window if one already exists."""
    result = await use_case.execute(
        UpsertPostulationCommand(
            event_id=event_id,
            email=request.email,
            debut=request.debut,
            fin=request.fin,
        )
    )
    return UpsertPostulationResponse(
        outcome=result.outcome, postulation_id=result.postulation_id
    )
