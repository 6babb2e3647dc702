"""
Dependency injection for the staffing bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the staffing context.

Firebase handles live on ``app.state.firebase`` (set by the lifespan);
tests replace the use-case dependencies through ``dependency_overrides``.
"""

from fastapi import Depends, Request

from dispo.application.staffing.confirm_registration import ConfirmRegistrationUseCase
from dispo.application.staffing.export_event_roster import ExportEventRosterUseCase
from dispo.application.staffing.get_pending_registration import (
    GetPendingRegistrationUseCase,
)
from dispo.application.staffing.promote_pending_registration import (
    PromotePendingRegistrationUseCase,
)
from dispo.application.staffing.remove_pending_registration import (
    RemovePendingRegistrationUseCase,
)
from dispo.application.staffing.save_pending_registration import (
    SavePendingRegistrationUseCase,
)
from dispo.application.staffing.upload_event_image import UploadEventImageUseCase
from dispo.application.staffing.upsert_postulation import UpsertPostulationUseCase
from dispo.core.config import settings
from dispo.infrastructure.firebase import FirebaseClients
from dispo.infrastructure.staffing.croupier_repository import (
    FirestoreCroupierRepository,
)
from dispo.infrastructure.staffing.event_repository import FirestoreEventRepository
from dispo.infrastructure.staffing.identity_provider_adapter import (
    FirebaseIdentityProviderAdapter,
)
from dispo.infrastructure.staffing.image_storage_adapter import (
    FirebaseImageStorageAdapter,
)
from dispo.infrastructure.staffing.pending_registration_repository import (
    FirestorePendingRegistrationRepository,
)
from dispo.infrastructure.staffing.postulation_repository import (
    FirestorePostulationRepository,
)


def get_firebase_clients(request: Request) -> FirebaseClients:
    """Return the Firebase handles created by the application lifespan."""
    return request.app.state.firebase


def _pending_repo(clients: FirebaseClients) -> FirestorePendingRegistrationRepository:
    return FirestorePendingRegistrationRepository(
        clients.firestore, settings.pending_registrations_collection
    )


def _croupier_repo(clients: FirebaseClients) -> FirestoreCroupierRepository:
    return FirestoreCroupierRepository(clients.firestore, settings.croupiers_collection)


def _postulation_repo(clients: FirebaseClients) -> FirestorePostulationRepository:
    return FirestorePostulationRepository(
        clients.firestore, settings.postulations_collection
    )


def get_save_pending_registration_use_case(
    clients: FirebaseClients = Depends(get_firebase_clients),
) -> SavePendingRegistrationUseCase:
    """Build SavePendingRegistrationUseCase with its infrastructure dependencies."""
    return SavePendingRegistrationUseCase(pending_repo=_pending_repo(clients))


def get_get_pending_registration_use_case(
    clients: FirebaseClients = Depends(get_firebase_clients),
) -> GetPendingRegistrationUseCase:
    """Build GetPendingRegistrationUseCase with its infrastructure dependencies."""
    return GetPendingRegistrationUseCase(pending_repo=_pending_repo(clients))


def get_remove_pending_registration_use_case(
    clients: FirebaseClients = Depends(get_firebase_clients),
) -> RemovePendingRegistrationUseCase:
    """Build RemovePendingRegistrationUseCase with its infrastructure dependencies."""
    return RemovePendingRegistrationUseCase(pending_repo=_pending_repo(clients))


def get_confirm_registration_use_case(
    clients: FirebaseClients = Depends(get_firebase_clients),
) -> ConfirmRegistrationUseCase:
    """Build ConfirmRegistrationUseCase with its infrastructure dependencies."""
    return ConfirmRegistrationUseCase(
        identity_port=FirebaseIdentityProviderAdapter(app=clients.app),
        promote=PromotePendingRegistrationUseCase(
            pending_repo=_pending_repo(clients),
            croupier_repo=_croupier_repo(clients),
        ),
    )


def get_upload_event_image_use_case(
    clients: FirebaseClients = Depends(get_firebase_clients),
) -> UploadEventImageUseCase:
    """Build UploadEventImageUseCase with its infrastructure dependencies."""
    return UploadEventImageUseCase(
        storage_port=FirebaseImageStorageAdapter(bucket=clients.bucket),
    )


def get_export_event_roster_use_case(
    clients: FirebaseClients = Depends(get_firebase_clients),
) -> ExportEventRosterUseCase:
    """Build ExportEventRosterUseCase with its infrastructure dependencies."""
    return ExportEventRosterUseCase(
        event_repo=FirestoreEventRepository(clients.firestore, settings.events_collection),
        postulation_repo=_postulation_repo(clients),
        croupier_repo=_croupier_repo(clients),
    )


def get_upsert_postulation_use_case(
    clients: FirebaseClients = Depends(get_firebase_clients),
) -> UpsertPostulationUseCase:
    """Build UpsertPostulationUseCase with its infrastructure dependencies."""
    return UpsertPostulationUseCase(postulation_repo=_postulation_repo(clients))
