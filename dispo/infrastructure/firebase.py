"""
Firebase client handles.

Builds the Firebase app and the clients the staffing adapters need
(Firestore async client, Storage bucket). The handles are created by the
application lifespan and injected downwards; nothing here is cached at
module level.
"""

import logging
from dataclasses import dataclass

import firebase_admin
from firebase_admin import credentials, firestore_async, storage
from google.cloud.firestore import AsyncClient
from google.cloud.storage import Bucket

from dispo.core.config import Settings

logger = logging.getLogger(__name__)

APP_NAME = "dispo"


@dataclass(frozen=True)
class FirebaseClients:
    """Handles to the Firebase services used by the staffing context."""

    app: firebase_admin.App
    firestore: AsyncClient
    bucket: Bucket


def _credential(settings: Settings) -> credentials.Base:
    if settings.firebase_credentials_file:
        return credentials.Certificate(settings.firebase_credentials_file)
    return credentials.ApplicationDefault()


def init_firebase(settings: Settings) -> FirebaseClients:
    """Initialize (or reuse) the named Firebase app and build its clients.

    Args:
        settings: Application settings with the Firebase project details.

    Returns:
        The Firestore client and storage bucket bound to the app.
    """
    try:
        app = firebase_admin.get_app(APP_NAME)
    except ValueError:
        options = {"storageBucket": settings.get_storage_bucket()}
        if settings.firebase_project_id:
            options["projectId"] = settings.firebase_project_id
        app = firebase_admin.initialize_app(
            _credential(settings), options, name=APP_NAME
        )
        logger.info("Firebase app initialized for project=%s", settings.firebase_project_id)

    return FirebaseClients(
        app=app,
        firestore=firestore_async.client(app=app),
        bucket=storage.bucket(app=app),
    )


def close_firebase(clients: FirebaseClients) -> None:
    """Release the Firebase app created by init_firebase."""
    firebase_admin.delete_app(clients.app)
    logger.info("Firebase app closed")
