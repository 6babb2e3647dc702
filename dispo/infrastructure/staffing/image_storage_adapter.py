"""
Adapter: Event image storage.

Implements ImageStoragePort on Firebase Storage (a Cloud Storage bucket).
Objects get a Firebase download token so the returned URL resolves
without signing, like URLs handed out by the Firebase web SDK.
"""

import asyncio
import logging
import uuid
from urllib.parse import quote

from google.cloud.storage import Bucket

from dispo.domain.staffing.ports import ImageStoragePort

logger = logging.getLogger(__name__)

DOWNLOAD_URL_TEMPLATE = (
    "https://firebasestorage.googleapis.com/v0/b/{bucket}/o/{path}?alt=media&token={token}"
)


def download_url(bucket_name: str, key: str, token: str) -> str:
    """Build the token-based public download URL of an object."""
    return DOWNLOAD_URL_TEMPLATE.format(
        bucket=bucket_name, path=quote(key, safe=""), token=token
    )


class FirebaseImageStorageAdapter(ImageStoragePort):
    """Uploads event images to the Firebase Storage bucket.

    The storage client is blocking, so uploads run in a worker thread.
    """

    def __init__(self, bucket: Bucket) -> None:
        self._bucket = bucket

    async def upload(self, key: str, data: bytes, content_type: str) -> str:
        return await asyncio.to_thread(self._upload, key, data, content_type)

    def _upload(self, key: str, data: bytes, content_type: str) -> str:
        token = str(uuid.uuid4())
        blob = self._bucket.blob(key)
        blob.metadata = {"firebaseStorageDownloadTokens": token}
        blob.upload_from_string(data, content_type=content_type)
        logger.debug("Stored object %s in bucket %s", key, self._bucket.name)
        return download_url(self._bucket.name, key, token)
