"""
Use case: Upload an event image to the object store.

Input: UploadEventImageCommand or None
Output: Public download URL, or None when no file was given.
Side effects: Writes one object under event-images/.
Failure cases: ValidationError (size or type policy), storage errors propagate.
"""

import logging
import time
from typing import Optional

from dispo.application.staffing.dtos import UploadEventImageCommand
from dispo.domain.staffing.entities import ImageUpload
from dispo.domain.staffing.image_policy import event_image_key, validate_event_image
from dispo.domain.staffing.ports import ImageStoragePort

logger = logging.getLogger(__name__)


class UploadEventImageUseCase:
    """Validates an event image and stores it under a timestamped key.

    The policy check mirrors the one done by the client before sending.
    The stored object is not re-validated after upload.
    """

    def __init__(self, storage_port: ImageStoragePort) -> None:
        self._storage_port = storage_port

    async def execute(self, command: Optional[UploadEventImageCommand]) -> Optional[str]:
        """Run the upload use case.

        Args:
            command: The candidate file, or None.

        Returns:
            The download URL of the stored image, or None if no file was given.

        Raises:
            ValidationError: If the file is larger than 2 MiB or not a
                JPEG, PNG or WebP image.
        """
        if command is None:
            return None

        upload = ImageUpload(
            filename=command.filename,
            content_type=command.content_type,
            size=command.size,
            data=command.data,
        )
        validate_event_image(upload)

        key = event_image_key(upload.filename, int(time.time() * 1000))
        logger.info("Uploading event image key=%s size=%d", key, upload.size)
        return await self._storage_port.upload(key, upload.data, upload.content_type)
