"""
Domain service: event image policy.

Checks a candidate image against the size and content-type policy
and derives the object-store key it is uploaded under.
No IO, no frameworks.
"""

import re

from dispo.domain.staffing.entities import ImageUpload
from dispo.domain.staffing.errors import ValidationError

EVENT_IMAGE_PREFIX = "event-images/"
MAX_EVENT_IMAGE_BYTES = 2 * 1024 * 1024
ALLOWED_IMAGE_TYPES = frozenset({"image/jpeg", "image/png", "image/webp"})

_WHITESPACE_RUN = re.compile(r"\s+")


def validate_event_image(upload: ImageUpload) -> None:
    """Raise ValidationError if the image breaks the upload policy.

    Exactly MAX_EVENT_IMAGE_BYTES is accepted.
    """
    if upload.size > MAX_EVENT_IMAGE_BYTES:
        raise ValidationError("File too large (2MB max)")
    if upload.content_type not in ALLOWED_IMAGE_TYPES:
        raise ValidationError("Invalid file type")


def event_image_key(filename: str, timestamp_ms: int) -> str:
    """Build the storage key for an event image.

    Args:
        filename: Display name of the uploaded file.
        timestamp_ms: Upload time in epoch milliseconds.

    Returns:
        ``event-images/<timestamp_ms>-<filename>`` with every whitespace
        run in the filename replaced by a single underscore.
    """
    safe_name = _WHITESPACE_RUN.sub("_", filename)
    return f"{EVENT_IMAGE_PREFIX}{timestamp_ms}-{safe_name}"
