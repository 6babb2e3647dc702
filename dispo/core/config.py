"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for uploads and exports.
        rate_limit_enabled: Turn rate limiting off (tests, local runs).
        firebase_project_id: Firebase / Google Cloud project id.
        firebase_credentials_file: Service-account JSON. When unset,
            Application Default Credentials are used.
        firebase_storage_bucket: Bucket holding event images.
        pending_registrations_collection: Signups awaiting email verification.
        croupiers_collection: Confirmed croupiers.
        events_collection: Events (read only here).
        postulations_collection: Croupier applications to events.

    Collection names match the documents written by the web client.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Dispo Croupiers"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"
    rate_limit_enabled: bool = True

    firebase_project_id: Optional[str] = None
    firebase_credentials_file: Optional[str] = None
    firebase_storage_bucket: Optional[str] = None

    pending_registrations_collection: str = "pending_registrations"
    croupiers_collection: str = "croupiers"
    events_collection: str = "evenements"
    postulations_collection: str = "postulations"

    def get_storage_bucket(self) -> str:
        """Return the effective storage bucket name.

        Priority:
        1. Explicit `FIREBASE_STORAGE_BUCKET`
        2. The default bucket of the Firebase project
        """
        if self.firebase_storage_bucket:
            return self.firebase_storage_bucket
        if not self.firebase_project_id:
            raise ValueError(
                "FIREBASE_STORAGE_BUCKET or FIREBASE_PROJECT_ID must be set"
            )
        return f"{self.firebase_project_id}.appspot.com"


settings = Settings()
