"""
Port interfaces (ABCs) for the staffing bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.

All ports are asynchronous: operations suspend only while awaiting
the remote store.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from dispo.domain.staffing.entities import (
    Croupier,
    Event,
    PendingRegistration,
    Postulation,
)


class PendingRegistrationRepository(ABC):
    """Port for pending registrations, keyed by normalized email."""

    @abstractmethod
    async def put(self, key: str, registration: PendingRegistration) -> None:
        """Write the registration at ``key``, replacing any existing one."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, key: str) -> Optional[PendingRegistration]:
        """Return the registration stored at ``key``, or None."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete the registration stored at ``key``."""
        raise NotImplementedError


class CroupierRepository(ABC):
    """Port for confirmed croupier records."""

    @abstractmethod
    async def find_by_email(self, email: str) -> list[Croupier]:
        """Return croupiers whose email equals ``email`` exactly."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, croupier: Croupier) -> Croupier:
        """Persist a new croupier and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> list[Croupier]:
        """Return every croupier."""
        raise NotImplementedError


class EventRepository(ABC):
    """Port for reading events."""

    @abstractmethod
    async def list_all(self) -> list[Event]:
        """Return every event."""
        raise NotImplementedError


class PostulationRepository(ABC):
    """Port for postulations (availability windows per event)."""

    @abstractmethod
    async def find_by_event_and_email(
        self, event_id: str, email: str
    ) -> list[Postulation]:
        """Return postulations matching both ``event_id`` and ``email`` exactly."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, postulation: Postulation) -> Postulation:
        """Persist a new postulation and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    async def update_window(
        self,
        postulation_id: str,
        debut: Optional[str],
        fin: Optional[str],
        updated_at: datetime,
    ) -> None:
        """Overwrite the availability window of an existing postulation."""
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> list[Postulation]:
        """Return every postulation."""
        raise NotImplementedError


class ImageStoragePort(ABC):
    """Port for the object store holding event images."""

    @abstractmethod
    async def upload(self, key: str, data: bytes, content_type: str) -> str:
        """Store ``data`` under ``key`` and return a public download URL."""
        raise NotImplementedError


class IdentityProviderPort(ABC):
    """Port for the identity provider that verifies signups."""

    @abstractmethod
    async def verified_email(self, id_token: str) -> str:
        """Return the email carried by a valid ID token.

        Raises:
            AuthenticationError: If the token is invalid or expired.
            EmailNotVerifiedError: If the email is not verified yet.
        """
        raise NotImplementedError
