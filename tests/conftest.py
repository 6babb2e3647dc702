"""
Shared fixtures for the staffing tests.

Provides in-memory implementations of the domain ports so use cases
and routes can be exercised without Firebase.
"""

import os
from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from dispo.domain.staffing.entities import (  # noqa: E402
    Croupier,
    Event,
    PendingRegistration,
    Postulation,
)
from dispo.domain.staffing.errors import (  # noqa: E402
    AuthenticationError,
    EmailNotVerifiedError,
)
from dispo.domain.staffing.ports import (  # noqa: E402
    CroupierRepository,
    EventRepository,
    IdentityProviderPort,
    ImageStoragePort,
    PendingRegistrationRepository,
    PostulationRepository,
)


class InMemoryPendingRegistrationRepository(PendingRegistrationRepository):
    def __init__(self) -> None:
        self.records: dict[str, PendingRegistration] = {}
        self.fail_delete = False

    async def put(self, key: str, registration: PendingRegistration) -> None:
        self.records[key] = registration

    async def get(self, key: str) -> Optional[PendingRegistration]:
        return self.records.get(key)

    async def delete(self, key: str) -> None:
        if self.fail_delete:
            raise RuntimeError("store unavailable")
        self.records.pop(key, None)


class InMemoryCroupierRepository(CroupierRepository):
    def __init__(self, croupiers: list[Croupier] | None = None) -> None:
        self.croupiers: list[Croupier] = list(croupiers or [])

    async def find_by_email(self, email: str) -> list[Croupier]:
        return [c for c in self.croupiers if c.email == email]

    async def add(self, croupier: Croupier) -> Croupier:
        stored = replace(croupier, id=f"c{len(self.croupiers) + 1}")
        self.croupiers.append(stored)
        return stored

    async def list_all(self) -> list[Croupier]:
        return list(self.croupiers)


class InMemoryEventRepository(EventRepository):
    def __init__(self, events: list[Event] | None = None) -> None:
        self.events = list(events or [])

    async def list_all(self) -> list[Event]:
        return list(self.events)


class InMemoryPostulationRepository(PostulationRepository):
    def __init__(self, postulations: list[Postulation] | None = None) -> None:
        self.records: dict[str, Postulation] = {p.id: p for p in postulations or []}

    async def find_by_event_and_email(
        self, event_id: str, email: str
    ) -> list[Postulation]:
        return [
            p
            for p in self.records.values()
            if p.event_id == event_id and p.email == email
        ]

    async def add(self, postulation: Postulation) -> Postulation:
        stored = replace(postulation, id=f"p{len(self.records) + 1}")
        self.records[stored.id] = stored
        return stored

    async def update_window(
        self,
        postulation_id: str,
        debut: Optional[str],
        fin: Optional[str],
        updated_at: datetime,
    ) -> None:
        self.records[postulation_id] = replace(
            self.records[postulation_id], debut=debut, fin=fin, updated_at=updated_at
        )

    async def list_all(self) -> list[Postulation]:
        return list(self.records.values())


class FakeImageStorage(ImageStoragePort):
    def __init__(self) -> None:
        self.uploads: list[tuple[str, bytes, str]] = []

    async def upload(self, key: str, data: bytes, content_type: str) -> str:
        self.uploads.append((key, data, content_type))
        return f"https://storage.test/{key}"


class FakeIdentityProvider(IdentityProviderPort):
    """Tokens map to (email, email_verified)."""

    def __init__(self, tokens: dict[str, tuple[str, bool]] | None = None) -> None:
        self.tokens = dict(tokens or {})

    async def verified_email(self, id_token: str) -> str:
        if id_token not in self.tokens:
            raise AuthenticationError("invalid ID token")
        email, verified = self.tokens[id_token]
        if not verified:
            raise EmailNotVerifiedError(email)
        return email


@pytest.fixture
def pending_repo() -> InMemoryPendingRegistrationRepository:
    return InMemoryPendingRegistrationRepository()


@pytest.fixture
def croupier_repo() -> InMemoryCroupierRepository:
    return InMemoryCroupierRepository()


@pytest.fixture
def postulation_repo() -> InMemoryPostulationRepository:
    return InMemoryPostulationRepository()


@pytest.fixture
def image_storage() -> FakeImageStorage:
    return FakeImageStorage()


@pytest.fixture
def roster_data() -> dict:
    """One event with a known and an unknown applicant, plus noise."""
    events = [Event(id="ev1", nom="Soirée Poker"), Event(id="ev2", nom="Gala")]
    croupiers = [
        Croupier(id="c1", nom="Dupont", prenom="Jean", email="Jean.Dupont@x.com", priorite=2),
        Croupier(id="c2", nom="Martin", prenom="Luc", email="luc@x.com", priorite=3),
    ]
    postulations = [
        Postulation(id="p1", event_id="ev1", email="jean.dupont@x.com", debut="20:00", fin="02:00"),
        Postulation(id="p2", event_id="ev1", email="ghost@x.com", debut="21:00", fin="23;30"),
        Postulation(id="p3", event_id="ev2", email="luc@x.com", debut="19:00", fin="01:00"),
    ]
    return {
        "events": InMemoryEventRepository(events),
        "croupiers": InMemoryCroupierRepository(croupiers),
        "postulations": InMemoryPostulationRepository(postulations),
    }


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider(
        {
            "verified-token": ("new@x.com", True),
            "unverified-token": ("late@x.com", False),
        }
    )
