"""
Tests for the staffing API endpoints.

Tests FastAPI routes with use cases wired to in-memory ports.
Validates request validation, response schemas, and error mapping.
"""

import pytest
from fastapi.testclient import TestClient

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
from dispo.interfaces.staffing.dependencies import (
    get_confirm_registration_use_case,
    get_export_event_roster_use_case,
    get_get_pending_registration_use_case,
    get_remove_pending_registration_use_case,
    get_save_pending_registration_use_case,
    get_upload_event_image_use_case,
    get_upsert_postulation_use_case,
)
from dispo.interfaces.staffing.router import content_disposition
from dispo.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def wired(
    pending_repo, croupier_repo, postulation_repo, image_storage, identity_provider, roster_data
):
    """Wire every staffing use case to in-memory ports."""
    overrides = {
        get_save_pending_registration_use_case: lambda: SavePendingRegistrationUseCase(
            pending_repo
        ),
        get_get_pending_registration_use_case: lambda: GetPendingRegistrationUseCase(
            pending_repo
        ),
        get_remove_pending_registration_use_case: lambda: RemovePendingRegistrationUseCase(
            pending_repo
        ),
        get_confirm_registration_use_case: lambda: ConfirmRegistrationUseCase(
            identity_provider,
            PromotePendingRegistrationUseCase(pending_repo, croupier_repo),
        ),
        get_upload_event_image_use_case: lambda: UploadEventImageUseCase(image_storage),
        get_export_event_roster_use_case: lambda: ExportEventRosterUseCase(
            roster_data["events"], roster_data["postulations"], roster_data["croupiers"]
        ),
        get_upsert_postulation_use_case: lambda: UpsertPostulationUseCase(
            postulation_repo
        ),
    }
    app.dependency_overrides.update(overrides)
    yield
    app.dependency_overrides.clear()


class TestPendingRegistrationEndpoints:
    """Tests for /api/v1/registrations/pending."""

    def test_save_then_read(self) -> None:
        response = client.put(
            "/api/v1/registrations/pending",
            json={"email": "new@x.com", "nom": "Durand", "prenom": "Alice", "livegame": True},
        )
        assert response.status_code == 204

        response = client.get("/api/v1/registrations/pending/new@x.com")
        assert response.status_code == 200
        body = response.json()
        assert body["email"] == "new@x.com"
        assert body["nom"] == "Durand"
        assert body["livegame"] is True
        assert body["created_at"] is not None

    def test_missing_email_rejected(self) -> None:
        response = client.put("/api/v1/registrations/pending", json={"nom": "Durand"})
        assert response.status_code == 422

    def test_read_missing_returns_404(self) -> None:
        response = client.get("/api/v1/registrations/pending/ghost@x.com")
        assert response.status_code == 404
        assert response.json()["error"] == "Not found"

    def test_delete_missing_returns_204(self) -> None:
        response = client.delete("/api/v1/registrations/pending/ghost@x.com")
        assert response.status_code == 204


class TestConfirmEndpoint:
    """Tests for POST /api/v1/registrations/confirm."""

    def test_missing_token_returns_401(self) -> None:
        response = client.post("/api/v1/registrations/confirm")
        assert response.status_code == 401

    def test_invalid_token_returns_401(self) -> None:
        response = client.post(
            "/api/v1/registrations/confirm", headers={"Authorization": "Bearer forged"}
        )
        assert response.status_code == 401

    def test_unverified_email_returns_403(self) -> None:
        response = client.post(
            "/api/v1/registrations/confirm",
            headers={"Authorization": "Bearer unverified-token"},
        )
        assert response.status_code == 403

    def test_verified_email_promotes(self, croupier_repo) -> None:
        client.put("/api/v1/registrations/pending", json={"email": "new@x.com"})

        response = client.post(
            "/api/v1/registrations/confirm",
            headers={"Authorization": "Bearer verified-token"},
        )

        assert response.status_code == 200
        assert response.json() == {"email": "new@x.com", "promoted": True}
        assert len(croupier_repo.croupiers) == 1

    def test_nothing_pending(self) -> None:
        response = client.post(
            "/api/v1/registrations/confirm",
            headers={"Authorization": "Bearer verified-token"},
        )
        assert response.status_code == 200
        assert response.json()["promoted"] is False


class TestEventImageEndpoint:
    """Tests for POST /api/v1/events/images."""

    def test_no_file_returns_null_url(self) -> None:
        response = client.post("/api/v1/events/images")
        assert response.status_code == 200
        assert response.json() == {"url": None}

    def test_png_upload(self, image_storage) -> None:
        response = client.post(
            "/api/v1/events/images",
            files={"file": ("affiche gala.png", b"\x89PNG\r\n" + b"\x00" * 64, "image/png")},
        )
        assert response.status_code == 200
        assert response.json()["url"].startswith("https://storage.test/event-images/")
        assert image_storage.uploads[0][0].endswith("-affiche_gala.png")

    def test_pdf_rejected(self) -> None:
        response = client.post(
            "/api/v1/events/images",
            files={"file": ("flyer.pdf", b"%PDF-1.4", "application/pdf")},
        )
        assert response.status_code == 422
        assert response.json() == {"error": "Invalid upload", "detail": "Invalid file type"}


class TestRosterEndpoint:
    """Tests for GET /api/v1/events/{event_id}/roster.csv."""

    def test_download(self) -> None:
        response = client.get("/api/v1/events/ev1/roster.csv")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        disposition = response.headers["content-disposition"]
        assert disposition.startswith("attachment;")
        assert 'filename="Soiree Poker-dispo.csv"' in disposition
        assert "filename*=UTF-8''Soir%C3%A9e%20Poker-dispo.csv" in disposition
        assert response.headers["cache-control"] == "no-store"
        text = response.content.decode("utf-8")
        assert text.count("\r\n") == 4
        assert text.splitlines()[1] == "NOM;PRENOM;MAIL;DEBUT;FIN;PRIORITE"

    def test_ascii_filename_drops_quotes(self) -> None:
        header = content_disposition('Gala "VIP"\\Été.csv')

        assert header.startswith('attachment; filename="Gala VIPEte.csv";')
        assert header.endswith("filename*=UTF-8''Gala%20%22VIP%22%5C%C3%89t%C3%A9.csv")

    def test_unknown_event_returns_404(self) -> None:
        response = client.get("/api/v1/events/missing/roster.csv")
        assert response.status_code == 404


class TestPostulationEndpoint:
    """Tests for PUT /api/v1/events/{event_id}/postulations."""

    def test_create_then_update(self, postulation_repo) -> None:
        url = "/api/v1/events/e1/postulations"

        first = client.put(url, json={"email": "a@x.com", "debut": "20:00", "fin": "23:00"})
        second = client.put(url, json={"email": "a@x.com", "debut": "21:00", "fin": "02:00"})

        assert first.status_code == 200
        assert first.json()["outcome"] == "created"
        assert second.json()["outcome"] == "updated"
        assert len(postulation_repo.records) == 1

    def test_missing_email_rejected(self) -> None:
        response = client.put("/api/v1/events/e1/postulations", json={"debut": "20:00"})
        assert response.status_code == 422


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self) -> None:
        response = client.get("/api/v1/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_json_responses_stay_cacheable(self) -> None:
        response = client.get("/api/v1/health")
        assert "cache-control" not in response.headers
