"""
Tests for the staffing domain layer.

Tests domain services and error classes in isolation.
No external dependencies or IO required.
"""

import pytest

from dispo.domain.staffing.email_keys import normalize_email_key
from dispo.domain.staffing.entities import Croupier, Event, ImageUpload, Postulation
from dispo.domain.staffing.errors import (
    EventNotFoundError,
    NotFoundError,
    ValidationError,
)
from dispo.domain.staffing.image_policy import (
    MAX_EVENT_IMAGE_BYTES,
    event_image_key,
    validate_event_image,
)
from dispo.domain.staffing.roster import (
    find_croupier,
    render_roster,
    roster_filename,
    sanitize_field,
)

MIB = 1024 * 1024


def _image(size: int, content_type: str = "image/png", name: str = "photo.png") -> ImageUpload:
    return ImageUpload(filename=name, content_type=content_type, size=size, data=b"")


class TestNormalizeEmailKey:
    def test_lowercases_and_replaces_dots(self) -> None:
        assert normalize_email_key("Jean.Dupont@Casino.fr") == "jean_dupont@casino_fr"

    def test_known_collision_is_preserved(self) -> None:
        """Case and dot/underscore variants share a key."""
        assert normalize_email_key("A.B@x.com") == normalize_email_key("a_b@x.com")

    def test_deterministic(self) -> None:
        assert normalize_email_key("a@x.com") == normalize_email_key("a@x.com")


class TestImagePolicy:
    def test_accepts_small_png(self) -> None:
        validate_event_image(_image(1 * MIB))

    def test_accepts_exactly_two_mib(self) -> None:
        validate_event_image(_image(MAX_EVENT_IMAGE_BYTES, "image/jpeg"))

    def test_rejects_three_mib(self) -> None:
        with pytest.raises(ValidationError, match="too large"):
            validate_event_image(_image(3 * MIB))

    def test_rejects_pdf(self) -> None:
        with pytest.raises(ValidationError, match="Invalid file type"):
            validate_event_image(_image(10, "application/pdf"))

    @pytest.mark.parametrize("content_type", ["image/jpeg", "image/png", "image/webp"])
    def test_allowed_types(self, content_type: str) -> None:
        validate_event_image(_image(10, content_type))

    def test_key_replaces_whitespace_runs(self) -> None:
        key = event_image_key("affiche  soirée\tpoker.png", 1700000000123)
        assert key == "event-images/1700000000123-affiche_soirée_poker.png"


class TestRoster:
    def test_sanitize_replaces_delimiter_and_line_breaks(self) -> None:
        assert sanitize_field("a;b\r\nc\nd") == "a b  c d"

    def test_sanitize_empty_values(self) -> None:
        assert sanitize_field(None) == ""
        assert sanitize_field("") == ""
        assert sanitize_field(0) == ""

    def test_sanitize_numbers(self) -> None:
        assert sanitize_field(3) == "3"

    def test_find_croupier_is_case_insensitive(self) -> None:
        croupiers = [Croupier(id="c1", nom="A", prenom="B", email="Mix.Case@X.com")]
        assert find_croupier(croupiers, "mix.case@x.com") is croupiers[0]
        assert find_croupier(croupiers, "other@x.com") is None

    def test_filename(self) -> None:
        assert roster_filename(Event(id="e", nom="Gala")) == "Gala-dispo.csv"

    def test_render_layout(self) -> None:
        event = Event(id="e1", nom="Gala")
        croupiers = [Croupier(id="c1", nom="Dupont", prenom="Jean", email="j@x.com", priorite=2)]
        postulations = [
            Postulation(id="p1", event_id="e1", email="J@x.com", debut="20:00", fin="02:00"),
            Postulation(id="p2", event_id="e1", email="nobody@x.com", debut="21:00", fin="23:00"),
        ]

        export = render_roster(event, postulations, croupiers)

        assert export.content == (
            '"Gala"\r\n'
            "NOM;PRENOM;MAIL;DEBUT;FIN;PRIORITE\r\n"
            "Dupont;Jean;J@x.com;20:00;02:00;2\r\n"
            ";;nobody@x.com;21:00;23:00;\r\n"
        )
        assert export.filename == "Gala-dispo.csv"

    def test_title_line_breaks_removed(self) -> None:
        export = render_roster(Event(id="e1", nom="Gala\r\nVIP"), [], [])
        assert export.content.split("\r\n")[0] == '"Gala  VIP"'

    def test_zero_priority_renders_empty(self) -> None:
        croupiers = [Croupier(id="c1", nom="A", prenom="B", email="a@x.com", priorite=0)]
        postulations = [Postulation(id="p1", event_id="e1", email="a@x.com")]
        export = render_roster(Event(id="e1", nom="E"), postulations, croupiers)
        assert export.content.split("\r\n")[2] == "A;B;a@x.com;;;"


class TestDomainErrors:
    def test_event_not_found_is_not_found(self) -> None:
        error = EventNotFoundError("ev42")
        assert isinstance(error, NotFoundError)
        assert "ev42" in error.message
        assert error.event_id == "ev42"

    def test_validation_error_keeps_reason(self) -> None:
        error = ValidationError("Invalid file type")
        assert error.reason == "Invalid file type"
        assert "Invalid file type" in str(error)
