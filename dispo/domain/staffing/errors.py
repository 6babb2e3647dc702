"""
Domain-specific errors for the staffing bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class StaffingDomainError(Exception):
    """Base error for all staffing domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(StaffingDomainError):
    """Raised when an uploaded asset violates the size or type policy."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid upload: {reason}")
        self.reason = reason


class NotFoundError(StaffingDomainError):
    """Base error for a referenced record that does not exist."""


class EventNotFoundError(NotFoundError):
    """Raised when an event id matches no event."""

    def __init__(self, event_id: str) -> None:
        super().__init__(f"Event not found: {event_id}")
        self.event_id = event_id


class PendingRegistrationNotFoundError(NotFoundError):
    """Raised when no pending registration exists for an email."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Pending registration not found: {email}")
        self.email = email


class AuthenticationError(StaffingDomainError):
    """Raised when an identity token is missing or rejected."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Authentication failed: {reason}")
        self.reason = reason


class EmailNotVerifiedError(StaffingDomainError):
    """Raised when the identity provider has not verified the email yet."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email not verified: {email}")
        self.email = email
