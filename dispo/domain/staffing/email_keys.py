"""
Domain service: pending-registration keys.

Pending registrations are stored under a key derived from the email.
The mapping is lossy: emails that differ only by letter case, or by a
literal "_" where the other has ".", share the same key. A new
registration with a colliding email overwrites the previous one.
"""


def normalize_email_key(email: str) -> str:
    """Return the document key for a pending registration.

    Args:
        email: Email address as typed by the user.

    Returns:
        The email lower-cased with every "." replaced by "_".
    """
    return email.lower().replace(".", "_")
