"""Error taxonomy shared by the service layer.

Services raise these exceptions; the HTTP layer maps them to status codes in
``reloc_community.main``. Fan-out code catches and logs them instead.
"""

from __future__ import annotations


class ServiceError(RuntimeError):
    """Base class for all domain errors raised by services."""


class ValidationError(ServiceError):
    """A required field is missing or empty."""


class MissingParameter(ValidationError):
    """A required lookup parameter (user id, peer id) was not supplied."""


class MalformedIdentifier(ServiceError):
    """A composite identifier did not decode to exactly two parts."""


class NotFound(ServiceError):
    """A referenced entity does not exist."""


class StoreUnavailable(ServiceError):
    """The relational store rejected a query."""


def require(**fields: object) -> None:
    """Raise ``ValidationError`` naming every field that is missing or blank."""
    missing = [name for name, value in fields.items() if _is_blank(value)]
    if missing:
        raise ValidationError(f"Missing fields: {', '.join(missing)}")


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
