"""Error Hierarchy — closed set of typed failures for the contact API.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status (int)
    - to_response() always produces {"error": <message>}
    - Handlers match on the concrete class, never on ad hoc attributes
    - ContactNotFoundError and MalformedIdentifierError share HTTP 404 but stay
      distinct types with distinct messages
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    VALIDATION = "validation"
    PERSISTENCE = "persistence"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


class ContactApiError(Exception):
    """Base exception for all contact API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ContactValidationError(ContactApiError):
    """A field group failed its format check at the HTTP boundary."""
    def __init__(self, message: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )


class PersistenceWriteError(ContactApiError):
    """The store rejected a write (schema violation, constraint, connectivity)."""
    def __init__(self, message: str):
        super().__init__(
            message, "PERSISTENCE_WRITE_ERROR", ErrorCategory.PERSISTENCE, 400,
        )


class ContactNotFoundError(ContactApiError):
    """Identifier well-formed, no matching contact."""
    def __init__(self, contact_id: str):
        super().__init__(
            "Contact not found", "CONTACT_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.contact_id = contact_id


class MalformedIdentifierError(ContactApiError):
    """Identifier does not have the store's identifier shape."""
    def __init__(self, raw_id: str):
        super().__init__(
            "Invalid contact ID", "INVALID_CONTACT_ID",
            ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.raw_id = raw_id


# ─── Server Errors (500-level) ──────────────────────────────────

class EnrichmentError(ContactApiError):
    """Geocoder answered but without usable coordinates."""
    def __init__(self):
        super().__init__(
            "Failed to retrieve coordinates", "ENRICHMENT_FAILED",
            ErrorCategory.EXTERNAL_API, 500,
        )


class UnexpectedError(ContactApiError):
    """Any other failure; the raw message is passed through."""
    def __init__(
        self,
        message: str,
        code: str = "UNEXPECTED_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
    ):
        super().__init__(message, code, category, 500)


class GeocodingError(UnexpectedError):
    """Transport failure or error status from the geocoding provider."""
    def __init__(self, message: str):
        super().__init__(
            message, "GEOCODING_FAILED", ErrorCategory.EXTERNAL_API,
        )
