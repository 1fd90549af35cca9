"""Contact Rules — grouped and per-field validation plus address formatting.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - check_contact_payload returns the first failing group's message or None;
      groups are checked in order: text fields, email, zip code, personal number
    - collect_field_violations reports every failing field, in field order
    - build_address_query encodes like encodeURIComponent (space -> %20)
"""

from collections.abc import Callable, Mapping
from urllib.parse import quote

from contact_api.core.domain_types import CONTACT_FIELDS
from contact_api.core.validators import (
    validate_email,
    validate_personal_number,
    validate_text,
    validate_zip_code,
)

TEXT_FIELDS = ("firstname", "lastname", "address", "city", "country")

# Checked in this order; first failure wins
PAYLOAD_GROUPS: tuple[tuple[tuple[str, ...], Callable[[object], bool], str], ...] = (
    (TEXT_FIELDS, validate_text, "Invalid input data"),
    (("email",), validate_email, "Invalid email format"),
    (("zip_code",), validate_zip_code, "Invalid zip code format"),
    (("personalnumber",), validate_personal_number, "Invalid personal number format"),
)

# field -> (validator, label used in "Invalid <label>")
FIELD_RULES: dict[str, tuple[Callable[[object], bool], str]] = {
    "firstname": (validate_text, "firstname"),
    "lastname": (validate_text, "lastname"),
    "email": (validate_email, "email"),
    "personalnumber": (validate_personal_number, "personal number"),
    "address": (validate_text, "address"),
    "zip_code": (validate_zip_code, "zip code"),
    "city": (validate_text, "city"),
    "country": (validate_text, "country"),
}

_URI_COMPONENT_SAFE = "!~*'()"


def check_contact_payload(fields: Mapping[str, object]) -> str | None:
    """Grouped check applied to a create request. Returns error message or None."""
    for names, validator, message in PAYLOAD_GROUPS:
        if not all(validator(fields.get(name)) for name in names):
            return message
    return None


def collect_field_violations(fields: Mapping[str, object]) -> list[str]:
    """Check every field independently. Returns one entry per failing field."""
    violations = []
    for name, (validator, label) in FIELD_RULES.items():
        wire_name = CONTACT_FIELDS[name]
        value = fields.get(name)
        if value is None or value == "":
            violations.append(
                f"{wire_name}: Path `{wire_name}` is required.",
            )
        elif not validator(value):
            violations.append(f"{wire_name}: Invalid {label}")
    return violations


def format_violations(violations: list[str]) -> str:
    return "contact validation failed: " + ", ".join(violations)


def build_address_query(address: str, city: str, country: str) -> str:
    """Join address parts with ", " and percent-encode the whole string."""
    return quote(f"{address}, {city}, {country}", safe=_URI_COMPONENT_SAFE)
