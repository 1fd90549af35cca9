"""Domain Types — identity and value types shared across layers.

Invariants:
    - ContactId wraps a UUID assigned by the persistence layer
    - Coordinates are produced by the geocoder only, never read from client input
    - CONTACT_FIELDS lists the eight required contact attributes by Python name
"""

from dataclasses import dataclass
from typing import NewType
from uuid import UUID


ContactId = NewType("ContactId", UUID)


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair returned by the geocoding provider."""
    lat: float
    lng: float


# Python attribute name -> JSON field name
CONTACT_FIELDS: dict[str, str] = {
    "firstname": "firstname",
    "lastname": "lastname",
    "email": "email",
    "personalnumber": "personalnumber",
    "address": "address",
    "zip_code": "zipCode",
    "city": "city",
    "country": "country",
}
