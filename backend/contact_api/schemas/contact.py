"""Contact Schemas — request/response models for the /contact endpoints.

Invariants:
    - ContactCreate accepts every field as optional so that missing fields reach
      the grouped format check (400 "Invalid input data") instead of a schema error
    - lat/lng are not accepted on create; unknown keys are ignored, and the
      zip code is read from "zipCode" only
    - ContactResponse serializes id as "_id" and zip_code as "zipCode"
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ContactCreate(BaseModel):
    """Create payload. Formats are checked by core.contact_rules, not here."""
    model_config = ConfigDict(extra="ignore")

    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    personalnumber: str | None = None
    address: str | None = None
    zip_code: str | None = Field(None, alias="zipCode")
    city: str | None = None
    country: str | None = None

    def to_fields(self) -> dict[str, str | None]:
        """Field values keyed by Python attribute name."""
        return self.model_dump(by_alias=False)


class ContactResponse(BaseModel):
    """Public contact representation, optionally enriched with coordinates."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID = Field(alias="_id")
    firstname: str
    lastname: str
    email: str
    personalnumber: str
    address: str
    zip_code: str = Field(alias="zipCode")
    city: str
    country: str
    lat: float | None = None
    lng: float | None = None
