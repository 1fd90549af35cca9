"""Contact Service — orchestrates persistence and read-time geocoding.

Invariants:
    - Built once at startup with its session manager and geocoder; holds no
      per-request state
    - Each operation opens its own database session
    - get_contact() returns coordinates on a copy of the record; nothing is
      written back to the store
"""

import logging
from collections.abc import Mapping

from contact_api.core.contact_rules import build_address_query
from contact_api.core.repository_protocols import Geocoder
from contact_api.infrastructure.database import DatabaseSessionManager
from contact_api.schemas.contact import ContactResponse
from contact_api.services.contact_repository import ContactRepository

logger = logging.getLogger(__name__)


class ContactService:
    """Application service behind the /contact routes."""

    def __init__(self, db_manager: DatabaseSessionManager, geocoder: Geocoder):
        self.db_manager = db_manager
        self.geocoder = geocoder

    async def create_contact(self, fields: Mapping[str, str]) -> ContactResponse:
        async with self.db_manager.session() as db:
            contact = await ContactRepository(db).create(fields)
            logger.info("Contact created", extra={"contact_id": contact.id})
            return ContactResponse.model_validate(contact)

    async def list_contacts(self) -> list[ContactResponse]:
        async with self.db_manager.session() as db:
            contacts = await ContactRepository(db).list_all()
            return [ContactResponse.model_validate(c) for c in contacts]

    async def get_contact(self, raw_id: str) -> ContactResponse:
        """Fetch one contact and attach coordinates from a fresh geocoding call."""
        async with self.db_manager.session() as db:
            contact = ContactResponse.model_validate(
                await ContactRepository(db).find_by_id(raw_id),
            )

        query = build_address_query(contact.address, contact.city, contact.country)
        coordinates = await self.geocoder.geocode(query)
        logger.info("Contact enriched", extra={"contact_id": contact.id})
        return contact.model_copy(
            update={"lat": coordinates.lat, "lng": coordinates.lng},
        )
