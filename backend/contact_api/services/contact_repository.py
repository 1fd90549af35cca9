"""Contact Repository — persistence gateway for the contacts table.

Invariants:
    - create() validates every field before the session is touched; a rejected
      write leaves no partial state
    - Store failures on write roll back and raise PersistenceWriteError
    - find_by_id() distinguishes MalformedIdentifierError (not a UUID) from
      ContactNotFoundError (UUID, no row)
    - list_all() returns rows in insertion order, unfiltered
"""

import logging
from collections.abc import Mapping
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from contact_api.core.contact_rules import (
    collect_field_violations, format_violations,
)
from contact_api.core.domain_types import CONTACT_FIELDS, ContactId
from contact_api.core.errors import (
    ContactNotFoundError,
    MalformedIdentifierError,
    PersistenceWriteError,
    UnexpectedError,
)
from contact_api.models.contact import Contact

logger = logging.getLogger(__name__)


def parse_contact_id(raw_id: str) -> ContactId:
    """Parse a path identifier. Raises MalformedIdentifierError."""
    try:
        return ContactId(UUID(raw_id))
    except (ValueError, TypeError, AttributeError) as e:
        raise MalformedIdentifierError(raw_id) from e


def _driver_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class ContactRepository:
    """Create, list and look up contacts on one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, fields: Mapping[str, str]) -> Contact:
        violations = collect_field_violations(fields)
        if violations:
            raise PersistenceWriteError(format_violations(violations))

        contact = Contact(**{name: fields[name] for name in CONTACT_FIELDS})
        self.db.add(contact)
        try:
            await self.db.commit()
            await self.db.refresh(contact)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Contact insert failed: {e}")
            raise PersistenceWriteError(_driver_message(e)) from e
        return contact

    async def list_all(self) -> list[Contact]:
        try:
            result = await self.db.execute(
                select(Contact).order_by(Contact.created_at, Contact.id),
            )
        except SQLAlchemyError as e:
            raise UnexpectedError(_driver_message(e)) from e
        return list(result.scalars().all())

    async def find_by_id(self, raw_id: str) -> Contact:
        contact_id = parse_contact_id(raw_id)
        try:
            result = await self.db.execute(
                select(Contact).where(Contact.id == contact_id),
            )
        except SQLAlchemyError as e:
            raise UnexpectedError(_driver_message(e)) from e
        contact = result.scalar_one_or_none()
        if contact is None:
            raise ContactNotFoundError(raw_id)
        return contact
