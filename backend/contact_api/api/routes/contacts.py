"""Contact Routes — create, list, and fetch-with-coordinates.

Invariants:
    - POST /contact checks field groups in fixed order before persisting;
      any failure during creation is a 400
    - GET /contact/{contact_id} takes the id as a plain string so malformed ids
      reach the repository and map to 404 "Invalid contact ID"
    - Coordinates appear only on the single-contact response
    - Domain errors propagate to the global handlers (api/error_handlers.py)
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from contact_api.core.contact_rules import check_contact_payload
from contact_api.core.errors import (
    ContactApiError, ContactValidationError, PersistenceWriteError,
)
from contact_api.schemas.contact import ContactCreate, ContactResponse
from contact_api.services.contact_service import ContactService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/contact", tags=["contacts"])


def get_contact_service(request: Request) -> ContactService:
    """FastAPI dependency: the service built during application startup."""
    service = getattr(request.app.state, "contact_service", None)
    if service is None:
        raise RuntimeError("Contact service not initialized")
    return service


@router.post(
    "", response_model=ContactResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_contact(
    body: ContactCreate,
    service: ContactService = Depends(get_contact_service),
):
    """Validate and persist a new contact."""
    fields = body.to_fields()
    error = check_contact_payload(fields)
    if error:
        raise ContactValidationError(error)
    try:
        return await service.create_contact(fields)
    except PersistenceWriteError:
        raise
    except ContactApiError as e:
        raise PersistenceWriteError(e.message) from e
    except Exception as e:
        logger.error(f"Failed to create contact: {e}", exc_info=True)
        raise PersistenceWriteError(str(e)) from e


@router.get(
    "", response_model=list[ContactResponse],
    response_model_exclude_none=True,
)
async def list_contacts(
    service: ContactService = Depends(get_contact_service),
):
    """Every stored contact, without coordinates."""
    return await service.list_contacts()


@router.get(
    "/{contact_id}", response_model=ContactResponse,
    response_model_exclude_none=True,
)
async def get_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
):
    """One contact with lat/lng from the geocoding provider."""
    return await service.get_contact(contact_id)
