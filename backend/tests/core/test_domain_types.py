"""Domain Types — identity/value types and the field map."""

from dataclasses import FrozenInstanceError
from uuid import uuid4

import pytest

from contact_api.core.domain_types import CONTACT_FIELDS, ContactId, Coordinates


def test_contact_id_wraps_uuid():
    uid = uuid4()
    assert ContactId(uid) == uid


def test_coordinates_are_immutable():
    point = Coordinates(lat=59.3251172, lng=18.0710935)
    with pytest.raises(FrozenInstanceError):
        point.lat = 0.0


def test_contact_fields_cover_the_eight_required_attributes():
    assert len(CONTACT_FIELDS) == 8
    assert CONTACT_FIELDS["zip_code"] == "zipCode"
    assert all(k == v for k, v in CONTACT_FIELDS.items() if k != "zip_code")
