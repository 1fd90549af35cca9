"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - IO operations accessed through Protocol types, implemented by the shell
"""

from typing import Protocol

from contact_api.core.domain_types import Coordinates


class Geocoder(Protocol):
    """Contract for address-to-coordinates lookup, implemented by shell."""
    async def geocode(self, encoded_address: str) -> Coordinates: ...
