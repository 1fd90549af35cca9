"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
"""

from contact_api.models.contact import Contact  # noqa: F401
