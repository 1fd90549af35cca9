"""Infrastructure Layer — database, geocoding client, and logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/
    - External failures mapped to core/errors.py types
"""
