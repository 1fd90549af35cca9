"""Contact Geo API — contact capture service with read-time geocoding.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
