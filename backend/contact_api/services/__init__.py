"""Service Layer — persistence gateway and the contact application service.

Invariants:
    - Services raise errors from core/errors.py; routes and handlers map them
"""
