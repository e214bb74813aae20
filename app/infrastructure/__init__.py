"""Infrastructure Layer: database pool, identity provider client, logging.

Invariants:
    - Infrastructure maps third-party failures onto core/errors.py types
    - One instance of each client per process, shared by all requests

Design Decisions:
    - Thin wrappers over SQLAlchemy, joserfc and httpx keep vendor types out of core
"""
