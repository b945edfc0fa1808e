"""Infrastructure Layer — database pool, credential primitives, logging.

Invariants:
    - Infrastructure only imports core/errors.py from the core
    - All library failures mapped to typed ConduitErrors before leaving this layer

Design Decisions:
    - Thin wrappers over SQLAlchemy, passlib and PyJWT: one place to map errors
"""
