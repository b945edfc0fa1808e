"""Integrity Helpers — tell which unique constraint an IntegrityError came from.

Invariants:
    - Matching is done on the driver message, which names the constraint on
      PostgreSQL ("uq_users_email") and the columns on SQLite ("users.email")

Design Decisions:
    - Markers over dialect-specific error codes: same check for asyncpg and aiosqlite
"""

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, *markers: str) -> bool:
    """True if the driver message mentions any of `markers`."""
    detail = str(exc.orig) if exc.orig is not None else str(exc)
    return any(marker in detail for marker in markers)
