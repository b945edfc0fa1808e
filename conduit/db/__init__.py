"""Database Declarations — the SQLAlchemy Base shared by every ORM model.

Invariants:
    - Engines and sessions live in infrastructure/database.py, not here

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
