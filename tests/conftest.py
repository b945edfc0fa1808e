"""Root conftest — shared test configuration."""

import os

# Ensure tests never talk to a real database or use a production key
os.environ.setdefault("SECRET_KEY", "conduit-test-secret")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
