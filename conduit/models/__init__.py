"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Relationship edges (follows, favorites) carry named unique constraints

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from conduit.models.user import User  # noqa: F401
from conduit.models.article import Article  # noqa: F401
from conduit.models.follow import Follow  # noqa: F401
from conduit.models.favorite import Favorite  # noqa: F401
from conduit.models.tag import Tag  # noqa: F401
