"""ORM Models — SQLAlchemy declarative models for the persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata before create_all

Design Decisions:
    - One file per entity for locality
"""

from user_service.models.user import User  # noqa: F401
