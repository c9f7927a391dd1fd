"""SQLAlchemy Declarative Base — metadata for the users table.

Invariants:
    - Every ORM model inherits from Base
    - Base.metadata is what DatabaseSessionManager.create_schema() creates at startup

Design Decisions:
    - Separate file for Base: models and the session manager import it without cycles
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for user service ORM models."""
    pass
