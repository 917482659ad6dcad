"""SQLAlchemy Declarative Base - shared base class for the ORM models.

Invariants:
    - All models inherit from Base
    - Base.metadata is what startup uses to create the schema

Design Decisions:
    - Separate file for Base: models and infrastructure import it without cycles
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all workout-log ORM models."""
    pass
