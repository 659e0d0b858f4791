"""SQLAlchemy ORM base and model registry."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all TMF entity, child and subscription tables."""

    pass
