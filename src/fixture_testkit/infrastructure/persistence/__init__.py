"""Database persistence infrastructure.

- Database: engine, sessions, drop / re-create primitives
- DocumentMixin: models storing fixture documents under ``_id``
- SQLAlchemyAdapter: the adapter handed to ``ApplicationHandle``
"""

from fixture_testkit.infrastructure.persistence.adapter import (
    ResourceCollection,
    SQLAlchemyAdapter,
    instance_to_document,
)
from fixture_testkit.infrastructure.persistence.base import DocumentMixin
from fixture_testkit.infrastructure.persistence.database import Database

__all__ = [
    "Database",
    "DocumentMixin",
    "ResourceCollection",
    "SQLAlchemyAdapter",
    "instance_to_document",
]
