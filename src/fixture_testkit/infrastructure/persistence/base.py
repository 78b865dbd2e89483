"""Mixin for models that store fixture documents.

Normalized fixture documents carry their identifier under ``_id``. Models
that mix in ``DocumentMixin`` keep the Python attribute ``id`` but store it
in a column named ``_id``, so normalized documents insert unchanged through
``SQLAlchemyAdapter``.

Usage:
    class Base(DeclarativeBase):
        pass

    class WidgetModel(DocumentMixin, Base):
        __tablename__ = "widgets"
        name: Mapped[str] = mapped_column(String(100), index=True)
        # Has: id (column "_id"), created_at
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from fixture_testkit.core.constants import STORAGE_ID_KEY


def _new_document_id() -> str:
    return uuid4().hex


class DocumentMixin:
    """Adds a string primary key stored as ``_id`` and a creation timestamp.

    Fixture ids are free-form strings, so the key is not a UUID column; new
    rows without an id get a random hex id.
    """

    id: Mapped[str] = mapped_column(
        STORAGE_ID_KEY,
        String(64),
        primary_key=True,
        default=_new_document_id,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

