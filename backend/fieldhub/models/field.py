"""Field ORM - one field definition (column metadata) inside a collection.

Invariants:
    - (collection, field) is unique
    - type is one of FieldType values (validated before insert, not by the DB)
    - options is free-form JSON owned by the UI/interface layer

Design Decisions:
    - Metadata only: rows describe columns, no DDL is issued against user tables
    - JSON for options: interfaces carry arbitrary configuration
"""

from datetime import datetime, timezone

from sqlalchemy import (
    String, Text, Integer, Boolean, DateTime, JSON, ForeignKey, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fieldhub.db.base import Base


class Field(Base):
    """Field entity - column definition metadata."""
    __tablename__ = "fields"
    __table_args__ = (
        UniqueConstraint("collection", "field", name="uq_fields_collection_field"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    collection: Mapped[str] = mapped_column(
        String(64), ForeignKey("collections.name", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    field: Mapped[str] = mapped_column(String(64), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    interface: Mapped[str | None] = mapped_column(String(64), nullable=True)
    options: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    readonly: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sort: Mapped[int | None] = mapped_column(Integer, nullable=True)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    collection_ref: Mapped["Collection"] = relationship(
        "Collection", back_populates="fields",
    )
