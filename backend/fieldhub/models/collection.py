"""Collection ORM - a named, table-like grouping whose fields are described here.

Invariants:
    - name is the primary key and never changes
    - Deleting a collection deletes its field rows (cascade)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fieldhub.db.base import Base


class Collection(Base):
    """Collection entity - owner of field definitions."""
    __tablename__ = "collections"

    name: Mapped[str] = mapped_column(String(64), primary_key=True)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    fields: Mapped[list["Field"]] = relationship(
        "Field", back_populates="collection_ref",
        cascade="all, delete-orphan", passive_deletes=True,
    )
