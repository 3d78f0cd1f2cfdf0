"""Field Schemas - public representation of a stored field definition."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class FieldRead(BaseModel):
    """Field response - what every read and mutation returns per field."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    collection: str
    field: str
    type: str
    interface: str | None = None
    options: dict[str, Any] | None = None
    required: bool = False
    readonly: bool = False
    hidden: bool = False
    sort: int | None = None
    note: str | None = None
    created_at: datetime
    updated_at: datetime
