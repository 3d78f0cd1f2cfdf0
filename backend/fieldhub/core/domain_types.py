"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - CollectionName and FieldName wrap str - never mix them up in signatures
    - QueryOptions is passed through untouched from the query string
    - All valid states encoded as Enums - no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import Any, NewType


# --- Identity Types ---------------------------------------------

CollectionName = NewType("CollectionName", str)
FieldName = NewType("FieldName", str)


# --- Value Types ------------------------------------------------

QueryOptions = dict[str, Any]


# --- Enums ------------------------------------------------------

class UpdateKind(str, Enum):
    """The three call shapes a PATCH request can resolve to."""
    SINGLE = "single"
    BATCH_BY_IDS = "batch_by_ids"
    BATCH_BY_PAYLOAD = "batch_by_payload"


class FieldType(str, Enum):
    """Storage types accepted for a field definition."""
    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    BIGINT = "bigint"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    JSON = "json"
    UUID = "uuid"
    ALIAS = "alias"
