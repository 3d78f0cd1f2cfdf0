"""Request Classification - decides the call shape of field reads and updates.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - classify_update runs once per PATCH and returns exactly one variant
    - A comma at index 0 of the field segment never triggers batch mode
    - Empty payloads are rejected here, before any Schema Service call

Design Decisions:
    - Tagged variants (SingleUpdate | BatchByIds | BatchByPayload) over inline
      shape sniffing in the route: the decision is testable without HTTP
    - PATCH without a field segment is always a batch: there is no single target
    - A present field segment always batches by ids, blank names included;
      only an absent segment lets the payload pick the targets
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from fieldhub.core.domain_types import FieldName, UpdateKind
from fieldhub.core.errors import PayloadValidationError


@dataclass(frozen=True)
class SingleUpdate:
    """Direct update of one named field."""
    field: FieldName
    kind: UpdateKind = UpdateKind.SINGLE


@dataclass(frozen=True)
class BatchByIds:
    """Batch update of an explicit, ordered list of field names."""
    ids: tuple[FieldName, ...]
    kind: UpdateKind = UpdateKind.BATCH_BY_IDS


@dataclass(frozen=True)
class BatchByPayload:
    """Batch update whose targets the Schema Service resolves from the payload."""
    kind: UpdateKind = UpdateKind.BATCH_BY_PAYLOAD


UpdateRequest = SingleUpdate | BatchByIds | BatchByPayload


def split_field_names(raw: str | None) -> list[FieldName]:
    """Split a comma-delimited field segment. Names trimmed; order, duplicates and blanks kept."""
    if not raw:
        return []
    return [FieldName(name.strip()) for name in raw.split(",")]


def require_payload(payload: Any) -> Mapping | Sequence:
    """Reject missing, empty, or scalar request bodies."""
    if payload is None:
        raise PayloadValidationError()
    if not isinstance(payload, (Mapping, list)):
        raise PayloadValidationError("Payload must be a JSON object or array")
    if not payload:
        raise PayloadValidationError()
    return payload


def is_aggregate_sequence(payload: Any) -> bool:
    """True when the body is a sequence whose first element is itself structured."""
    return (
        isinstance(payload, list)
        and len(payload) > 0
        and isinstance(payload[0], (Mapping, list))
    )


def has_field_list(field: str | None) -> bool:
    """True when the field segment holds a comma after its first character."""
    return bool(field) and field.find(",") > 0


def classify_update(field: str | None, payload: Any) -> UpdateRequest:
    """Resolve a PATCH request into one of the three update shapes.

    Batch mode is entered when the payload is a sequence of structured
    entries, or the field segment lists several names. Otherwise the
    request targets the single field named in the path.
    """
    payload = require_payload(payload)
    batch = is_aggregate_sequence(payload) or has_field_list(field)

    if not batch and field:
        if not isinstance(payload, Mapping):
            raise PayloadValidationError(
                "Single field update requires a JSON object payload",
            )
        return SingleUpdate(field=FieldName(field))

    if field:
        return BatchByIds(ids=tuple(split_field_names(field)))
    return BatchByPayload()
