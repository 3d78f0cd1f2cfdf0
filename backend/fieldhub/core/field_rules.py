"""Field Rules - pure validation and shaping of field definitions.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Only attributes in FIELD_ATTRIBUTES ever reach the metadata store
    - A field cannot be renamed through an update payload

Design Decisions:
    - Raise typed errors instead of returning error dicts: callers are service
      methods whose errors propagate straight to the HTTP error handler
"""

import re
from collections.abc import Mapping
from typing import Any

from fieldhub.core.domain_types import FieldType
from fieldhub.core.errors import FieldOperationError, PayloadValidationError

FIELD_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
MAX_FIELD_NAME_LENGTH = 64

FIELD_ATTRIBUTES = frozenset({
    "type", "interface", "options", "required",
    "readonly", "hidden", "sort", "note",
})
BOOLEAN_ATTRIBUTES = frozenset({"required", "readonly", "hidden"})


def validate_field_name(collection: str, name: Any) -> str:
    """Field names must be identifiers of at most 64 characters."""
    if not name or not isinstance(name, str):
        raise PayloadValidationError("Payload must include a 'field' name")
    if len(name) > MAX_FIELD_NAME_LENGTH or not FIELD_NAME_PATTERN.match(name):
        raise FieldOperationError(
            f"Invalid field name '{name}'", collection, name,
        )
    return name


def validate_field_type(collection: str, name: str, value: Any) -> str:
    try:
        return FieldType(value).value
    except ValueError:
        raise FieldOperationError(
            f"Unknown field type '{value}'", collection, name,
        ) from None


def normalize_attributes(
    collection: str, name: str, attributes: Mapping[str, Any],
) -> dict[str, Any]:
    """Filter an update payload down to storable attributes.

    A `field` key is tolerated when it repeats the target name. Anything
    else outside FIELD_ATTRIBUTES is rejected.
    """
    attrs = dict(attributes)
    renamed = attrs.pop("field", name)
    if renamed != name:
        raise FieldOperationError(
            f"Field '{name}' cannot be renamed to '{renamed}'", collection, name,
        )

    unknown = sorted(set(attrs) - FIELD_ATTRIBUTES)
    if unknown:
        raise FieldOperationError(
            f"Unknown field attribute(s): {', '.join(unknown)}", collection, name,
        )

    if "type" in attrs:
        attrs["type"] = validate_field_type(collection, name, attrs["type"])
    for key in BOOLEAN_ATTRIBUTES & set(attrs):
        if not isinstance(attrs[key], bool):
            raise FieldOperationError(
                f"Attribute '{key}' must be a boolean", collection, name,
            )
    if "options" in attrs and attrs["options"] is not None and not isinstance(attrs["options"], Mapping):
        raise FieldOperationError(
            "Attribute 'options' must be an object", collection, name,
        )
    if "sort" in attrs and attrs["sort"] is not None and (
        isinstance(attrs["sort"], bool) or not isinstance(attrs["sort"], int)
    ):
        raise FieldOperationError(
            "Attribute 'sort' must be an integer", collection, name,
        )
    return attrs


def is_system_collection(collection: str, prefix: str) -> bool:
    return bool(prefix) and collection.startswith(prefix)


def project_field(data: dict[str, Any], fields_option: str | None) -> dict[str, Any]:
    """Keep only the attributes named in the `fields` query option."""
    if not fields_option:
        return data
    wanted = [name.strip() for name in fields_option.split(",") if name.strip()]
    if not wanted or "*" in wanted:
        return data
    return {key: value for key, value in data.items() if key in wanted}
