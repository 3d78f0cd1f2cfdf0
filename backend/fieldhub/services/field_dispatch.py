"""Field Dispatch - executes classified field requests against the Schema Service.

Invariants:
    - Exactly one Schema Service mutation per update request
    - The system-collection guard runs before any batch call
    - Errors from the Schema Service propagate unchanged

Design Decisions:
    - One dispatch function per request family, consuming the variants from
      core/dispatch.py - routes never branch on payload shape themselves
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from fieldhub.core.dispatch import (
    BatchByIds, BatchByPayload, SingleUpdate, UpdateRequest, split_field_names,
)
from fieldhub.core.domain_types import CollectionName, FieldName, QueryOptions
from fieldhub.core.schema_protocols import SchemaService

logger = logging.getLogger(__name__)


async def read_fields(
    service: SchemaService, collection: CollectionName, field: str,
    options: QueryOptions,
) -> Any:
    """Single lookup for one name, multi lookup for a comma list."""
    names = split_field_names(field)
    if len(names) > 1:
        logger.info(
            "Reading multiple fields",
            extra={"collection": collection, "field_count": len(names)},
        )
        return await service.find_fields(collection, names, options)
    return await service.find_field(collection, names[0], options)


async def run_update(
    service: SchemaService, collection: CollectionName, request: UpdateRequest,
    payload: Mapping | Sequence, options: QueryOptions,
) -> Any:
    """Route one classified PATCH to its Schema Service call."""
    logger.info(
        f"Dispatching {request.kind.value} update",
        extra={"collection": collection, "update_kind": request.kind.value},
    )
    if isinstance(request, SingleUpdate):
        return await service.change_field(
            collection, request.field, payload, options,
        )
    if isinstance(request, (BatchByIds, BatchByPayload)):
        return await run_batch(service, collection, request, payload, options)
    raise TypeError(f"Unknown update request: {request!r}")


async def run_batch(
    service: SchemaService, collection: CollectionName,
    request: BatchByIds | BatchByPayload, payload: Mapping | Sequence,
    options: QueryOptions,
) -> list:
    """Guard the collection, then batch by explicit ids or by payload."""
    await service.reject_if_system_collection(collection)

    if isinstance(request, BatchByIds):
        result = await service.batch_update_field_with_ids(
            collection, list(request.ids), payload, options,
        )
    else:
        result = await service.batch_update_field(collection, payload, options)

    logger.info(
        "Batch update finished",
        extra={"collection": collection, "field_count": len(result or [])},
    )
    return result
