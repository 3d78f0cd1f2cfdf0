"""Field Endpoints - create, read, list, update, and delete field definitions.

Invariants:
    - Mutating requests with a missing or empty body fail before any service call
    - PATCH is classified once (core/dispatch.py) into single, batch-by-ids,
      or batch-by-payload and executed by services/field_dispatch.py
    - Query options reach the Schema Service verbatim
    - DELETE and empty batch results answer 204 with no body

Design Decisions:
    - Body declared as Any: the JSON shape (object vs array) drives dispatch,
      so it cannot be pinned to a Pydantic model
    - Success envelope {"data": ...} for every 200 response
"""

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from fieldhub.api.dependencies import get_schema_service
from fieldhub.core.dispatch import classify_update, require_payload
from fieldhub.core.domain_types import (
    CollectionName, FieldName, QueryOptions, UpdateKind,
)
from fieldhub.core.errors import PayloadValidationError
from fieldhub.core.schema_protocols import SchemaService
from fieldhub.services.field_dispatch import read_fields, run_update

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/fields", tags=["fields"])


def query_options(request: Request) -> QueryOptions:
    return dict(request.query_params)


def respond_with_data(data: Any, status_code: int = status.HTTP_200_OK) -> Response:
    if status_code == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(status_code=status_code, content={"data": data})


@router.post("/{collection}")
async def create_field(
    collection: str,
    payload: Any = Body(None),
    options: QueryOptions = Depends(query_options),
    service: SchemaService = Depends(get_schema_service),
):
    """Create a field; its name travels in the reserved `field` key."""
    payload = require_payload(payload)
    if not isinstance(payload, Mapping):
        raise PayloadValidationError("Field creation requires a JSON object payload")

    attributes = dict(payload)
    field_name = attributes.pop("field", None)
    logger.info(
        "Creating field", extra={"collection": collection, "field": field_name},
    )
    data = await service.add_field(
        CollectionName(collection), field_name, attributes, options,
    )
    return respond_with_data(data)


@router.get("/{collection}/{field}")
async def read_field(
    collection: str,
    field: str,
    options: QueryOptions = Depends(query_options),
    service: SchemaService = Depends(get_schema_service),
):
    """Read one field, or several when `field` is a comma list."""
    data = await read_fields(service, CollectionName(collection), field, options)
    return respond_with_data(data)


@router.get("/{collection}")
async def list_fields(
    collection: str,
    options: QueryOptions = Depends(query_options),
    service: SchemaService = Depends(get_schema_service),
):
    """All fields that belong to a collection."""
    data = await service.find_all_fields(CollectionName(collection), options)
    return respond_with_data(data)


@router.patch("/{collection}/{field}")
async def update_field(
    collection: str,
    field: str,
    payload: Any = Body(None),
    options: QueryOptions = Depends(query_options),
    service: SchemaService = Depends(get_schema_service),
):
    return await _update(service, collection, field, payload, options)


@router.patch("/{collection}")
async def update_collection_fields(
    collection: str,
    payload: Any = Body(None),
    options: QueryOptions = Depends(query_options),
    service: SchemaService = Depends(get_schema_service),
):
    return await _update(service, collection, None, payload, options)


@router.delete("/{collection}/{field}")
async def delete_field(
    collection: str,
    field: str,
    options: QueryOptions = Depends(query_options),
    service: SchemaService = Depends(get_schema_service),
):
    """Delete a field. The service acknowledgment is never echoed back."""
    await service.delete_field(
        CollectionName(collection), FieldName(field), options,
    )
    return respond_with_data(None, status.HTTP_204_NO_CONTENT)


async def _update(
    service: SchemaService, collection: str, field: str | None,
    payload: Any, options: QueryOptions,
) -> Response:
    update = classify_update(field, payload)
    data = await run_update(
        service, CollectionName(collection), update, payload, options,
    )
    # Batch results may be empty: a valid no-op, not an error
    if update.kind != UpdateKind.SINGLE and not data:
        return respond_with_data([], status.HTTP_204_NO_CONTENT)
    return respond_with_data(data)
