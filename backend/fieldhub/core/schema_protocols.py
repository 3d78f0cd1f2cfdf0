"""Boundary Protocols - contract between the field controller and the schema store.

Invariants:
    - The controller talks to field metadata ONLY through SchemaService
    - Query options are forwarded verbatim; implementations decide what they mean
    - Implementations raise FieldHubError subclasses (core/errors.py), never return error dicts

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, the controller awaits each call once
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from fieldhub.core.domain_types import CollectionName, FieldName, QueryOptions


class SchemaService(Protocol):
    """Contract for field metadata reads and mutations - implemented by services/."""

    async def add_field(
        self, collection: CollectionName, field_name: FieldName | None,
        attributes: Mapping[str, Any], options: QueryOptions,
    ) -> dict: ...

    async def find_field(
        self, collection: CollectionName, field_name: FieldName, options: QueryOptions,
    ) -> dict: ...

    async def find_fields(
        self, collection: CollectionName, field_names: Sequence[FieldName],
        options: QueryOptions,
    ) -> dict[str, dict]: ...

    async def find_all_fields(
        self, collection: CollectionName, options: QueryOptions,
    ) -> list[dict]: ...

    async def change_field(
        self, collection: CollectionName, field_name: FieldName,
        attributes: Mapping[str, Any], options: QueryOptions,
    ) -> dict: ...

    async def delete_field(
        self, collection: CollectionName, field_name: FieldName, options: QueryOptions,
    ) -> Any: ...

    async def batch_update_field(
        self, collection: CollectionName, payload: Mapping | Sequence,
        options: QueryOptions,
    ) -> list[dict]: ...

    async def batch_update_field_with_ids(
        self, collection: CollectionName, ids: Sequence[FieldName],
        payload: Mapping | Sequence, options: QueryOptions,
    ) -> list[dict]: ...

    async def reject_if_system_collection(self, collection: CollectionName) -> None: ...
