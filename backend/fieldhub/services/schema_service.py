"""SQL Schema Service - reference SchemaService over the field metadata tables.

Invariants:
    - Mutations require an admin caller (UnauthorizedError otherwise)
    - Collection existence checked before any field lookup
    - Each public mutation commits once; a failing batch commits nothing
    - Returned field objects are FieldRead dumps, projected by the `fields` option

Design Decisions:
    - Caller identity decided by the API layer and passed in as is_admin:
      policy evaluation stays outside this service
    - Metadata rows only, no DDL against user tables
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fieldhub.core.domain_types import CollectionName, FieldName, QueryOptions
from fieldhub.core.errors import (
    CollectionNotFoundError,
    FieldAlreadyExistsError,
    FieldNotFoundError,
    PayloadValidationError,
    SystemCollectionProtectedError,
    UnauthorizedError,
)
from fieldhub.core.field_rules import (
    is_system_collection,
    normalize_attributes,
    project_field,
    validate_field_name,
)
from fieldhub.models.collection import Collection
from fieldhub.models.field import Field
from fieldhub.schemas.field import FieldRead

logger = logging.getLogger(__name__)


class SqlSchemaService:
    """Field metadata reads and mutations backed by an AsyncSession."""

    def __init__(
        self, db: AsyncSession, *, system_collection_prefix: str, is_admin: bool,
    ):
        self.db = db
        self.system_collection_prefix = system_collection_prefix
        self.is_admin = is_admin

    # --- Reads ---------------------------------------------------

    async def find_field(
        self, collection: CollectionName, field_name: FieldName, options: QueryOptions,
    ) -> dict:
        await self._require_collection(collection)
        row = await self._require_field(collection, field_name)
        return self._serialize(row, options)

    async def find_fields(
        self, collection: CollectionName, field_names: Sequence[FieldName],
        options: QueryOptions,
    ) -> dict[str, dict]:
        await self._require_collection(collection)
        result = await self.db.execute(
            select(Field).where(
                Field.collection == collection, Field.field.in_(list(field_names)),
            ),
        )
        rows = {row.field: row for row in result.scalars().all()}
        return {
            name: self._serialize(rows[name], options)
            for name in field_names if name in rows
        }

    async def find_all_fields(
        self, collection: CollectionName, options: QueryOptions,
    ) -> list[dict]:
        await self._require_collection(collection)
        return [
            self._serialize(row, options)
            for row in await self._collection_fields(collection)
        ]

    # --- Mutations -----------------------------------------------

    async def add_field(
        self, collection: CollectionName, field_name: FieldName | None,
        attributes: Mapping[str, Any], options: QueryOptions,
    ) -> dict:
        self._require_admin("create fields", collection)
        name = validate_field_name(collection, field_name)
        await self._require_collection(collection)
        if await self._get_field(collection, name) is not None:
            raise FieldAlreadyExistsError(collection, name)

        attrs = normalize_attributes(collection, name, attributes)
        if "type" not in attrs:
            raise PayloadValidationError(
                f"Field '{name}' requires a 'type'",
            )
        row = Field(collection=collection, field=name, **attrs)
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        logger.info("Field created", extra={"collection": collection, "field": name})
        return self._serialize(row, options)

    async def change_field(
        self, collection: CollectionName, field_name: FieldName,
        attributes: Mapping[str, Any], options: QueryOptions,
    ) -> dict:
        self._require_admin("update fields", collection)
        await self._require_collection(collection)
        row = await self._apply(collection, field_name, attributes)
        await self.db.commit()
        await self.db.refresh(row)
        return self._serialize(row, options)

    async def delete_field(
        self, collection: CollectionName, field_name: FieldName, options: QueryOptions,
    ) -> dict:
        self._require_admin("delete fields", collection)
        await self._require_collection(collection)
        row = await self._require_field(collection, field_name)
        await self.db.delete(row)
        await self.db.commit()
        logger.info(
            "Field deleted", extra={"collection": collection, "field": field_name},
        )
        return {"deleted": field_name}

    async def batch_update_field(
        self, collection: CollectionName, payload: Mapping | Sequence,
        options: QueryOptions,
    ) -> list[dict]:
        """List payload: each entry names its target. Object payload: every field."""
        self._require_admin("update fields", collection)
        await self._require_collection(collection)

        if isinstance(payload, Mapping):
            targets = [
                (row.field, payload)
                for row in await self._collection_fields(collection)
            ]
        else:
            targets = [
                (self._entry_target(entry), entry) for entry in payload
            ]
        return await self._apply_batch(collection, targets, options)

    async def batch_update_field_with_ids(
        self, collection: CollectionName, ids: Sequence[FieldName],
        payload: Mapping | Sequence, options: QueryOptions,
    ) -> list[dict]:
        """Object payload applied to each id; list entries applied when their field is listed."""
        self._require_admin("update fields", collection)
        await self._require_collection(collection)

        if isinstance(payload, Mapping):
            targets = [(name, payload) for name in ids]
        else:
            wanted = set(ids)
            targets = [
                (name, entry)
                for name, entry in (
                    (self._entry_target(entry), entry) for entry in payload
                )
                if name in wanted
            ]
        return await self._apply_batch(collection, targets, options)

    async def reject_if_system_collection(self, collection: CollectionName) -> None:
        if is_system_collection(collection, self.system_collection_prefix):
            raise SystemCollectionProtectedError(collection)

    # --- Helpers -------------------------------------------------

    def _require_admin(self, action: str, collection: str) -> None:
        if not self.is_admin:
            raise UnauthorizedError(action, collection)

    async def _require_collection(self, collection: str) -> Collection:
        found = await self.db.get(Collection, collection)
        if found is None:
            raise CollectionNotFoundError(collection)
        return found

    async def _get_field(self, collection: str, name: str) -> Field | None:
        result = await self.db.execute(
            select(Field).where(Field.collection == collection, Field.field == name),
        )
        return result.scalar_one_or_none()

    async def _require_field(self, collection: str, name: str) -> Field:
        row = await self._get_field(collection, name)
        if row is None:
            raise FieldNotFoundError(collection, name)
        return row

    async def _collection_fields(self, collection: str) -> list[Field]:
        result = await self.db.execute(
            select(Field)
            .where(Field.collection == collection)
            .order_by(Field.sort.is_(None), Field.sort, Field.id),
        )
        return list(result.scalars().all())

    async def _apply(
        self, collection: str, name: str, attributes: Mapping[str, Any],
    ) -> Field:
        row = await self._require_field(collection, name)
        for key, value in normalize_attributes(collection, name, attributes).items():
            setattr(row, key, value)
        return row

    async def _apply_batch(
        self, collection: str, targets: list[tuple[str, Mapping[str, Any]]],
        options: QueryOptions,
    ) -> list[dict]:
        rows = []
        try:
            for name, attributes in targets:
                rows.append(await self._apply(collection, name, attributes))
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        for row in rows:
            await self.db.refresh(row)
        return [self._serialize(row, options) for row in rows]

    @staticmethod
    def _entry_target(entry: Any) -> str:
        if not isinstance(entry, Mapping) or not entry.get("field"):
            raise PayloadValidationError(
                "Each batch entry must be an object with a 'field' name",
            )
        return entry["field"]

    @staticmethod
    def _serialize(row: Field, options: QueryOptions) -> dict:
        data = FieldRead.model_validate(row).model_dump(mode="json")
        return project_field(data, options.get("fields"))
