"""API Dependencies - builds the per-request Schema Service.

Invariants:
    - Routes receive a SchemaService, never a session or a concrete class
    - Admin status comes from the X-Fieldhub-Token header only

Design Decisions:
    - FastAPI Depends over a service locator: tests swap the collaborator
      through app.dependency_overrides[get_schema_service]
"""

import hmac

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from fieldhub.config import get_settings
from fieldhub.core.schema_protocols import SchemaService
from fieldhub.infrastructure.database import get_db
from fieldhub.services.schema_service import SqlSchemaService


def is_admin_token(token: str | None, admin_token: str) -> bool:
    if not token or not admin_token:
        return False
    return hmac.compare_digest(token.encode(), admin_token.encode())


async def get_schema_service(
    db: AsyncSession = Depends(get_db),
    x_fieldhub_token: str | None = Header(None),
) -> SchemaService:
    """FastAPI dependency for the field metadata collaborator."""
    settings = get_settings()
    return SqlSchemaService(
        db,
        system_collection_prefix=settings.system_collection_prefix,
        is_admin=is_admin_token(x_fieldhub_token, settings.admin_token),
    )
