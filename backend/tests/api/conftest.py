"""Route test fixtures - recording SchemaService fake + FastAPI test client.

Invariants:
    - get_schema_service is overridden; no database is touched
    - Every Schema Service call is logged as {"method": str, "args": tuple}
    - fake.results[method] sets a return value, fake.errors[method] an exception
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fieldhub.api.dependencies import get_schema_service
from fieldhub.main import app


class FakeSchemaService:
    """Structural SchemaService double that records every call."""

    def __init__(self):
        self.log: list[dict] = []
        self.results: dict = {}
        self.errors: dict = {}

    def _record(self, method, *args, default=None):
        self.log.append({"method": method, "args": args})
        if method in self.errors:
            raise self.errors[method]
        return self.results.get(method, default)

    def called(self, method) -> list[tuple]:
        return [entry["args"] for entry in self.log if entry["method"] == method]

    @property
    def methods(self) -> list[str]:
        return [entry["method"] for entry in self.log]

    async def add_field(self, collection, field_name, attributes, options):
        return self._record(
            "add_field", collection, field_name, attributes, options,
            default={"field": field_name, **attributes},
        )

    async def find_field(self, collection, field_name, options):
        return self._record(
            "find_field", collection, field_name, options,
            default={"field": field_name},
        )

    async def find_fields(self, collection, field_names, options):
        return self._record(
            "find_fields", collection, list(field_names), options,
            default={name: {"field": name} for name in field_names},
        )

    async def find_all_fields(self, collection, options):
        return self._record("find_all_fields", collection, options, default=[])

    async def change_field(self, collection, field_name, attributes, options):
        return self._record(
            "change_field", collection, field_name, attributes, options,
            default={"field": field_name, **attributes},
        )

    async def delete_field(self, collection, field_name, options):
        return self._record(
            "delete_field", collection, field_name, options,
            default={"deleted": field_name},
        )

    async def batch_update_field(self, collection, payload, options):
        return self._record(
            "batch_update_field", collection, payload, options, default=[],
        )

    async def batch_update_field_with_ids(self, collection, ids, payload, options):
        return self._record(
            "batch_update_field_with_ids", collection, list(ids), payload, options,
            default=[],
        )

    async def reject_if_system_collection(self, collection):
        return self._record("reject_if_system_collection", collection)


@pytest.fixture
def fake_service():
    return FakeSchemaService()


@pytest.fixture
async def client(fake_service):
    """FastAPI test client with the Schema Service dependency overridden."""
    app.dependency_overrides[get_schema_service] = lambda: fake_service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
