"""Root conftest - shared test configuration."""

import os

# Tests never touch a real database or a real admin secret
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ADMIN_TOKEN", "test-admin-token")
os.environ.setdefault("SYSTEM_COLLECTION_PREFIX", "fieldhub_")
