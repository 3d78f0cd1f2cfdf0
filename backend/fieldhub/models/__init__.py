"""ORM Models - metadata tables behind the reference Schema Service.

Invariants:
    - All models inherit from Base (db/base.py)
    - Collection is the aggregate root; every Field belongs to one

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from fieldhub.models.collection import Collection  # noqa: F401
from fieldhub.models.field import Field  # noqa: F401
