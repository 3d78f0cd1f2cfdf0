"""Database Layer - SQLAlchemy declarative base for the field metadata store.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)
"""
