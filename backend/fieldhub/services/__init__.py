"""Services Layer - IO-facing orchestration around the pure core.

Invariants:
    - field_dispatch talks to the SchemaService protocol only
    - schema_service is the one place that touches field metadata tables
"""
