"""Pydantic Schemas - response shapes for field metadata.

Invariants:
    - Schemas are API contracts; models are persistence
    - Request payloads stay untyped: their shape decides the update dispatch
"""
