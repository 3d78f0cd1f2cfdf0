"""Infrastructure Layer - database session management and logging setup.

Invariants:
    - Everything here does IO or configures process-wide state
    - core/ never imports from this package
"""
