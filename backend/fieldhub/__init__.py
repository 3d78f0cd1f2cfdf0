"""FieldHub - HTTP API for managing field definitions of named collections."""
