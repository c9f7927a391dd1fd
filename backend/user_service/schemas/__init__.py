"""Pydantic Schemas — the JSON shapes accepted and returned by the user routes.

Invariants:
    - Inbound bodies are validated here once, inside core/decode_body.py
    - Outbound records are built from any UserRecord (ORM row or in-memory copy)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
