"""Pydantic Schemas — response shapes for API endpoints.

Invariants:
    - Schemas describe the wire format at the system boundary

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
