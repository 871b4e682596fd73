"""Pydantic Schemas: request validation for API endpoints.

Invariants:
    - Schemas validate and sanitize at the system boundary, before any connection is acquired

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
