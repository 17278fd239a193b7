"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Response schemas read ORM rows directly (from_attributes=True)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
