"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core entities: schemas are API contracts, entities cross the repository seam
    - Responses read core dataclasses via from_attributes, no hand-written mappers
"""
