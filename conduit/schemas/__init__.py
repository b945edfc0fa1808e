"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Response schemas are built from core read models, never from raw rows
      with secrets (password hashes never leave the service layer)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
