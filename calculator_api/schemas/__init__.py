"""Pydantic Schemas — request/response validation for API endpoints.

Design Decisions:
    - Separate from core/ domain types: schemas are the wire contract
"""
