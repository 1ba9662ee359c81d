"""Pydantic Schemas — response models for API endpoints.

Invariants:
    - Domain types from core/ used for enum fields
"""
