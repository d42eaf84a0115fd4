"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - Python attributes are snake_case, wire names are camelCase (alias generator)
"""
