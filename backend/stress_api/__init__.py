"""Stress Test API: synthetic HTTP endpoints for load and monitoring tools.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
