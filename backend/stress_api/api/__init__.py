"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies

Design Decisions:
    - Thin routes delegate the math to core.workloads
"""
