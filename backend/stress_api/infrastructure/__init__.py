"""Infrastructure Layer: host-process probes and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or routes
"""
