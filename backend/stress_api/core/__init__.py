"""Core Layer: process state and pure workload computations.

Invariants:
    - Core never imports FastAPI, psutil or logging handlers
    - Every function here is testable without an HTTP client
"""
