"""Schemas Layer — Pydantic models validating data that crosses the package boundary.

Invariants:
    - Schemas never import from core/ buffer logic (dependency arrows point inward)
"""
