"""API Layer — FastAPI routes, result mapping and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error response uses the RFC 7807 problem shape
"""
