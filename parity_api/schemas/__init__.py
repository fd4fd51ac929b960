"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe wire shapes only; core/ never imports them
"""
