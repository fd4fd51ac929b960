"""Parity API Package — minimal identifier parity validation service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
