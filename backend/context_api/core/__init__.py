"""Core Layer — pure domain logic, no IO, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Functions here are pure and deterministic
"""
