"""Context API Package — recommendation context REST layer.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
