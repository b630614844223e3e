"""API Layer — FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - Routes never contain business logic (delegate to services/)
"""
