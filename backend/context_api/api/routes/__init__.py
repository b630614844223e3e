"""Route Modules — one file per API group.

Invariants:
    - Each module defines its own APIRouter with tags
    - Every recommendation route is GET-only and returns ContextResponse[Item]
"""
