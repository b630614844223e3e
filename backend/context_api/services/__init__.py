"""Services Layer — request handlers and response assembly.

Invariants:
    - One handler class per API group (category, context, item)
    - Handlers receive collaborators in __init__; no module-level singletons
"""
