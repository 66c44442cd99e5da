"""Repositories — raw SQL over the async session, one module per table.

Invariants:
    - Every statement binds values through $n placeholders; nothing is interpolated
    - Rows are returned as plain dicts with API (camelCase) keys
    - Missing rows raise NotFoundError; routes never check for None
"""
