"""Route Modules — one file per Lokalise resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services/core)
    - Credentials and scope arrive only through api/dependencies.py
"""
