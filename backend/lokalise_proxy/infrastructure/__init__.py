"""Infrastructure Layer — the Lokalise client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All external calls wrapped with timeout and error mapping
"""
