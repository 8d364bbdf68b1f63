"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (plugin input) before any upstream call
    - Unknown fields are kept and forwarded: Lokalise accepts many optional options

Design Decisions:
    - Only the fields the proxy depends on are declared; the rest pass through so
      new Lokalise options need no proxy release
"""
