"""API Layer — FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response is an envelope: {success: true, data, timestamp} or
      {success: false, error}

Design Decisions:
    - Thin routes delegate to services and the Lokalise client
"""
