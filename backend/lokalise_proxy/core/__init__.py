"""Core Layer — pure proxy logic, no IO, no async, no environment access.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the imperative shell: resolution, payload
      classification and reshaping are testable without HTTP
"""
